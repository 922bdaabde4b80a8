"""Use case for switching the active audio output route.

The use case wraps audio subsystem calls and maps failures into
`UseCaseError` so the picker can log them without crashing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.audio_devices import AudioDeviceType, is_known_device
from ..domain.intents import DispatchFn, SetActiveAudioDevice
from ..domain.ports import AudioModePort, UseCaseError


@dataclass
class SetAudioDevice:
    """Use-case callable for audio route changes.

    Attributes:
        audio_mode: Subsystem receiving the fire-and-forget route command.
        dispatch: Optional store dispatch used to record the active route.
    """

    audio_mode: AudioModePort
    dispatch: Optional[DispatchFn] = None

    def __call__(self, device_type: str) -> None:
        """Commit ``device_type`` as the active route.

        Args:
            device_type: Registry identifier such as ``"BLUETOOTH"``.

        Side Effects:
            Calls ``AudioModePort.set_audio_device`` and, when wired,
            dispatches ``SetActiveAudioDevice``.

        Raises:
            UseCaseError: If the type is unknown or the subsystem call fails.
        """
        if isinstance(device_type, AudioDeviceType):
            device_type = device_type.value
        if not is_known_device(device_type):
            raise UseCaseError("UNKNOWN_AUDIO_DEVICE", f"Unknown audio device '{device_type}'.")
        try:
            self.audio_mode.set_audio_device(device_type)
        except Exception as exc:
            raise UseCaseError("AUDIO_DEVICE_SET_FAILED", str(exc)) from exc
        if self.dispatch:
            self.dispatch(SetActiveAudioDevice(device_type))
