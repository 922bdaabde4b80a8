"""Audio route picker view model.

One ``AudioRoutePickerVM`` instance represents one activation of the picker
dialog and walks ``INACTIVE -> LOADING -> READY -> DISMISSED``. A fresh
activation always gets a fresh instance; ``DISMISSED`` is terminal.

The device query is the only suspension point. A result that arrives after
the instance was dismissed or superseded is dropped, so a stale activation
can never repopulate or reopen the sheet.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from ..domain.audio_devices import AudioDevice, AudioDeviceType
from ..domain.intents import AUDIO_ROUTE_PICKER_DIALOG, DialogHandle, DispatchFn, HideDialog
from ..domain.ports import UseCaseError
from ..usecases.load_audio_devices import LoadAudioDevices
from ..usecases.set_audio_device import SetAudioDevice

log = logging.getLogger(__name__)

_activation_ids = itertools.count(1)


class PickerState(str, Enum):
    INACTIVE = "inactive"
    LOADING = "loading"
    READY = "ready"
    DISMISSED = "dismissed"


@dataclass(frozen=True)
class AudioRouteOption:
    """Row shown on the bottom sheet."""

    type: AudioDeviceType
    icon_ref: str
    display_name: str
    selected: bool = False

    @classmethod
    def from_device(cls, device: AudioDevice) -> "AudioRouteOption":
        return cls(
            type=device.type,
            icon_ref=device.icon_ref,
            display_name=device.display_name,
            selected=device.selected,
        )


@dataclass(frozen=True)
class BottomSheetModel:
    """What the view renders when the picker is visible."""

    options: Tuple[AudioRouteOption, ...]
    on_submit: Callable[[AudioRouteOption], None]
    on_cancel: Callable[[], None]


class AudioRoutePickerVM:
    """Per-activation state for the audio route picker; no rendering here."""

    def __init__(
        self,
        *,
        load_devices: LoadAudioDevices,
        set_device: SetAudioDevice,
        dispatch: DispatchFn,
        dialog: DialogHandle = AUDIO_ROUTE_PICKER_DIALOG,
        on_changed: Optional[Callable[["AudioRoutePickerVM"], None]] = None,
    ) -> None:
        self.activation_id: int = next(_activation_ids)
        self.dialog = dialog
        self.on_changed = on_changed
        self._load_devices = load_devices
        self._set_device = set_device
        self._dispatch = dispatch
        self._state = PickerState.INACTIVE
        self._options: Tuple[AudioRouteOption, ...] = ()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def options(self) -> Tuple[AudioRouteOption, ...]:
        return self._options

    @property
    def is_visible(self) -> bool:
        return self.render() is not None

    def render(self) -> Optional[BottomSheetModel]:
        """Return the sheet model, or ``None`` while loading, empty or dismissed."""
        if self._state is not PickerState.READY or not self._options:
            return None
        return BottomSheetModel(
            options=self._options,
            on_submit=self.cmd_submit,
            on_cancel=self.cmd_cancel,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def load(self) -> None:
        """Enumerate devices once and move to ``READY`` on a usable response."""
        if self._state is not PickerState.INACTIVE:
            return
        self._set_state(PickerState.LOADING)

        try:
            devices = await self._load_devices()
        except Exception as exc:
            # A failed query reads as "no devices": the picker stays hidden.
            log.debug("Audio device query failed for activation %s: %s", self.activation_id, exc)
            return

        if self._state is not PickerState.LOADING:
            log.debug("Dropping device list for stale activation %s", self.activation_id)
            return
        if devices is None:
            return

        self._options = tuple(AudioRouteOption.from_device(device) for device in devices)
        self._set_state(PickerState.READY)

    def supersede(self) -> None:
        """Retire this activation without touching the dialog host."""
        if self._state is PickerState.DISMISSED:
            return
        self._set_state(PickerState.DISMISSED)

    # ------------------------------------------------------------------
    # Commands surfaced to View
    # ------------------------------------------------------------------
    def cmd_cancel(self) -> None:
        if self._state is PickerState.DISMISSED:
            return
        self._dismiss()

    def cmd_submit(self, option: AudioRouteOption) -> None:
        """Dismiss the sheet, then commit ``option`` to the audio subsystem."""
        if self._state is not PickerState.READY:
            log.debug("Ignoring submit in state %s", self._state.value)
            return
        self._dismiss()
        try:
            self._set_device(option.type)
        except UseCaseError as exc:
            log.warning("Audio route change to %s failed (%s): %s", option.type, exc.code, exc.message)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _dismiss(self) -> None:
        self._set_state(PickerState.DISMISSED)
        self._dispatch(HideDialog(self.dialog))

    def _set_state(self, state: PickerState) -> None:
        log.debug("Audio route picker %s: %s -> %s", self.activation_id, self._state.value, state.value)
        self._state = state
        if self.on_changed:
            self.on_changed(self)


__all__ = ["AudioRouteOption", "AudioRoutePickerVM", "BottomSheetModel", "PickerState"]
