from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..domain.audio_devices import AudioDevice, build_device_list, parse_device_query
from ..domain.ports import AudioModePort


@dataclass
class LoadAudioDevices:
    """Query the audio subsystem and return the picker's device snapshot."""

    audio_mode: AudioModePort

    async def __call__(self) -> Optional[List[AudioDevice]]:
        """Return the sorted known devices, or ``None`` for an unusable response.

        Exceptions raised by the subsystem propagate; the picker decides how
        to present a failed query.
        """
        payload = await self.audio_mode.get_audio_devices()
        parsed = parse_device_query(payload)
        if parsed is None:
            return None
        devices, selected = parsed
        return build_device_list(devices, selected)
