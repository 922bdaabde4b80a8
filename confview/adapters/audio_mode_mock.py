from __future__ import annotations

import asyncio
from typing import Any, List, Optional, Sequence

from ..domain.ports import AudioModePort


class AudioModeMock(AudioModePort):
    """In-memory audio subsystem stub used for tests and offline development.

    ``gate`` holds every device query until the event is set, which lets
    callers interleave activations with a pending query.
    """

    def __init__(
        self,
        devices: Sequence[str] = ("EARPIECE", "SPEAKER"),
        selected: Optional[str] = "EARPIECE",
        *,
        capable: bool = True,
        error: Optional[BaseException] = None,
        response: Any = None,
        gate: Optional[asyncio.Event] = None,
        set_error: Optional[BaseException] = None,
    ) -> None:
        self.devices: List[str] = list(devices)
        self.selected = selected
        self.capable = capable
        self.error = error
        self.response = response
        self.gate = gate
        self.set_error = set_error
        self.capability_checks = 0
        self.queries = 0
        self.set_calls: List[str] = []

    def has_device_enumeration_capability(self) -> bool:
        self.capability_checks += 1
        return self.capable

    async def get_audio_devices(self) -> Any:
        self.queries += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return {"devices": list(self.devices), "selected": self.selected}

    def set_audio_device(self, device_type: str) -> None:
        self.set_calls.append(device_type)
        if self.set_error is not None:
            raise self.set_error
        self.selected = device_type
