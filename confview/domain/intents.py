from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .entities import ParticipantId

DialogHandle = str

AUDIO_ROUTE_PICKER_DIALOG: DialogHandle = "audio-route-picker"


@dataclass(frozen=True)
class SetPinnedParticipant:
    """Pin ``participant_id`` on the stage, or unpin everyone when ``None``."""

    participant_id: Optional[ParticipantId]


@dataclass(frozen=True)
class HideDialog:
    """Ask the dialog host to dismiss ``dialog``."""

    dialog: DialogHandle


@dataclass(frozen=True)
class SetActiveAudioDevice:
    """Record ``device_type`` as the active audio route."""

    device_type: str


Intent = Union[SetPinnedParticipant, HideDialog, SetActiveAudioDevice]
DispatchFn = Callable[[Intent], None]


__all__ = [
    "AUDIO_ROUTE_PICKER_DIALOG",
    "DialogHandle",
    "DispatchFn",
    "HideDialog",
    "Intent",
    "SetActiveAudioDevice",
    "SetPinnedParticipant",
]
