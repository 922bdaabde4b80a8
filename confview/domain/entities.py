"""Conference entities read by the view models: participants, tracks, stage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

ParticipantId = str


class ParticipantRole(str, Enum):
    """Conference role reported for a participant."""

    MODERATOR = "moderator"
    PARTICIPANT = "participant"
    NONE = "none"


class MediaType(str, Enum):
    """Kind of media carried by a track."""

    AUDIO = "audio"
    VIDEO = "video"


@dataclass(frozen=True)
class Participant:
    """Roster entry for one conference member."""

    id: ParticipantId
    role: ParticipantRole = ParticipantRole.PARTICIPANT
    pinned: bool = False
    dominant_speaker: bool = False
    local: bool = False
    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("Participant id must be a non-empty string.")


@dataclass(frozen=True)
class Track:
    """Published media track bound to a participant."""

    owner_participant_id: ParticipantId
    media_type: MediaType
    muted: bool = False
    local: bool = False
    media_handle: Any = None
    """Opaque stream handle handed to the renderer as-is."""


@dataclass(frozen=True)
class LargeVideoState:
    """Which participant, if any, is currently shown on the stage."""

    participant_id: Optional[ParticipantId] = None


def find_track(
    tracks: Iterable[Track],
    media_type: MediaType,
    participant_id: ParticipantId,
) -> Optional[Track]:
    """Return the first track of ``media_type`` owned by ``participant_id``."""
    for track in tracks:
        if track.media_type == media_type and track.owner_participant_id == participant_id:
            return track
    return None


__all__ = [
    "LargeVideoState",
    "MediaType",
    "Participant",
    "ParticipantId",
    "ParticipantRole",
    "Track",
    "find_track",
]
