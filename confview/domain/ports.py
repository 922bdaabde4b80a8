from __future__ import annotations
from typing import Any, Awaitable, Callable, List, Optional, Protocol

from .entities import LargeVideoState, MediaType, Participant, ParticipantId, Track

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class ConferenceStorePort(Protocol):
    """Read-only view of the application store.
    Writes go through a ``DispatchFn`` as intents, never through this port.
    """

    def get_participants(self) -> List[Participant]: ...
    def get_track(
        self, media_type: MediaType, participant_id: ParticipantId
    ) -> Optional[Track]: ...
    def get_large_video_state(self) -> LargeVideoState: ...
    def subscribe(self, listener: Listener) -> Unsubscribe: ...  # fires after each change


class AudioModePort(Protocol):
    """Native audio routing subsystem."""

    def has_device_enumeration_capability(self) -> bool: ...
    def get_audio_devices(self) -> Awaitable[Any]: ...  # {"devices": [...], "selected": "..."}
    def set_audio_device(self, device_type: str) -> None: ...
