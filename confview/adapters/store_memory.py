"""In-memory conference store used for tests, the demo entry point and
offline development.

Implements ``ConferenceStorePort`` for reads and acts as the dispatch target
for intents. Every mutation replaces immutable entities and notifies
subscribers once, synchronously, on the caller's thread.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..domain.entities import LargeVideoState, MediaType, Participant, ParticipantId, Track
from ..domain.intents import HideDialog, Intent, SetActiveAudioDevice, SetPinnedParticipant
from ..domain.ports import ConferenceStorePort, Listener, Unsubscribe

log = logging.getLogger(__name__)

TrackKey = Tuple[ParticipantId, MediaType]


class InMemoryConferenceStore(ConferenceStorePort):
    """Roster, tracks and stage state kept in plain dictionaries."""

    def __init__(
        self,
        participants: Iterable[Participant] = (),
        tracks: Iterable[Track] = (),
        large_video: Optional[LargeVideoState] = None,
    ) -> None:
        self._participants: Dict[ParticipantId, Participant] = {p.id: p for p in participants}
        self._tracks: Dict[TrackKey, Track] = {}
        for track in tracks:
            self._tracks[(track.owner_participant_id, track.media_type)] = track
        self._large_video = large_video or LargeVideoState()
        self._listeners: List[Listener] = []

        self.dispatched: List[Intent] = []
        self.hidden_dialogs: List[str] = []
        self.active_audio_device: Optional[str] = None

    # ---- ConferenceStorePort ----
    def get_participants(self) -> List[Participant]:
        return list(self._participants.values())

    def get_track(self, media_type: MediaType, participant_id: ParticipantId) -> Optional[Track]:
        return self._tracks.get((participant_id, media_type))

    def get_large_video_state(self) -> LargeVideoState:
        return self._large_video

    def subscribe(self, listener: Listener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- Dispatch boundary ----
    def dispatch(self, intent: Intent) -> None:
        """Reduce ``intent`` into the store and notify subscribers."""
        self.dispatched.append(intent)
        if isinstance(intent, SetPinnedParticipant):
            self._pin(intent.participant_id)
        elif isinstance(intent, HideDialog):
            self.hidden_dialogs.append(intent.dialog)
        elif isinstance(intent, SetActiveAudioDevice):
            self.active_audio_device = intent.device_type
        else:
            raise TypeError(f"Unsupported intent: {intent!r}")
        self._notify()

    # ---- Roster / track events ----
    def add_participant(self, participant: Participant) -> None:
        self._participants[participant.id] = participant
        self._notify()

    def update_participant(self, participant_id: ParticipantId, **changes: Any) -> Participant:
        current = self._participants.get(participant_id)
        if current is None:
            raise KeyError(participant_id)
        updated = replace(current, **changes)
        self._participants[participant_id] = updated
        self._notify()
        return updated

    def remove_participant(self, participant_id: ParticipantId) -> None:
        if self._participants.pop(participant_id, None) is None:
            return
        for key in [key for key in self._tracks if key[0] == participant_id]:
            del self._tracks[key]
        if self._large_video.participant_id == participant_id:
            self._large_video = LargeVideoState()
        self._notify()

    def add_track(self, track: Track) -> None:
        # One track per media type and owner; a republish replaces the old one.
        self._tracks[(track.owner_participant_id, track.media_type)] = track
        self._notify()

    def set_track_muted(self, participant_id: ParticipantId, media_type: MediaType, muted: bool) -> None:
        key = (participant_id, media_type)
        track = self._tracks.get(key)
        if track is None:
            raise KeyError(key)
        self._tracks[key] = replace(track, muted=bool(muted))
        self._notify()

    def remove_track(self, participant_id: ParticipantId, media_type: MediaType) -> None:
        if self._tracks.pop((participant_id, media_type), None) is not None:
            self._notify()

    def set_large_video(self, participant_id: Optional[ParticipantId]) -> None:
        self._large_video = LargeVideoState(participant_id)
        self._notify()

    def set_dominant_speaker(self, participant_id: Optional[ParticipantId]) -> None:
        for pid, participant in self._participants.items():
            speaking = pid == participant_id
            if participant.dominant_speaker != speaking:
                self._participants[pid] = replace(participant, dominant_speaker=speaking)
        self._notify()

    # ---- Internal helpers ----
    def _pin(self, participant_id: Optional[ParticipantId]) -> None:
        if participant_id is not None and participant_id not in self._participants:
            log.debug("Pin requested for unknown participant %s", participant_id)
            return
        # At most one participant is pinned process-wide.
        for pid, participant in self._participants.items():
            pinned = pid == participant_id
            if participant.pinned != pinned:
                self._participants[pid] = replace(participant, pinned=pinned)
        if participant_id is not None:
            self._large_video = LargeVideoState(participant_id)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()


__all__ = ["InMemoryConferenceStore"]
