from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..domain.entities import (
    LargeVideoState,
    MediaType,
    Participant,
    ParticipantId,
    ParticipantRole,
    Track,
    find_track,
)
from ..domain.intents import DispatchFn, SetPinnedParticipant
from ..domain.ports import ConferenceStorePort
from ..usecases.toggle_pinned_participant import TogglePinnedParticipant

THUMBNAIL_Z_ORDER = 1


@dataclass(frozen=True)
class ThumbnailRenderState:
    """Everything the filmstrip view needs to draw one tile."""

    participant_id: ParticipantId
    audio_muted: bool
    render_audio: bool
    audio_stream: Any
    video_muted: bool
    is_focused: bool
    show_avatar_and_video_in_tile: bool
    highlight_pinned: bool
    show_moderator_badge: bool
    show_dominant_speaker_badge: bool
    z_order: int = THUMBNAIL_Z_ORDER

    @property
    def show_avatar(self) -> bool:
        return self.show_avatar_and_video_in_tile

    @property
    def show_video(self) -> bool:
        return self.show_avatar_and_video_in_tile


def derive_thumbnail_state(
    participant: Participant,
    tracks: Iterable[Track],
    large_video: Optional[LargeVideoState],
) -> ThumbnailRenderState:
    """Derive the tile state for ``participant``. Pure and total."""
    tracks = list(tracks)
    audio_track = find_track(tracks, MediaType.AUDIO, participant.id)
    video_track = find_track(tracks, MediaType.VIDEO, participant.id)

    # Muted audio is silence, and local audio would be heard by its own
    # speaker; neither is rendered.
    audio_muted = audio_track is None or audio_track.muted
    render_audio = not audio_muted and not audio_track.local
    video_muted = video_track is None or video_track.muted

    focused_id = large_video.participant_id if large_video is not None else None
    is_focused = focused_id is not None and participant.id == focused_id

    return ThumbnailRenderState(
        participant_id=participant.id,
        audio_muted=audio_muted,
        render_audio=render_audio,
        audio_stream=audio_track.media_handle if render_audio else None,
        video_muted=video_muted,
        is_focused=is_focused,
        show_avatar_and_video_in_tile=not is_focused,
        highlight_pinned=bool(participant.pinned),
        show_moderator_badge=participant.role == ParticipantRole.MODERATOR,
        show_dominant_speaker_badge=bool(participant.dominant_speaker),
    )


class ThumbnailVM:
    """Binds one participant tile to the store; owns no state of its own."""

    def __init__(
        self,
        participant_id: ParticipantId,
        *,
        store: ConferenceStorePort,
        dispatch: DispatchFn,
    ) -> None:
        self.participant_id = participant_id
        self._store = store
        self._toggle_pin = TogglePinnedParticipant(store=store, dispatch=dispatch)

    def participant(self) -> Optional[Participant]:
        for participant in self._store.get_participants():
            if participant.id == self.participant_id:
                return participant
        return None

    def state(self) -> Optional[ThumbnailRenderState]:
        """Return the current render state, or ``None`` once the participant left."""
        participant = self.participant()
        if participant is None:
            return None
        tracks = [
            track
            for track in (
                self._store.get_track(MediaType.AUDIO, participant.id),
                self._store.get_track(MediaType.VIDEO, participant.id),
            )
            if track is not None
        ]
        return derive_thumbnail_state(participant, tracks, self._store.get_large_video_state())

    def cmd_click(self) -> Optional[SetPinnedParticipant]:
        return self._toggle_pin(self.participant_id)


__all__ = ["THUMBNAIL_Z_ORDER", "ThumbnailRenderState", "ThumbnailVM", "derive_thumbnail_state"]
