from __future__ import annotations

import pytest

from confview.adapters.store_memory import InMemoryConferenceStore
from confview.domain.entities import (
    LargeVideoState,
    MediaType,
    Participant,
    ParticipantRole,
    Track,
)
from confview.domain.intents import SetPinnedParticipant
from confview.viewmodels.thumbnail_vm import ThumbnailVM, derive_thumbnail_state


def test_scenario_unmuted_remote_audio_muted_video_not_on_stage():
    participant = Participant("p1", role=ParticipantRole.PARTICIPANT)
    tracks = [
        Track("p1", MediaType.AUDIO, muted=False, local=False, media_handle="audio-1"),
        Track("p1", MediaType.VIDEO, muted=True),
    ]

    state = derive_thumbnail_state(participant, tracks, LargeVideoState("p2"))

    assert state.audio_muted is False
    assert state.render_audio is True
    assert state.audio_stream == "audio-1"
    assert state.video_muted is True
    assert state.is_focused is False
    assert state.show_avatar_and_video_in_tile is True
    assert state.show_avatar is True and state.show_video is True
    assert state.highlight_pinned is False
    assert state.show_moderator_badge is False
    assert state.show_dominant_speaker_badge is False
    assert state.z_order == 1


def test_participant_without_tracks_is_muted_both_ways_with_avatar():
    state = derive_thumbnail_state(Participant("new"), [], LargeVideoState())

    assert state.audio_muted is True
    assert state.render_audio is False
    assert state.audio_stream is None
    assert state.video_muted is True
    assert state.is_focused is False
    assert state.show_avatar_and_video_in_tile is True


@pytest.mark.parametrize("muted", [False, True])
def test_local_audio_is_never_rendered(muted):
    tracks = [Track("me", MediaType.AUDIO, muted=muted, local=True, media_handle="mic")]

    state = derive_thumbnail_state(Participant("me", local=True), tracks, LargeVideoState())

    assert state.render_audio is False
    assert state.audio_stream is None
    assert state.audio_muted is muted


def test_muted_remote_audio_is_not_rendered():
    tracks = [Track("p1", MediaType.AUDIO, muted=True)]

    state = derive_thumbnail_state(Participant("p1"), tracks, LargeVideoState())

    assert state.audio_muted is True
    assert state.render_audio is False


def test_tracks_of_other_participants_are_ignored():
    tracks = [
        Track("other", MediaType.AUDIO),
        Track("other", MediaType.VIDEO),
    ]

    state = derive_thumbnail_state(Participant("p1"), tracks, LargeVideoState())

    assert state.audio_muted is True
    assert state.video_muted is True


@pytest.mark.parametrize("large_video", [None, LargeVideoState(), LargeVideoState("p1"), LargeVideoState("p9")])
def test_tile_media_is_exact_inverse_of_focus(large_video):
    state = derive_thumbnail_state(Participant("p1"), [], large_video)

    assert state.show_avatar_and_video_in_tile is (not state.is_focused)
    expected_focus = large_video is not None and large_video.participant_id == "p1"
    assert state.is_focused is expected_focus


def test_badges_follow_role_pin_and_speaker_flags():
    participant = Participant(
        "p1",
        role=ParticipantRole.MODERATOR,
        pinned=True,
        dominant_speaker=True,
    )

    state = derive_thumbnail_state(participant, [], LargeVideoState("p1"))

    assert state.show_moderator_badge is True
    assert state.highlight_pinned is True
    assert state.show_dominant_speaker_badge is True
    assert state.show_avatar_and_video_in_tile is False


def _store() -> InMemoryConferenceStore:
    return InMemoryConferenceStore(
        participants=[Participant("p1"), Participant("p2")],
        tracks=[Track("p1", MediaType.AUDIO, media_handle="a1")],
        large_video=LargeVideoState("p2"),
    )


def test_vm_state_reads_store_tracks_and_stage():
    store = _store()
    vm = ThumbnailVM("p1", store=store, dispatch=store.dispatch)

    state = vm.state()

    assert state is not None
    assert state.render_audio is True
    assert state.video_muted is True
    assert state.is_focused is False


def test_vm_state_is_none_after_participant_left():
    store = _store()
    vm = ThumbnailVM("p1", store=store, dispatch=store.dispatch)
    store.remove_participant("p1")

    assert vm.state() is None


def test_click_pins_unpinned_participant():
    dispatched = []
    store = _store()
    vm = ThumbnailVM("p1", store=store, dispatch=dispatched.append)

    vm.cmd_click()

    assert dispatched == [SetPinnedParticipant("p1")]


def test_click_on_pinned_participant_unpins():
    dispatched = []
    store = _store()
    store.update_participant("p1", pinned=True)
    vm = ThumbnailVM("p1", store=store, dispatch=dispatched.append)

    vm.cmd_click()

    assert dispatched == [SetPinnedParticipant(None)]


def test_rapid_clicks_read_pinned_flag_at_dispatch_time():
    store = _store()
    vm = ThumbnailVM("p1", store=store, dispatch=store.dispatch)
    stale = vm.state()

    vm.cmd_click()
    vm.cmd_click()

    assert stale is not None and stale.highlight_pinned is False
    assert store.dispatched == [SetPinnedParticipant("p1"), SetPinnedParticipant(None)]
    assert all(not p.pinned for p in store.get_participants())
