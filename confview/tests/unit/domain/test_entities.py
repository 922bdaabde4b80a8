import pytest

from confview.domain.entities import MediaType, Participant, ParticipantRole, Track, find_track


def test_participant_requires_id():
    with pytest.raises(ValueError):
        Participant("  ")


def test_participant_defaults():
    participant = Participant("p1")
    assert participant.role is ParticipantRole.PARTICIPANT
    assert participant.pinned is False
    assert participant.dominant_speaker is False


def test_find_track_matches_owner_and_media_type():
    audio = Track("p1", MediaType.AUDIO)
    video = Track("p1", MediaType.VIDEO)
    other = Track("p2", MediaType.AUDIO)

    assert find_track([other, video, audio], MediaType.AUDIO, "p1") is audio
    assert find_track([other, video, audio], MediaType.VIDEO, "p1") is video
    assert find_track([other], MediaType.VIDEO, "p2") is None
    assert find_track([], MediaType.AUDIO, "p1") is None


def test_entities_module_has_docstring():
    import confview.domain.entities as entities

    assert entities.__doc__ and "participants" in entities.__doc__
