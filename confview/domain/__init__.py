"""Domain package exports for conference entities, intents and device registry."""

from .audio_devices import (
    KNOWN_AUDIO_DEVICES,
    AudioDevice,
    AudioDeviceType,
    build_device_list,
    parse_device_query,
)
from .entities import (
    LargeVideoState,
    MediaType,
    Participant,
    ParticipantId,
    ParticipantRole,
    Track,
    find_track,
)
from .intents import (
    AUDIO_ROUTE_PICKER_DIALOG,
    DispatchFn,
    HideDialog,
    Intent,
    SetActiveAudioDevice,
    SetPinnedParticipant,
)

__all__ = [
    "AUDIO_ROUTE_PICKER_DIALOG",
    "AudioDevice",
    "AudioDeviceType",
    "DispatchFn",
    "HideDialog",
    "Intent",
    "KNOWN_AUDIO_DEVICES",
    "LargeVideoState",
    "MediaType",
    "Participant",
    "ParticipantId",
    "ParticipantRole",
    "SetActiveAudioDevice",
    "SetPinnedParticipant",
    "Track",
    "build_device_list",
    "find_track",
    "parse_device_query",
]
