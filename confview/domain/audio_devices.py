"""Audio output device registry and enumeration normalization.

Call context:
    ``LoadAudioDevices`` hands the raw subsystem response to
    ``parse_device_query`` and ``AudioRoutePickerVM`` turns the parsed result
    into picker rows with ``build_device_list``.

Identifiers not present in ``KNOWN_AUDIO_DEVICES`` are dropped so newer
audio subsystems can report routes this client does not know about yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple


class AudioDeviceType(str, Enum):
    """Device identifiers understood by the audio subsystem."""

    BLUETOOTH = "BLUETOOTH"
    EARPIECE = "EARPIECE"
    HEADPHONES = "HEADPHONES"
    SPEAKER = "SPEAKER"


@dataclass(frozen=True)
class DeviceInfo:
    """Static presentation metadata for a known device type."""

    type: AudioDeviceType
    text: str
    icon_name: str


KNOWN_AUDIO_DEVICES: Mapping[str, DeviceInfo] = {
    info.type.value: info
    for info in (
        DeviceInfo(AudioDeviceType.BLUETOOTH, "Bluetooth", "bluetooth"),
        DeviceInfo(AudioDeviceType.EARPIECE, "Phone", "phone-talk"),
        DeviceInfo(AudioDeviceType.HEADPHONES, "Headphones", "headset"),
        DeviceInfo(AudioDeviceType.SPEAKER, "Speaker", "volume"),
    )
}


@dataclass(frozen=True)
class AudioDevice:
    """One row of an enumeration snapshot."""

    type: AudioDeviceType
    display_name: str
    icon_ref: str
    selected: bool = False


DeviceQuery = Tuple[Tuple[Any, ...], Optional[str]]


def is_known_device(device_type: Any) -> bool:
    """Return True when ``device_type`` names a registry entry."""
    return _token(device_type) in KNOWN_AUDIO_DEVICES


def parse_device_query(payload: Any) -> Optional[DeviceQuery]:
    """Extract ``(devices, selected)`` from a subsystem response.

    Accepts a mapping or an object with ``devices`` and ``selected``
    attributes. Returns ``None`` when the response carries no usable device
    array; the caller treats that like a query that never completed.
    Individual entries are passed through untouched; ``build_device_list``
    drops anything that is not a known identifier.
    """
    if payload is None:
        return None
    if isinstance(payload, Mapping):
        raw_devices = payload.get("devices")
        raw_selected = payload.get("selected")
    else:
        raw_devices = getattr(payload, "devices", None)
        raw_selected = getattr(payload, "selected", None)

    if raw_devices is None or isinstance(raw_devices, (str, bytes, Mapping)):
        return None
    try:
        items = list(raw_devices)
    except TypeError:
        return None

    selected = raw_selected if isinstance(raw_selected, str) else None
    return tuple(items), selected


def build_device_list(devices: Iterable[Any], selected: Optional[str]) -> List[AudioDevice]:
    """Map raw identifiers to known devices, mark the active one, sort by name."""
    seen = set()
    result: List[AudioDevice] = []
    for raw in devices:
        info = KNOWN_AUDIO_DEVICES.get(_token(raw))
        if info is None or info.type in seen:
            continue
        seen.add(info.type)
        result.append(
            AudioDevice(
                type=info.type,
                display_name=info.text,
                icon_ref=info.icon_name,
                selected=_token(raw) == selected,
            )
        )
    # Plain code-point ordering; display names are not locale-collated.
    result.sort(key=lambda device: (device.display_name, device.type.value))
    return result


def _token(value: Any) -> str:
    if isinstance(value, AudioDeviceType):
        return value.value
    return value if isinstance(value, str) else ""


__all__ = [
    "AudioDevice",
    "AudioDeviceType",
    "DeviceInfo",
    "DeviceQuery",
    "KNOWN_AUDIO_DEVICES",
    "build_device_list",
    "is_known_device",
    "parse_device_query",
]
