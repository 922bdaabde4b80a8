"""Typed client settings for the conference UI layer.

``load_settings`` takes a flat mapping (for example parsed from the host
application's config) plus environment overrides and returns a validated
``ClientSettings``. It is called once by the composition root.

Environment overrides:
  - CONFVIEW_LOG_LEVEL: explicit log level
  - CONFVIEW_DEBUG / CONFVIEW_DEBUG_LOGGING: truthy -> debug_logging
  - CONFVIEW_AUDIO_ROUTE_PICKER: auto / on / off
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import coerce_level, env_truthy

PICKER_MODES = ("auto", "on", "off")
_PICKER_ENV_VAR = "CONFVIEW_AUDIO_ROUTE_PICKER"
_LOG_LEVEL_ENV_VAR = "CONFVIEW_LOG_LEVEL"
_DEBUG_ENV_VARS = ("CONFVIEW_DEBUG", "CONFVIEW_DEBUG_LOGGING")


@dataclass(frozen=True)
class ClientSettings:
    """Settings resolved at composition time."""

    log_level: str = "INFO"
    debug_logging: bool = False
    audio_route_picker: str = "auto"


def load_settings(
    payload: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ClientSettings:
    """Build ``ClientSettings`` from ``payload`` and environment overrides.

    Raises:
        ValueError: If the payload is not a mapping, has unknown keys or
            carries a value that cannot be coerced.
    """
    settings = ClientSettings()
    if payload is not None:
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")
        allowed = set(ClientSettings.__annotations__.keys())
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")
        updates: Dict[str, Any] = {
            key: _coerce_value(key, payload[key]) for key in allowed if key in payload
        }
        if updates:
            settings = replace(settings, **updates)

    source = os.environ if env is None else env
    overrides: Dict[str, Any] = {}
    level = source.get(_LOG_LEVEL_ENV_VAR)
    if level:
        overrides["log_level"] = _coerce_log_level(level)
    if any(env_truthy(source.get(flag)) for flag in _DEBUG_ENV_VARS):
        overrides["debug_logging"] = True
    picker = source.get(_PICKER_ENV_VAR)
    if picker:
        overrides["audio_route_picker"] = _coerce_picker_mode(picker)
    if overrides:
        settings = replace(settings, **overrides)
    return settings


def settings_to_dict(settings: ClientSettings) -> dict:
    return asdict(settings)


def _coerce_value(key: str, raw: Any) -> Any:
    if key == "log_level":
        return _coerce_log_level(raw)
    if key == "debug_logging":
        return _coerce_bool(raw)
    if key == "audio_route_picker":
        return _coerce_picker_mode(raw)
    raise ValueError(f"Unhandled settings field: {key}")


def _coerce_log_level(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("log_level must be a level name such as 'INFO'.")
    text = value.strip().upper()
    if coerce_level(text, -1) == -1:
        raise ValueError(f"Unknown log level '{value}'.")
    return text


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return env_truthy(value)
    return bool(value)


def _coerce_picker_mode(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    text = str(value).strip().lower()
    if text not in PICKER_MODES:
        raise ValueError(f"audio_route_picker must be one of {', '.join(PICKER_MODES)}.")
    return text


__all__ = ["ClientSettings", "PICKER_MODES", "load_settings", "settings_to_dict"]
