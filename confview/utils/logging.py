"""Root logger setup driven by ``ClientSettings``.

Environment overrides (``CONFVIEW_LOG_LEVEL``, ``CONFVIEW_DEBUG``) are folded
into the settings by ``load_settings``; this module only turns the resolved
settings into a root level and handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..app.settings import ClientSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def coerce_level(value: Optional[str], fallback: int) -> int:
    """Map a level name or number string to a ``logging`` level."""
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    # getLevelName returns "Level X" strings for names it does not know.
    return candidate if isinstance(candidate, int) else fallback


def env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def settings_level(settings: ClientSettings) -> int:
    """Effective root level: ``debug_logging`` wins, else ``log_level``."""
    if settings.debug_logging:
        return logging.DEBUG
    return coerce_level(settings.log_level, logging.INFO)


def configure_logging(settings: ClientSettings) -> int:
    """Install the compact root handler once and apply the settings level.

    Safe to call again after settings change; only the level is updated
    when a handler is already present. Returns the effective level.
    """
    level = settings_level(settings)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    return level


__all__ = ["LOG_DATEFMT", "LOG_FORMAT", "coerce_level", "configure_logging", "env_truthy", "settings_level"]
