"""Adapters implementing the domain ports for offline use and tests."""

from .audio_mode_mock import AudioModeMock
from .store_memory import InMemoryConferenceStore

__all__ = ["AudioModeMock", "InMemoryConferenceStore"]
