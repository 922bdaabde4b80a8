"""Presentation state for conference thumbnails and the audio route picker."""

__version__ = "0.1.0"
