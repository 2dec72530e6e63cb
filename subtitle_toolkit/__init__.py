"""Subtitle toolkit: clean, join and transcribe SRT files."""

__version__ = "0.1.0"
