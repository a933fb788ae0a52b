"""Facade over every user-facing console string."""

from . import console, notes

__all__ = ["console", "notes"]
