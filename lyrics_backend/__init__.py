"""Lyrics annotation and translation backend."""

__version__ = "0.1.0"
