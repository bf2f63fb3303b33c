"""Domain rules plugged into the transformation pipeline."""

from lyrics_backend.application.domains.furigana import FuriganaDomain
from lyrics_backend.application.domains.translation import TranslationDomain, render_lrc_lines

__all__ = ["FuriganaDomain", "TranslationDomain", "render_lrc_lines"]
