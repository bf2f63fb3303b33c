"""Application services."""

from lyrics_backend.application.services.furigana_service import FuriganaService
from lyrics_backend.application.services.translation_service import TranslationService

__all__ = ["FuriganaService", "TranslationService"]
