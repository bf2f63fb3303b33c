"""API routers."""

from .furigana import router as furigana_router
from .health import router as health_router
from .translation import router as translation_router

__all__ = [
    "furigana_router",
    "health_router",
    "translation_router",
]
