"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_cache_store,
    get_furigana_service,
    get_service_cache,
    get_translation_service,
)

__all__ = [
    "get_cache_store",
    "get_furigana_service",
    "get_service_cache",
    "get_translation_service",
]
