"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from lyrics_backend.configs.base import BaseSettings
from lyrics_backend.configs.cache import CacheSettings
from lyrics_backend.configs.llm import LLMSettings
from lyrics_backend.configs.pipeline import PipelineSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    pipeline: PipelineSettings = PipelineSettings()
    cache: CacheSettings = CacheSettings()
    llm: LLMSettings = LLMSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
