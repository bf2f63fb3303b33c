"""
Cache store configuration settings.

Selects the cache backend and holds the key prefixes for both cache tiers
of every pipeline domain.

Dependencies: pydantic, pydantic_settings
System role: Cache store connection and key namespace configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lyrics_backend.configs.base import BaseSettings


class CacheSettings(BaseSettings):
    """Redis / in-memory cache configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CACHE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(default="redis", description="Cache backend: redis or memory")
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")

    furigana_prefix: str = Field(default="lyrics:furigana:")
    furigana_chunk_prefix: str = Field(default="lyrics:furigana:chunk:")
    translation_prefix: str = Field(default="lyrics:translations:")
    translation_chunk_prefix: str = Field(default="lyrics:translations:chunk:")
