"""
Pipeline configuration settings.

Chunk sizing, parallelism ceiling, streaming threshold and cache TTL for the
chunked transformation pipeline.

Dependencies: pydantic, pydantic_settings
System role: Scheduling and caching limits for upstream LLM calls
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lyrics_backend.configs.base import BaseSettings


class PipelineSettings(BaseSettings):
    """Chunking and concurrency configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=15, ge=1, description="Lines per chunk (one upstream call each)")
    max_parallel_chunks: int = Field(
        default=3,
        ge=1,
        description="Maximum chunks with an upstream call in flight at once",
    )
    stream_threshold_chunks: int = Field(
        default=2,
        ge=1,
        description="Requests longer than chunk_size * this value are streamed",
    )
    cache_ttl_seconds: int = Field(
        default=60 * 60 * 24 * 30,
        ge=1,
        description="TTL for both cache tiers (default 30 days)",
    )
