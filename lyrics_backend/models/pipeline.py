"""
Pipeline execution plan schema.

Dependencies: pydantic
System role: Chunk-plan inspection contract
"""

from pydantic import Field

from lyrics_backend.models.lyrics import CamelModel


class ChunkPlanInfo(CamelModel):
    """How a request would be executed, without running it."""

    total_lines: int
    total_chunks: int
    chunk_size: int
    streaming: bool = Field(description="True when the request takes the streaming path")
    cached: bool = Field(description="True when a whole-request cache entry exists")
