"""
Explicit chunk outcome values.

Workers never let exceptions escape into the scheduler; each chunk finishes
as either a success carrying its outputs or a failure carrying the error.

Dependencies: dataclasses (stdlib)
System role: Result type folded by the scheduler and the stream emitter
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lyrics_backend.core.pipeline.chunker import Chunk

T = TypeVar("T")


@dataclass(frozen=True)
class ChunkOutcome(Generic[T]):
    """
    Outcome of processing one chunk.

    Attributes:
        chunk: The chunk that was processed
        outputs: Per-item outputs in intra-chunk order (success only)
        error: Exception raised while processing (failure only)
    """

    chunk: Chunk[T]
    outputs: tuple[Any, ...] = ()
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, chunk: Chunk[T], outputs: list[Any]) -> "ChunkOutcome[T]":
        return cls(chunk=chunk, outputs=tuple(outputs))

    @classmethod
    def failure(cls, chunk: Chunk[T], error: Exception) -> "ChunkOutcome[T]":
        return cls(chunk=chunk, error=error)
