"""
Chunked transformation pipeline.

Architecture:
    - fingerprint.py: Deterministic content hashing for cache keys
    - chunker.py: Index-tagged chunking of ordered input
    - cache.py: Two-tier best-effort cache over a CacheStore
    - chunk_processor.py: Cache lookup / batched transform / merge per chunk
    - worker_pool.py: Bounded-concurrency scheduler with ordered assembly
    - orchestrator.py: Whole-request cache, sync path and event stream
"""

from lyrics_backend.core.pipeline.cache import TwoTierCache
from lyrics_backend.core.pipeline.chunk_processor import ChunkProcessor
from lyrics_backend.core.pipeline.chunker import Chunk, chunk_items, count_chunks
from lyrics_backend.core.pipeline.domain import BatchTransformer, TransformDomain
from lyrics_backend.core.pipeline.fingerprint import fingerprint, hash_string
from lyrics_backend.core.pipeline.orchestrator import (
    PipelineOptions,
    PipelineResult,
    TransformPipeline,
)
from lyrics_backend.core.pipeline.outcomes import ChunkOutcome
from lyrics_backend.core.pipeline.worker_pool import BoundedWorkerPool

__all__ = [
    "BatchTransformer",
    "BoundedWorkerPool",
    "Chunk",
    "ChunkOutcome",
    "ChunkProcessor",
    "PipelineOptions",
    "PipelineResult",
    "TransformDomain",
    "TransformPipeline",
    "TwoTierCache",
    "chunk_items",
    "count_chunks",
    "fingerprint",
    "hash_string",
]
