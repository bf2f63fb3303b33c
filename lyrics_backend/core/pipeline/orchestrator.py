"""
Request orchestration and stream emission.

Per request: whole-request cache check, then either a synchronous run of
the scheduler for small inputs or a progressive event stream for large
ones. Streamed chunk events arrive in completion order and carry their
index metadata; the assembled result is always in input order.

Dependencies: lyrics_backend.core.pipeline, lyrics_backend.models.streaming
System role: Pipeline entry point used by the application services
"""

import logging
from collections.abc import AsyncGenerator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic

from lyrics_backend.boundary.cache.base import CacheStore
from lyrics_backend.core.exceptions import LyricsPipelineException
from lyrics_backend.core.pipeline.cache import TwoTierCache
from lyrics_backend.core.pipeline.chunk_processor import ChunkProcessor
from lyrics_backend.core.pipeline.chunker import Chunk, chunk_items, count_chunks
from lyrics_backend.core.pipeline.domain import BatchTransformer, ItemT, TransformDomain
from lyrics_backend.core.pipeline.fingerprint import fingerprint
from lyrics_backend.core.pipeline.worker_pool import BoundedWorkerPool, write_outcome
from lyrics_backend.models.pipeline import ChunkPlanInfo
from lyrics_backend.models.streaming import StreamEvent
from lyrics_backend.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineOptions:
    """
    Per-instance pipeline configuration.

    Attributes:
        whole_prefix: Cache key prefix for whole-request results
        chunk_prefix: Cache key prefix for per-chunk results
        chunk_size: Items per chunk
        max_parallel: Concurrency ceiling for chunk tasks
        stream_threshold_chunks: Inputs longer than chunk_size * this stream
        cache_ttl_seconds: TTL for both cache tiers
    """

    whole_prefix: str
    chunk_prefix: str
    chunk_size: int = 15
    max_parallel: int = 3
    stream_threshold_chunks: int = 2
    cache_ttl_seconds: int = 60 * 60 * 24 * 30

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.max_parallel < 1:
            raise ValueError(f"max_parallel must be positive, got {self.max_parallel}")
        if self.stream_threshold_chunks < 1:
            raise ValueError(
                f"stream_threshold_chunks must be positive, got {self.stream_threshold_chunks}"
            )

    @property
    def stream_threshold(self) -> int:
        return self.chunk_size * self.stream_threshold_chunks


@dataclass
class PipelineResult:
    """
    Result of executing a request.

    Exactly one of outputs / events is set. outputs holds the full ordered
    result (cache hit or small path); events is the lazily-run stream for
    the large path.
    """

    outputs: list[Any] | None = None
    events: AsyncGenerator[StreamEvent, None] | None = None
    cache_hit: bool = False
    total_chunks: int = 0

    @property
    def streaming(self) -> bool:
        return self.events is not None


class TransformPipeline(Generic[ItemT]):
    """Chunked, bounded-concurrency, two-tier cached transformation pipeline."""

    def __init__(
        self,
        domain: TransformDomain[ItemT],
        transformer: BatchTransformer,
        store: CacheStore,
        options: PipelineOptions,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            domain: Domain rules (pass-through, validation, event payload)
            transformer: External batch transformer
            store: Cache store shared by both tiers
            options: Chunking, concurrency and cache configuration
        """
        self.domain = domain
        self.options = options
        self.cache = TwoTierCache(
            store=store,
            whole_prefix=options.whole_prefix,
            chunk_prefix=options.chunk_prefix,
            ttl_seconds=options.cache_ttl_seconds,
        )
        self.processor = ChunkProcessor(domain, self.cache, transformer)
        self.pool = BoundedWorkerPool(options.max_parallel)

    def request_fingerprint(self, items: Sequence[ItemT], config: Mapping[str, Any]) -> str:
        """Fingerprint of the whole request (every item, pass-through included)."""
        return fingerprint(
            [self.domain.normalize(item) for item in items],
            self.domain.normalize_config(config),
        )

    def is_streaming(self, total_items: int) -> bool:
        return total_items > self.options.stream_threshold

    async def execute(
        self,
        items: Sequence[ItemT],
        config: Mapping[str, Any] | None = None,
        force: bool = False,
    ) -> PipelineResult:
        """
        Run a request through the pipeline.

        Flow:
        1. Validate config (before any chunking)
        2. Unless force, return a whole-request cache hit as-is
        3. Small input: run the scheduler to completion and cache the result
        4. Large input: return a stream of chunk events, completed by a
           terminal complete or error event

        Args:
            items: Ordered input items
            config: Domain config
            force: Bypass both cache tiers

        Returns:
            PipelineResult: Full outputs, or a lazy event stream

        Raises:
            ValidationError: Config rejected by the domain
            UpstreamTransformError: Transformer failed on the small path
        """
        config = dict(config or {})
        self.domain.validate_config(config)
        items = list(items)
        if not items:
            return PipelineResult(outputs=[])

        request_fp = self.request_fingerprint(items, config)
        if force:
            log_with_context(
                logger,
                logging.INFO,
                "Bypassing cache due to force flag",
                domain=self.domain.name,
                cache_key=self.cache.whole_key(request_fp),
            )
        else:
            cached = await self._usable_whole(request_fp, len(items))
            if cached is not None:
                return PipelineResult(outputs=cached, cache_hit=True)

        chunks = chunk_items(items, self.options.chunk_size)

        if not self.is_streaming(len(items)):
            log_with_context(
                logger,
                logging.INFO,
                "Processing small request without streaming",
                domain=self.domain.name,
                lines=len(items),
                chunks=len(chunks),
            )
            outputs = await self.pool.run(chunks, self._worker(len(chunks), config, force), len(items))
            await self.cache.set_whole(request_fp, outputs)
            return PipelineResult(outputs=outputs, total_chunks=len(chunks))

        log_with_context(
            logger,
            logging.INFO,
            "Processing large request with parallel streaming",
            domain=self.domain.name,
            lines=len(items),
            chunks=len(chunks),
        )
        return PipelineResult(
            events=self._stream(items, chunks, config, force, request_fp),
            total_chunks=len(chunks),
        )

    async def describe(
        self,
        items: Sequence[ItemT],
        config: Mapping[str, Any] | None = None,
        force: bool = False,
    ) -> ChunkPlanInfo:
        """Report how execute() would handle the request, without calling the transformer."""
        config = dict(config or {})
        self.domain.validate_config(config)
        total = len(items)
        cached = False
        if total and not force:
            fp = self.request_fingerprint(items, config)
            cached = await self._usable_whole(fp, total) is not None
        return ChunkPlanInfo(
            total_lines=total,
            total_chunks=count_chunks(total, self.options.chunk_size),
            chunk_size=self.options.chunk_size,
            streaming=self.is_streaming(total),
            cached=cached,
        )

    async def _usable_whole(self, request_fp: str, total_items: int) -> list[Any] | None:
        """Whole-request cache entry, ignored unless it covers every item."""
        cached = await self.cache.get_whole(request_fp)
        if cached is None or len(cached) != total_items:
            return None
        return cached

    def _worker(self, total_chunks: int, config: dict[str, Any], force: bool):
        async def work(chunk: Chunk[ItemT]) -> list[Any]:
            logger.info(
                f"{__name__}:work - Starting chunk {chunk.chunk_index + 1}/{total_chunks} "
                f"(size={len(chunk)}, start={chunk.start_index})"
            )
            return await self.processor.process(chunk, config, force)

        return work

    async def _stream(
        self,
        items: list[ItemT],
        chunks: list[Chunk[ItemT]],
        config: dict[str, Any],
        force: bool,
        request_fp: str,
    ) -> AsyncGenerator[StreamEvent, None]:
        slots: list[Any] = [None] * len(items)
        completed = 0
        outcomes = self.pool.imap_unordered(chunks, self._worker(len(chunks), config, force))
        try:
            async for outcome in outcomes:
                if not outcome.ok:
                    raise outcome.error
                write_outcome(slots, outcome)
                completed += 1
                chunk = outcome.chunk
                logger.info(
                    f"{__name__}:_stream - Completed chunk {chunk.chunk_index + 1}/{len(chunks)} "
                    f"(completed={completed})"
                )
                yield StreamEvent.chunk(
                    chunk_index=chunk.chunk_index,
                    total_chunks=len(chunks),
                    start_index=chunk.start_index,
                    payload=self.domain.chunk_payload(chunk, outcome.outputs),
                    completed_count=completed,
                )
        except Exception as e:
            log_exception_with_context(
                logger,
                "Error during chunk processing",
                e,
                domain=self.domain.name,
                completed=completed,
                total_chunks=len(chunks),
            )
            message = e.message if isinstance(e, LyricsPipelineException) else str(e)
            yield StreamEvent.error(message or "Unknown error")
            return
        finally:
            await outcomes.aclose()

        yield StreamEvent.complete(total_lines=len(items))
        await self.cache.set_whole(request_fp, slots)
