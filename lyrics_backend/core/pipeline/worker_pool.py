"""
Bounded-concurrency scheduler for chunk tasks.

Runs chunk workers with a fixed parallelism ceiling using N long-lived
asyncio workers draining a shared queue. Outcomes are delivered in
completion order; the ordered result is assembled by index, never by
arrival sequence.

Dependencies: asyncio (stdlib)
System role: Sole backpressure mechanism protecting the rate-limited upstream
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from typing import Any, TypeVar

from lyrics_backend.core.pipeline.chunker import Chunk
from lyrics_backend.core.pipeline.outcomes import ChunkOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T")

ChunkWorker = Callable[[Chunk[T]], Awaitable[list[Any]]]


class BoundedWorkerPool:
    """
    Fixed-size pool of cooperative workers over a chunk queue.

    At most ``max_parallel`` worker coroutines exist per run, so at most
    ``max_parallel`` chunk tasks are ever in flight. After a failure no
    further chunks are dispatched; chunks already in flight are left to
    finish in the background and are not cancelled.
    """

    def __init__(self, max_parallel: int = 3) -> None:
        """
        Initialize worker pool.

        Args:
            max_parallel: Concurrency ceiling for chunk tasks

        Raises:
            ValueError: If max_parallel is not positive
        """
        if max_parallel < 1:
            raise ValueError(f"max_parallel must be positive, got {max_parallel}")
        self.max_parallel = max_parallel
        self._background: set[asyncio.Task] = set()

    async def imap_unordered(
        self,
        chunks: Sequence[Chunk[T]],
        worker: ChunkWorker,
    ) -> AsyncIterator[ChunkOutcome[T]]:
        """
        Run worker over chunks, yielding outcomes as they complete.

        The iterator stops after the first failure outcome. Closing the
        iterator early stops dispatch of queued chunks.

        Args:
            chunks: Chunks to process
            worker: Async callable producing a chunk's outputs

        Yields:
            ChunkOutcome: One per finished chunk, in completion order
        """
        if not chunks:
            return

        queue: asyncio.Queue[Chunk[T]] = asyncio.Queue()
        for chunk in chunks:
            queue.put_nowait(chunk)
        finished: asyncio.Queue[ChunkOutcome[T]] = asyncio.Queue()
        stop = asyncio.Event()

        async def drain() -> None:
            while not stop.is_set():
                try:
                    chunk = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                try:
                    outputs = await worker(chunk)
                except Exception as e:
                    stop.set()
                    finished.put_nowait(ChunkOutcome.failure(chunk, e))
                else:
                    finished.put_nowait(ChunkOutcome.success(chunk, outputs))

        for _ in range(min(self.max_parallel, len(chunks))):
            task = asyncio.create_task(drain())
            self._background.add(task)
            task.add_done_callback(self._background.discard)

        remaining = len(chunks)
        try:
            while remaining:
                outcome = await finished.get()
                remaining -= 1
                yield outcome
                if not outcome.ok:
                    return
        finally:
            stop.set()
            if remaining and queue.qsize():
                logger.info(
                    f"{__name__}:imap_unordered - Dispatch stopped with {queue.qsize()} chunks queued"
                )

    async def run(
        self,
        chunks: Sequence[Chunk[T]],
        worker: ChunkWorker,
        total_items: int,
    ) -> list[Any]:
        """
        Run all chunks and assemble the ordered result.

        Each outcome is written into a pre-sized slot array at its chunk's
        start_index, so the result is in input order whatever the
        completion order was.

        Args:
            chunks: Chunks covering the whole input
            worker: Async callable producing a chunk's outputs
            total_items: Length of the full input sequence

        Returns:
            list: Per-item outputs in input order

        Raises:
            Exception: The error of the first failed chunk
        """
        slots: list[Any] = [None] * total_items
        outcomes = self.imap_unordered(chunks, worker)
        try:
            async for outcome in outcomes:
                if not outcome.ok:
                    raise outcome.error
                write_outcome(slots, outcome)
        finally:
            await outcomes.aclose()
        return slots


def write_outcome(slots: list[Any], outcome: ChunkOutcome) -> None:
    """Write a successful outcome into its index-addressed slot range."""
    chunk = outcome.chunk
    if len(outcome.outputs) != len(chunk):
        raise ValueError(
            f"Chunk {chunk.chunk_index} produced {len(outcome.outputs)} outputs for {len(chunk)} items"
        )
    slots[chunk.start_index : chunk.end_index] = outcome.outputs

