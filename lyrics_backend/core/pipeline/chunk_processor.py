"""
Per-chunk unit of work.

Cache lookup, then on a miss a single batched transformer call for the
items that need it, a best-effort cache write, and a merge back into the
chunk's original order.

Dependencies: lyrics_backend.core.pipeline
System role: Worker executed by the bounded scheduler for every chunk
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic

from lyrics_backend.core.exceptions import UpstreamTransformError
from lyrics_backend.core.pipeline.cache import TwoTierCache
from lyrics_backend.core.pipeline.chunker import Chunk
from lyrics_backend.core.pipeline.domain import BatchTransformer, ItemT, TransformDomain
from lyrics_backend.core.pipeline.fingerprint import fingerprint
from lyrics_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ChunkProcessor(Generic[ItemT]):
    """Processes one chunk against the chunk cache and the transformer."""

    def __init__(
        self,
        domain: TransformDomain[ItemT],
        cache: TwoTierCache,
        transformer: BatchTransformer,
    ) -> None:
        self.domain = domain
        self.cache = cache
        self.transformer = transformer

    def chunk_fingerprint(self, items: list[ItemT], config: Mapping[str, Any]) -> str:
        """Fingerprint over the items that need transformation only."""
        return fingerprint(
            [self.domain.normalize(item) for item in items],
            self.domain.normalize_config(config),
        )

    async def process(
        self,
        chunk: Chunk[ItemT],
        config: Mapping[str, Any],
        force: bool = False,
    ) -> list[Any]:
        """
        Produce outputs for every item of the chunk, in intra-chunk order.

        Flow:
        1. Split pass-through items from items needing transformation
        2. Fingerprint the items needing transformation
        3. Unless force, serve them from the chunk cache
        4. Otherwise make one batched transformer call, with per-item fallback
        5. Best-effort write of the transformed outputs to the chunk cache

        Args:
            chunk: Chunk to process
            config: Domain config (e.g. target language)
            force: Skip the chunk-cache lookup

        Returns:
            list: One output per chunk item

        Raises:
            UpstreamTransformError: Transformer call failed or returned a
                payload that is not a list
        """
        outputs: list[Any] = [self.domain.passthrough(item) for item in chunk.items]
        positions = [i for i, item in enumerate(chunk.items) if self.domain.needs_transform(item)]
        if not positions:
            logger.debug(f"{__name__}:process - Chunk {chunk.chunk_index} is all pass-through")
            return outputs

        pending = [chunk.items[i] for i in positions]
        chunk_fp = self.chunk_fingerprint(pending, config)

        transformed = None if force else await self.cache.get_chunk(chunk_fp)
        if transformed is None:
            raw = await self._call_transformer(chunk, pending, config)
            transformed = self._validate(chunk, pending, raw)
            await self.cache.set_chunk(chunk_fp, transformed)
        else:
            transformed = self._validate(chunk, pending, transformed)

        for position, value in zip(positions, transformed):
            outputs[position] = value
        return outputs

    async def _call_transformer(
        self,
        chunk: Chunk[ItemT],
        pending: list[ItemT],
        config: Mapping[str, Any],
    ) -> list[Any]:
        contents = [self.domain.content(item) for item in pending]
        try:
            raw = await self.transformer.transform(contents, config)
        except UpstreamTransformError:
            raise
        except Exception as e:
            raise UpstreamTransformError(
                f"Transformer call failed: {e}",
                chunk_index=chunk.chunk_index,
                details={"error_type": type(e).__name__},
            ) from e

        if not isinstance(raw, (list, tuple)):
            raise UpstreamTransformError(
                "Transformer returned a malformed payload",
                chunk_index=chunk.chunk_index,
                details={"payload_type": type(raw).__name__},
            )
        return list(raw)

    def _validate(self, chunk: Chunk[ItemT], pending: list[ItemT], raw: list[Any]) -> list[Any]:
        """Align raw outputs with pending items, falling back per missing or invalid entry."""
        validated: list[Any] = []
        fallbacks = 0
        for index, item in enumerate(pending):
            value = None
            if index < len(raw) and raw[index] is not None:
                value = self.domain.coerce_output(item, raw[index])
            if value is None:
                value = self.domain.fallback(item)
                fallbacks += 1
            validated.append(value)

        if fallbacks or len(raw) != len(pending):
            log_with_context(
                logger,
                logging.WARNING,
                "Partial response mismatch; using original content for missing lines",
                domain=self.domain.name,
                chunk_index=chunk.chunk_index,
                requested=len(pending),
                received=len(raw),
                fallbacks=fallbacks,
            )
        return validated
