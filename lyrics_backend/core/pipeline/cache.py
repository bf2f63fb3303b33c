"""
Two-tier best-effort result cache.

Maps fingerprints to keys in two independent namespaces (whole request and
per chunk) and stores JSON-serialized output lists. Any store failure is
absorbed here and reported as a miss or a no-op, so cache unavailability
never fails a request.

The tiers are not kept consistent with each other; both simply expire
under the same TTL.

Dependencies: json (stdlib), lyrics_backend.boundary.cache
System role: Cache adapter between the pipeline and the cache store
"""

import json
import logging
from typing import Any

from lyrics_backend.boundary.cache.base import CacheStore
from lyrics_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class TwoTierCache:
    """Whole-request and per-chunk cache namespaces over one store."""

    def __init__(
        self,
        store: CacheStore,
        whole_prefix: str,
        chunk_prefix: str,
        ttl_seconds: int,
    ) -> None:
        """
        Initialize cache tiers.

        Args:
            store: Backing TTL key-value store
            whole_prefix: Key prefix for whole-request results
            chunk_prefix: Key prefix for per-chunk results
            ttl_seconds: Expiry applied to every write
        """
        self.store = store
        self.whole_prefix = whole_prefix
        self.chunk_prefix = chunk_prefix
        self.ttl_seconds = ttl_seconds

    def whole_key(self, fingerprint: str) -> str:
        return f"{self.whole_prefix}{fingerprint}"

    def chunk_key(self, fingerprint: str) -> str:
        return f"{self.chunk_prefix}{fingerprint}"

    async def get_whole(self, fingerprint: str) -> list[Any] | None:
        """Cached whole-request result, or None."""
        return await self._get(self.whole_key(fingerprint), tier="whole")

    async def set_whole(self, fingerprint: str, outputs: list[Any]) -> bool:
        """Store a whole-request result. Returns False if the write was dropped."""
        return await self._set(self.whole_key(fingerprint), outputs, tier="whole")

    async def get_chunk(self, fingerprint: str) -> list[Any] | None:
        """Cached chunk result, or None."""
        return await self._get(self.chunk_key(fingerprint), tier="chunk")

    async def set_chunk(self, fingerprint: str, outputs: list[Any]) -> bool:
        """Store a chunk result. Returns False if the write was dropped."""
        return await self._set(self.chunk_key(fingerprint), outputs, tier="chunk")

    async def _get(self, key: str, tier: str) -> list[Any] | None:
        try:
            raw = await self.store.get(key)
        except Exception as e:
            log_with_context(
                logger,
                logging.WARNING,
                f"Cache lookup failed ({tier})",
                cache_key=key,
                error_type=type(e).__name__,
                error_msg=str(e),
            )
            return None

        if raw is None:
            log_with_context(logger, logging.INFO, f"Cache MISS ({tier})", cache_key=key)
            return None

        try:
            value = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"{__name__}:_get - Undecodable {tier} entry {key}: {e}")
            return None
        if not isinstance(value, list):
            logger.warning(f"{__name__}:_get - Ignoring non-list {tier} entry {key}")
            return None

        log_with_context(logger, logging.INFO, f"Cache HIT ({tier})", cache_key=key)
        return value

    async def _set(self, key: str, outputs: list[Any], tier: str) -> bool:
        try:
            await self.store.set(
                key,
                json.dumps(outputs, ensure_ascii=False),
                self.ttl_seconds,
            )
        except Exception as e:
            log_with_context(
                logger,
                logging.WARNING,
                f"Cache write failed ({tier})",
                cache_key=key,
                error_type=type(e).__name__,
                error_msg=str(e),
            )
            return False
        log_with_context(logger, logging.INFO, f"Stored {tier} result in cache", cache_key=key)
        return True
