"""
Redis-backed cache store.

Wraps a redis.asyncio client and normalizes its failures into
CacheUnavailableError.

Dependencies: redis (asyncio client)
System role: Production cache store for both pipeline cache tiers
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from lyrics_backend.core.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Cache store over a redis.asyncio client."""

    def __init__(self, client: aioredis.Redis) -> None:
        """
        Initialize store.

        Args:
            client: redis.asyncio client (decode_responses=True expected)
        """
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCacheStore":
        """
        Build a store from a Redis URL.

        Connection is lazy; an unreachable server surfaces on first use.

        Args:
            url: Redis connection URL

        Returns:
            RedisCacheStore: Store bound to a new client
        """
        logger.info(f"{__name__}:from_url - Creating Redis client")
        return cls(aioredis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> str | None:
        try:
            value = await self._client.get(key)
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Redis get failed: {e}", operation="get") from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self._client.set(key, value, ex=ttl_seconds)
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Redis set failed: {e}", operation="set") from e

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError) as e:
            logger.warning(f"{__name__}:ping - Redis unreachable: {e}")
            return False

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
