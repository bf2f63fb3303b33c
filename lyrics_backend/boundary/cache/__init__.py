"""Cache store implementations."""

from lyrics_backend.boundary.cache.base import CacheStore
from lyrics_backend.boundary.cache.memory_store import InMemoryCacheStore
from lyrics_backend.boundary.cache.redis_store import RedisCacheStore

__all__ = ["CacheStore", "InMemoryCacheStore", "RedisCacheStore"]
