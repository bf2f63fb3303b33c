"""
In-process cache store with TTL expiry.

Used in development when no Redis is configured, and in tests.

Dependencies: time (stdlib)
System role: Local stand-in for the Redis cache store
"""

import time


class InMemoryCacheStore:
    """Dictionary-backed TTL store. Not shared across processes."""

    def __init__(self, clock=time.monotonic) -> None:
        self._data: dict[str, tuple[str, float]] = {}
        self._clock = clock

    async def get(self, key: str) -> str | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._data[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._data[key] = (value, self._clock() + ttl_seconds)

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> list[str]:
        return list(self._data)
