"""
Cache store contract.

Dependencies: typing (stdlib)
System role: Interface between the pipeline and any TTL key-value store
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """
    TTL key-value store used by the pipeline cache tiers.

    Implementations may raise on any call; the pipeline treats every
    failure as a miss (get) or a no-op (set).
    """

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when absent or expired."""
        ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store value under key, expiring after ttl_seconds."""
        ...

    async def ping(self) -> bool:
        """Return True when the store is reachable."""
        ...
