"""
Index-tagged chunking of ordered input.

Dependencies: dataclasses (stdlib)
System role: Splits a request into scheduling units, one upstream batch each
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Chunk(Generic[T]):
    """
    Contiguous slice of the input sequence.

    Attributes:
        items: Items in original order
        start_index: Offset of the first item in the full sequence
        chunk_index: Zero-based position among all chunks
    """

    items: tuple[T, ...]
    start_index: int
    chunk_index: int

    def __len__(self) -> int:
        return len(self.items)

    @property
    def end_index(self) -> int:
        """Exclusive end offset in the full sequence."""
        return self.start_index + len(self.items)


def chunk_items(items: Sequence[T], size: int) -> list[Chunk[T]]:
    """
    Split items into fixed-size chunks; the last one may be shorter.

    Args:
        items: Ordered input items
        size: Maximum items per chunk

    Returns:
        list[Chunk]: Chunks with ascending chunk_index

    Raises:
        ValueError: If size is not positive
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")

    return [
        Chunk(items=tuple(items[start : start + size]), start_index=start, chunk_index=index)
        for index, start in enumerate(range(0, len(items), size))
    ]


def count_chunks(total: int, size: int) -> int:
    """Number of chunks chunk_items would produce for total items."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return -(-total // size)
