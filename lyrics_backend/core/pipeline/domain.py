"""
Pluggable domain contract for the transformation pipeline.

A domain decides which items need the expensive transform, how items are
normalized for fingerprinting, how raw transformer output is validated,
and what a streamed chunk event carries.

Dependencies: abc (stdlib)
System role: Seam between the generic pipeline and furigana / translation
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Generic, Protocol, TypeVar

from lyrics_backend.core.pipeline.chunker import Chunk

ItemT = TypeVar("ItemT")


class BatchTransformer(Protocol):
    """
    External batch transformer (an LLM call in production).

    One call covers a whole chunk. The returned list should match the
    request batch in length and order; the pipeline recovers from short
    or misaligned responses per item.
    """

    async def transform(self, contents: list[str], config: Mapping[str, Any]) -> list[Any]:
        ...


class TransformDomain(ABC, Generic[ItemT]):
    """Domain rules the pipeline delegates to."""

    name: str = "transform"

    def validate_config(self, config: Mapping[str, Any]) -> None:
        """Raise ValidationError when config is unusable. Default accepts anything."""

    def normalize_config(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """Config fields that change the output, for fingerprinting."""
        return dict(config)

    @abstractmethod
    def needs_transform(self, item: ItemT) -> bool:
        """False for pass-through items that are echoed without an upstream call."""

    @abstractmethod
    def content(self, item: ItemT) -> str:
        """Text sent to the transformer for this item."""

    @abstractmethod
    def normalize(self, item: ItemT) -> dict[str, Any]:
        """Fields of the item that influence its output."""

    @abstractmethod
    def passthrough(self, item: ItemT) -> Any:
        """Output for an item that is not transformed."""

    @abstractmethod
    def coerce_output(self, item: ItemT, raw: Any) -> Any | None:
        """Validated output for raw transformer data, or None if unusable."""

    def fallback(self, item: ItemT) -> Any:
        """Output used when the transformer returned nothing usable for item."""
        return self.passthrough(item)

    @abstractmethod
    def chunk_payload(self, chunk: Chunk[ItemT], outputs: Sequence[Any]) -> dict[str, Any]:
        """Domain fields merged into a streamed chunk event."""
