"""
Streaming event schemas for progressive chunk delivery.

Defines event types and payloads for the Server-Sent Events stream.
Each event is framed as a single ``data: <json>`` line followed by a
blank line.

Dependencies: pydantic
System role: Streaming protocol schemas
"""

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class StreamEventType(str, Enum):
    """Server-to-client event types for chunk streaming."""

    CHUNK = "chunk"
    COMPLETE = "complete"
    ERROR = "error"


class StreamEvent(BaseModel):
    """
    Base streaming event model.

    Attributes:
        type: Event type identifier
        data: Event-specific payload
    """

    type: StreamEventType
    data: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the flat JSON-serializable wire payload."""
        return {"type": self.type.value, **self.data}

    def to_sse(self) -> str:
        """Frame as a Server-Sent Events data frame."""
        return f"data: {json.dumps(self.to_dict(), ensure_ascii=False)}\n\n"

    @classmethod
    def chunk(
        cls,
        chunk_index: int,
        total_chunks: int,
        start_index: int,
        payload: Mapping[str, Any],
        completed_count: int,
    ) -> "StreamEvent":
        """Build the event for one completed chunk."""
        return cls(
            type=StreamEventType.CHUNK,
            data={
                "chunkIndex": chunk_index,
                "totalChunks": total_chunks,
                "startIndex": start_index,
                **payload,
                "completedCount": completed_count,
            },
        )

    @classmethod
    def complete(cls, total_lines: int) -> "StreamEvent":
        """Build the terminal success event."""
        return cls(type=StreamEventType.COMPLETE, data={"totalLines": total_lines})

    @classmethod
    def error(cls, message: str) -> "StreamEvent":
        """Build the terminal failure event."""
        return cls(type=StreamEventType.ERROR, data={"message": message})

