"""
Server-Sent Events response helper.

Dependencies: fastapi
System role: Frames pipeline stream events for HTTP delivery
"""

import logging
from collections.abc import AsyncGenerator

from fastapi.responses import StreamingResponse

from lyrics_backend.models.streaming import StreamEvent

logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}


def sse_response(events: AsyncGenerator[StreamEvent, None]) -> StreamingResponse:
    """
    Wrap a stream of pipeline events in a text/event-stream response.

    Args:
        events: Pipeline events in delivery order

    Returns:
        StreamingResponse: One ``data:`` frame per event
    """

    async def event_generator() -> AsyncGenerator[str, None]:
        # Closing events on disconnect stops dispatch of queued chunks
        try:
            async for event in events:
                yield event.to_sse()
        finally:
            await events.aclose()
        logger.info(f"{__name__}:sse_response - Stream closed")

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
