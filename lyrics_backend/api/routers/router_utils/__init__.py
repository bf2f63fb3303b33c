"""Router helpers."""

from lyrics_backend.api.routers.router_utils.sse import SSE_HEADERS, sse_response

__all__ = ["SSE_HEADERS", "sse_response"]
