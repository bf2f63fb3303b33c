"""
FastAPI middleware for request tracing.

CorrelationMiddleware tags every request with an id (taken from
X-Correlation-ID or generated) that the log filter stamps on each record.
RequestLoggingMiddleware logs one line per request with status, latency,
and whether the response was streamed or served from cache.

Dependencies: starlette, lyrics_backend.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from lyrics_backend.observability.correlation import clear_correlation_id, set_correlation_id
from lyrics_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
CACHE_HEADERS = ("X-Furigana-Cache", "X-Lyrics-Translation-Cache")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with timing and delivery mode."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_with_context(
                logger,
                logging.ERROR,
                f"{request.method} {request.url.path} - Unhandled exception",
                error_type=type(e).__name__,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        # For SSE this is time to first byte; the stream keeps running afterwards
        log_with_context(
            logger,
            logging.INFO,
            f"{request.method} {request.url.path} - {response.status_code}",
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            streaming=response.headers.get("content-type", "").startswith("text/event-stream"),
            cache_hit=any(response.headers.get(header) == "HIT" for header in CACHE_HEADERS),
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to the request context and echo it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
