"""
Exception hierarchy for the lyrics pipeline.

Every error carries a human-readable message plus a details dict that is
returned to API clients and attached to log records.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LyricsPipelineException(Exception):
    """Base exception for all lyrics backend errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message, safe to show to clients
            details: Optional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(LyricsPipelineException):
    """Request rejected before any chunking or upstream work."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message, details)


class CacheUnavailableError(LyricsPipelineException):
    """Raised by a cache store when get/set cannot be served.

    Never escapes the cache adapter; callers see a miss or a no-op.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class UpstreamTransformError(LyricsPipelineException):
    """The external transformer failed or returned a payload that is not a list.

    The only fatal condition in chunk processing: it aborts the owning chunk
    and with it the whole request or stream.

    Attributes:
        chunk_index: Index of the chunk whose upstream call failed
    """

    def __init__(
        self,
        message: str,
        chunk_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if chunk_index is not None:
            details["chunk_index"] = chunk_index
        self.chunk_index = chunk_index
        super().__init__(message, details)
