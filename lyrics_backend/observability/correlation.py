"""
Per-request correlation id.

Held in a ContextVar so it follows the request through awaits and into the
tasks the worker pool spawns (tasks copy the current context on creation).

Dependencies: contextvars
System role: Request tracing across pipeline tasks and log records
"""

import uuid
from contextvars import ContextVar

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation id to the current context.

    Args:
        correlation_id: Id supplied by the caller; a short random id is generated when empty

    Returns:
        str: The id now in effect
    """
    value = correlation_id or uuid.uuid4().hex[:8]
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set("")
