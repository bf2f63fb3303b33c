"""
Structured logging helpers.

Context values are rendered into short, bounded strings so lyric payloads
and output lists never flood the log. Context is appended to the message
and also attached to the record as ``extra``.

Dependencies: logging (stdlib)
System role: Logging helper functions for the pipeline and routers
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a context value for logging.

    Sequences and mappings are summarized by size rather than dumped.

    Args:
        value: Value to render
        max_length: Length after which strings are truncated

    Returns:
        str: Bounded string representation
    """
    try:
        if value is None:
            rendered = "None"
        elif isinstance(value, str):
            rendered = value
        elif isinstance(value, (list, tuple)):
            rendered = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            rendered = f"dict({len(value)} keys)"
        else:
            rendered = str(value)
    except Exception as e:
        return f"<unrenderable {type(e).__name__}>"

    if len(rendered) > max_length:
        return f"{rendered[:max_length]}... (truncated, {len(rendered)} total)"
    return rendered


def _render_context(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log message with key=value context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context such as domain, cache_key, chunk_index
    """
    rendered = _render_context(context)
    if rendered:
        message = f"{message} | " + " ".join(f"{key}={val}" for key, val in rendered.items())
    logger.log(level, message, extra=rendered)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """Log exc at ERROR with traceback plus its type and message as context."""
    rendered = _render_context(context)
    rendered["error_type"] = type(exc).__name__
    rendered["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=rendered)
