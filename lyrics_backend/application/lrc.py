"""
LRC timestamp formatting.

Dependencies: re (stdlib)
System role: Renders translated lines as timed LRC text
"""

import re

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def ms_to_lrc_time(ms: str | int) -> str:
    """
    Convert a millisecond timestamp to an LRC tag.

    Args:
        ms: Milliseconds as int or numeric string

    Returns:
        str: Tag like "[01:05.30]"; "[00:00.00]" when ms is not numeric
    """
    # Leading integer only, so "1500.5" and "1500ms" read as 1500
    match = _LEADING_INT_RE.match(str(ms))
    if match is None:
        return "[00:00.00]"
    total_ms = max(int(match.group(1)), 0)

    total_seconds = total_ms // 1000
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    centiseconds = (total_ms % 1000) // 10
    return f"[{minutes:02d}:{seconds:02d}.{centiseconds:02d}]"


def format_lrc_line(start_time_ms: str, text: str) -> str:
    return f"{ms_to_lrc_time(start_time_ms)}{text}"
