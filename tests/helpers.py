"""
Test doubles shared across the suite.

Dependencies: asyncio
System role: Instrumented fakes for the transformer and cache store
"""

import asyncio
import json
from collections.abc import Callable, Mapping
from typing import Any

from lyrics_backend.models.lyrics import LyricLine


class RecordingTransformer:
    """
    Fake batch transformer.

    Records every batch, tracks how many calls are in flight at once, and
    can delay or fail selected batches.
    """

    def __init__(
        self,
        fn: Callable[[str, Mapping[str, Any]], Any] | None = None,
        delay_for: Callable[[list[str]], float] | None = None,
        fail_when: Callable[[list[str]], bool] | None = None,
        response: Callable[[list[str]], Any] | None = None,
    ) -> None:
        self.calls: list[list[str]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._fn = fn or (lambda text, config: f"<{config.get('target_language', '')}>{text}")
        self.delay_for = delay_for
        self.fail_when = fail_when
        self._response = response

    async def transform(self, contents: list[str], config: Mapping[str, Any]) -> Any:
        self.calls.append(list(contents))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay_for(contents) if self.delay_for else 0.001)
            if self.fail_when and self.fail_when(contents):
                raise RuntimeError("upstream exploded")
            if self._response:
                return self._response(contents)
            return [self._fn(text, config) for text in contents]
        finally:
            self.in_flight -= 1


class FailingCacheStore:
    """Cache store whose every call raises."""

    def __init__(self) -> None:
        self.get_calls = 0
        self.set_calls = 0

    async def get(self, key: str) -> str | None:
        self.get_calls += 1
        raise ConnectionError("cache down")

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self.set_calls += 1
        raise ConnectionError("cache down")

    async def ping(self) -> bool:
        return False


def make_lines(count: int, text: str = "line {i}") -> list[LyricLine]:
    """Build count timed lines with distinct words."""
    return [
        LyricLine(words=text.format(i=i), start_time_ms=str(i * 1000))
        for i in range(count)
    ]


def parse_sse(body: str) -> list[dict[str, Any]]:
    """Parse concatenated ``data:`` frames back into payload dicts, in arrival order."""
    events = []
    for frame in body.split("\n\n"):
        frame = frame.strip()
        if frame.startswith("data:"):
            events.append(json.loads(frame[len("data:"):].strip()))
    return events
