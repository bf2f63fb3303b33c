"""
Furigana annotation domain rules.

Lines without kanji are passed through as a single plain segment; every
other line is annotated by the transformer as a list of segments.

Dependencies: pydantic, lyrics_backend.core.pipeline
System role: Furigana plug-in for the transformation pipeline
"""

from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from lyrics_backend.application.text_detection import contains_kanji
from lyrics_backend.core.pipeline.chunker import Chunk
from lyrics_backend.core.pipeline.domain import TransformDomain
from lyrics_backend.models.lyrics import FuriganaSegment, LyricLine

_SEGMENTS = TypeAdapter(list[FuriganaSegment])


def plain_segments(line: LyricLine) -> list[dict[str, Any]]:
    return [{"text": line.words}]


class FuriganaDomain(TransformDomain[LyricLine]):
    """Domain rules for line-by-line furigana annotation."""

    name = "furigana"

    def needs_transform(self, item: LyricLine) -> bool:
        return contains_kanji(item.words)

    def content(self, item: LyricLine) -> str:
        return item.words

    def normalize(self, item: LyricLine) -> dict[str, Any]:
        return {"w": item.words, "t": item.start_time_ms}

    def passthrough(self, item: LyricLine) -> list[dict[str, Any]]:
        return plain_segments(item)

    def coerce_output(self, item: LyricLine, raw: Any) -> list[dict[str, Any]] | None:
        if not isinstance(raw, list) or not raw:
            return None
        try:
            segments = _SEGMENTS.validate_python(raw)
        except ValidationError:
            return None
        return [segment.model_dump(exclude_none=True) for segment in segments]

    def chunk_payload(self, chunk: Chunk[LyricLine], outputs: Sequence[Any]) -> dict[str, Any]:
        return {"annotatedLines": list(outputs)}
