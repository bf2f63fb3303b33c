"""
Lyric translation domain rules.

Lines with no letters (instrumental markers, symbols, blanks) are echoed
unchanged; the rest are translated into the configured target language.

Dependencies: lyrics_backend.core.pipeline
System role: Translation plug-in for the transformation pipeline
"""

from collections.abc import Mapping, Sequence
from typing import Any

from lyrics_backend.application.lrc import format_lrc_line
from lyrics_backend.application.text_detection import has_letters
from lyrics_backend.core.exceptions import ValidationError
from lyrics_backend.core.pipeline.chunker import Chunk
from lyrics_backend.core.pipeline.domain import TransformDomain
from lyrics_backend.models.lyrics import LyricLine


class TranslationDomain(TransformDomain[LyricLine]):
    """Domain rules for lyric translation."""

    name = "translation"

    def validate_config(self, config: Mapping[str, Any]) -> None:
        language = config.get("target_language")
        if not isinstance(language, str) or not language.strip():
            raise ValidationError("Target language is required", field="target_language")

    def normalize_config(self, config: Mapping[str, Any]) -> dict[str, Any]:
        return {"lang": config["target_language"].strip().casefold()}

    def needs_transform(self, item: LyricLine) -> bool:
        return has_letters(item.words)

    def content(self, item: LyricLine) -> str:
        return item.words

    def normalize(self, item: LyricLine) -> dict[str, Any]:
        return {"w": item.words, "t": item.start_time_ms}

    def passthrough(self, item: LyricLine) -> str:
        return item.words

    def coerce_output(self, item: LyricLine, raw: Any) -> str | None:
        if isinstance(raw, str) and raw.strip():
            return raw
        return None

    def chunk_payload(self, chunk: Chunk[LyricLine], outputs: Sequence[Any]) -> dict[str, Any]:
        return {"lines": render_lrc_lines(chunk.items, outputs)}


def render_lrc_lines(lines: Sequence[LyricLine], translations: Sequence[Any]) -> list[str]:
    """Pair each line's timestamp with its translation, falling back to the original words."""
    return [
        format_lrc_line(line.start_time_ms, translation or line.words)
        for line, translation in zip(lines, translations)
    ]
