"""
Furigana service.

Applies the Japanese-text guard, then runs lines through the furigana
pipeline.

Dependencies: lyrics_backend.core.pipeline, lyrics_backend.application.domains
System role: Furigana orchestration layer
"""

import logging
from typing import Any

from lyrics_backend.application.domains.furigana import plain_segments
from lyrics_backend.application.text_detection import contains_kanji, is_japanese_text
from lyrics_backend.core.pipeline.orchestrator import PipelineResult, TransformPipeline
from lyrics_backend.models.lyrics import LyricLine
from lyrics_backend.models.pipeline import ChunkPlanInfo
from lyrics_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def has_japanese_line(lines: list[LyricLine]) -> bool:
    return any(is_japanese_text(line.words) for line in lines)


class FuriganaService:
    """Furigana annotation over the chunked pipeline."""

    def __init__(self, pipeline: TransformPipeline[LyricLine]) -> None:
        """
        Initialize furigana service.

        Args:
            pipeline: Pipeline configured with the furigana domain
        """
        self.pipeline = pipeline

    async def annotate(self, lines: list[LyricLine], force: bool = False) -> PipelineResult:
        """
        Annotate lines with furigana.

        Requests with no Japanese line (kanji together with kana) are echoed
        unannotated without touching the cache or the model, so Chinese
        lyrics are never annotated.

        Args:
            lines: Lyric lines in order
            force: Bypass both cache tiers

        Returns:
            PipelineResult: Full annotation, or a stream of chunk events

        Raises:
            UpstreamTransformError: Model call failed on the non-streaming path
        """
        if not lines:
            return PipelineResult(outputs=[])

        if not has_japanese_line(lines):
            logger.info(f"{__name__}:annotate - No Japanese text detected, skipping annotation")
            return PipelineResult(outputs=[plain_segments(line) for line in lines])

        log_with_context(
            logger,
            logging.INFO,
            "Received furigana request",
            total_lines=len(lines),
            kanji_lines=sum(1 for line in lines if contains_kanji(line.words)),
            force=force,
        )
        return await self.pipeline.execute(lines, {}, force=force)

    async def plan(self, lines: list[LyricLine], force: bool = False) -> ChunkPlanInfo:
        """Describe how annotate() would process lines, including the echo shortcut."""
        if lines and not has_japanese_line(lines):
            return ChunkPlanInfo(
                total_lines=len(lines),
                total_chunks=0,
                chunk_size=self.pipeline.options.chunk_size,
                streaming=False,
                cached=False,
            )
        return await self.pipeline.describe(lines, {}, force=force)

    @staticmethod
    def render(outputs: list[Any]) -> dict[str, Any]:
        """Response body for a complete annotation."""
        return {"annotatedLines": outputs}
