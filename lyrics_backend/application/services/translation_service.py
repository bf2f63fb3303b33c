"""
Lyric translation service.

Runs lines through the translation pipeline and renders results as LRC.

Dependencies: lyrics_backend.core.pipeline, lyrics_backend.application.domains
System role: Translation orchestration layer
"""

import logging
from typing import Any

from lyrics_backend.application.domains.translation import render_lrc_lines
from lyrics_backend.core.pipeline.orchestrator import PipelineResult, TransformPipeline
from lyrics_backend.models.lyrics import LyricLine
from lyrics_backend.models.pipeline import ChunkPlanInfo
from lyrics_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class TranslationService:
    """Lyric translation over the chunked pipeline."""

    def __init__(self, pipeline: TransformPipeline[LyricLine]) -> None:
        """
        Initialize translation service.

        Args:
            pipeline: Pipeline configured with the translation domain
        """
        self.pipeline = pipeline

    async def translate(
        self,
        lines: list[LyricLine],
        target_language: str,
        force: bool = False,
    ) -> PipelineResult:
        """
        Translate lines into target_language.

        Args:
            lines: Lyric lines in order
            target_language: Language to translate into
            force: Bypass both cache tiers

        Returns:
            PipelineResult: Full translation, or a stream of chunk events

        Raises:
            ValidationError: Target language is blank
            UpstreamTransformError: Model call failed on the non-streaming path
        """
        log_with_context(
            logger,
            logging.INFO,
            "Received translate-lyrics request",
            total_lines=len(lines),
            target_language=target_language,
            force=force,
        )
        return await self.pipeline.execute(
            lines, {"target_language": target_language}, force=force
        )

    async def plan(
        self,
        lines: list[LyricLine],
        target_language: str,
        force: bool = False,
    ) -> ChunkPlanInfo:
        """Describe how translate() would process lines."""
        return await self.pipeline.describe(
            lines, {"target_language": target_language}, force=force
        )

    @staticmethod
    def render(lines: list[LyricLine], outputs: list[Any]) -> str:
        """LRC document for a complete translation."""
        return "\n".join(render_lrc_lines(lines, outputs))
