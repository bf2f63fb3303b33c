"""
Test suite for TranslationService.

System role: Verification of translation orchestration and LRC rendering
"""

import pytest

from lyrics_backend.application.domains import TranslationDomain, render_lrc_lines
from lyrics_backend.application.services import TranslationService
from lyrics_backend.core.exceptions import ValidationError
from lyrics_backend.core.pipeline.orchestrator import PipelineOptions, TransformPipeline
from lyrics_backend.models.lyrics import LyricLine
from tests.helpers import make_lines


@pytest.fixture
def service(memory_store, transformer) -> TranslationService:
    """Provide TranslationService over an in-memory pipeline."""
    pipeline = TransformPipeline(
        TranslationDomain(),
        transformer,
        memory_store,
        PipelineOptions(
            whole_prefix="lyrics:translations:",
            chunk_prefix="lyrics:translations:chunk:",
        ),
    )
    return TranslationService(pipeline)


class TestTranslationService:
    """Test suite for TranslationService.translate()."""

    @pytest.mark.asyncio
    async def test_translate_should_render_lrc_document(self, service) -> None:
        # Arrange
        lines = make_lines(2)

        # Act
        result = await service.translate(lines, "French")
        body = TranslationService.render(lines, result.outputs)

        # Assert
        assert body == "[00:00.00]<French>line 0\n[00:01.00]<French>line 1"

    @pytest.mark.asyncio
    async def test_instrumental_lines_should_keep_original_text(self, service, transformer) -> None:
        lines = [
            LyricLine(words="♪", start_time_ms="0"),
            LyricLine(words="hello", start_time_ms="2500"),
        ]

        result = await service.translate(lines, "French")

        assert TranslationService.render(lines, result.outputs) == "[00:00.00]♪\n[00:02.50]<French>hello"
        assert transformer.calls == [["hello"]]

    @pytest.mark.asyncio
    async def test_blank_language_should_raise_validation_error(self, service) -> None:
        with pytest.raises(ValidationError):
            await service.translate(make_lines(1), "  ")

    @pytest.mark.asyncio
    async def test_whole_cache_should_be_keyed_under_translations_prefix(
        self, service, memory_store
    ) -> None:
        await service.translate(make_lines(3), "French")

        keys = memory_store.keys()
        assert any(key.startswith("lyrics:translations:chunk:") for key in keys)
        assert any(
            key.startswith("lyrics:translations:") and ":chunk:" not in key for key in keys
        )


class TestRenderLrcLines:
    """Test suite for render_lrc_lines()."""

    def test_empty_translation_should_fall_back_to_words(self) -> None:
        lines = make_lines(2)

        assert render_lrc_lines(lines, ["un", ""]) == ["[00:00.00]un", "[00:01.00]line 1"]
