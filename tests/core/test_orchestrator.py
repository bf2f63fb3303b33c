"""
Test suite for TransformPipeline.

Tests request orchestration: whole-request caching, the synchronous small
path, and the progressive stream for large inputs.

System role: Verification of pipeline entry point
"""

from unittest.mock import AsyncMock

import pytest

from lyrics_backend.application.domains import TranslationDomain
from lyrics_backend.core.exceptions import UpstreamTransformError, ValidationError
from lyrics_backend.core.pipeline.orchestrator import PipelineOptions, TransformPipeline
from tests.helpers import RecordingTransformer, make_lines

CONFIG = {"target_language": "French"}


def build_pipeline(store, transformer, **overrides) -> TransformPipeline:
    options = PipelineOptions(
        whole_prefix="test:whole:",
        chunk_prefix="test:chunk:",
        **overrides,
    )
    return TransformPipeline(TranslationDomain(), transformer, store, options)


async def collect(result) -> list[dict]:
    return [event.to_dict() async for event in result.events]


class TestPipelineOptions:
    """Test suite for option validation."""

    def test_defaults_should_match_production_tuning(self) -> None:
        options = PipelineOptions(whole_prefix="w:", chunk_prefix="c:")

        assert options.chunk_size == 15
        assert options.max_parallel == 3
        assert options.stream_threshold == 30

    @pytest.mark.parametrize(
        "field", ["chunk_size", "max_parallel", "stream_threshold_chunks"]
    )
    def test_non_positive_values_should_raise(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            PipelineOptions(whole_prefix="w:", chunk_prefix="c:", **{field: 0})


class TestExecuteSmallPath:
    """Test suite for inputs at or under the streaming threshold."""

    @pytest.mark.asyncio
    async def test_small_input_should_return_full_result(self, memory_store, transformer) -> None:
        # Arrange
        pipeline = build_pipeline(memory_store, transformer)

        # Act
        result = await pipeline.execute(make_lines(5), CONFIG)

        # Assert
        assert not result.streaming
        assert not result.cache_hit
        assert result.outputs == [f"<French>line {i}" for i in range(5)]
        assert len(transformer.calls) == 1

    @pytest.mark.asyncio
    async def test_threshold_sized_input_should_not_stream(self, memory_store, transformer) -> None:
        pipeline = build_pipeline(memory_store, transformer)

        result = await pipeline.execute(make_lines(30), CONFIG)

        assert not result.streaming
        assert len(result.outputs) == 30
        assert len(transformer.calls) == 2

    @pytest.mark.asyncio
    async def test_warm_cache_should_skip_transformer_and_scheduler(
        self, memory_store, transformer
    ) -> None:
        # Arrange
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(5)
        first = await pipeline.execute(lines, CONFIG)
        pipeline.pool.run = AsyncMock()

        # Act
        second = await pipeline.execute(lines, CONFIG)

        # Assert
        assert second.cache_hit
        assert second.outputs == first.outputs
        assert len(transformer.calls) == 1
        pipeline.pool.run.assert_not_called()

    @pytest.mark.asyncio
    async def test_force_should_bypass_both_tiers(self, memory_store, transformer) -> None:
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(5)

        await pipeline.execute(lines, CONFIG)
        result = await pipeline.execute(lines, CONFIG, force=True)

        assert not result.cache_hit
        assert len(transformer.calls) == 2

    @pytest.mark.asyncio
    async def test_changed_language_should_miss_whole_cache(self, memory_store, transformer) -> None:
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(5)

        await pipeline.execute(lines, {"target_language": "French"})
        result = await pipeline.execute(lines, {"target_language": "Spanish"})

        assert not result.cache_hit
        assert result.outputs[0] == "<Spanish>line 0"

    @pytest.mark.asyncio
    async def test_cached_entry_with_wrong_length_should_be_ignored(
        self, memory_store, transformer
    ) -> None:
        # Arrange
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(3)
        request_fp = pipeline.request_fingerprint(lines, CONFIG)
        await pipeline.cache.set_whole(request_fp, ["stale"])

        # Act
        result = await pipeline.execute(lines, CONFIG)

        # Assert
        assert not result.cache_hit
        assert len(result.outputs) == 3

    @pytest.mark.asyncio
    async def test_failure_should_raise_and_skip_whole_cache(self, memory_store) -> None:
        transformer = RecordingTransformer(fail_when=lambda contents: "line 20" in contents)
        pipeline = build_pipeline(memory_store, transformer)

        with pytest.raises(UpstreamTransformError):
            await pipeline.execute(make_lines(25), CONFIG)

        assert not any(key.startswith("test:whole:") for key in memory_store.keys())

    @pytest.mark.asyncio
    async def test_failing_store_should_not_fail_request(self, failing_store, transformer) -> None:
        pipeline = build_pipeline(failing_store, transformer)

        result = await pipeline.execute(make_lines(5), CONFIG)

        assert result.outputs == [f"<French>line {i}" for i in range(5)]

    @pytest.mark.asyncio
    async def test_empty_input_should_return_empty_result(self, memory_store, transformer) -> None:
        pipeline = build_pipeline(memory_store, transformer)

        result = await pipeline.execute([], CONFIG)

        assert result.outputs == []
        assert transformer.calls == []
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_missing_language_should_raise_before_any_work(
        self, memory_store, transformer
    ) -> None:
        pipeline = build_pipeline(memory_store, transformer)

        with pytest.raises(ValidationError, match="Target language is required"):
            await pipeline.execute(make_lines(5), {"target_language": "   "})

        assert transformer.calls == []


class TestExecuteStreaming:
    """Test suite for inputs above the streaming threshold."""

    @pytest.mark.asyncio
    async def test_large_input_should_stream_chunks_then_complete(
        self, memory_store, transformer
    ) -> None:
        # Arrange
        pipeline = build_pipeline(memory_store, transformer)

        # Act
        result = await pipeline.execute(make_lines(40), CONFIG)
        events = await collect(result)

        # Assert
        assert result.streaming
        assert result.total_chunks == 3
        assert [event["type"] for event in events] == ["chunk", "chunk", "chunk", "complete"]
        assert events[-1] == {"type": "complete", "totalLines": 40}
        assert sorted(event["chunkIndex"] for event in events[:3]) == [0, 1, 2]
        assert [event["completedCount"] for event in events[:3]] == [1, 2, 3]
        assert all(event["totalChunks"] == 3 for event in events[:3])

    @pytest.mark.asyncio
    async def test_chunk_events_should_arrive_in_completion_order(self, memory_store) -> None:
        # Arrange: the first chunk is slowest
        transformer = RecordingTransformer(
            delay_for=lambda contents: 0.05 if "line 0" in contents else 0.001
        )
        pipeline = build_pipeline(memory_store, transformer)

        # Act
        events = await collect(await pipeline.execute(make_lines(40), CONFIG))

        # Assert
        chunk_events = [event for event in events if event["type"] == "chunk"]
        assert chunk_events[-1]["chunkIndex"] == 0
        assert chunk_events[-1]["startIndex"] == 0
        assert chunk_events[-1]["lines"][0] == "[00:00.00]<French>line 0"

    @pytest.mark.asyncio
    async def test_chunk_events_should_carry_start_index_and_lrc_lines(
        self, memory_store, transformer
    ) -> None:
        pipeline = build_pipeline(memory_store, transformer)

        events = await collect(await pipeline.execute(make_lines(40), CONFIG))

        by_index = {event["chunkIndex"]: event for event in events if event["type"] == "chunk"}
        assert by_index[2]["startIndex"] == 30
        assert len(by_index[2]["lines"]) == 10
        assert by_index[1]["lines"][0] == "[00:15.00]<French>line 15"

    @pytest.mark.asyncio
    async def test_completed_stream_should_populate_whole_cache(
        self, memory_store, transformer
    ) -> None:
        # Arrange
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(40)
        await collect(await pipeline.execute(lines, CONFIG))

        # Act
        second = await pipeline.execute(lines, CONFIG)

        # Assert
        assert second.cache_hit
        assert not second.streaming
        assert second.outputs == [f"<French>line {i}" for i in range(40)]
        assert len(transformer.calls) == 3

    @pytest.mark.asyncio
    async def test_failure_should_emit_terminal_error_without_complete(self, memory_store) -> None:
        # Arrange
        transformer = RecordingTransformer(fail_when=lambda contents: "line 15" in contents)
        pipeline = build_pipeline(memory_store, transformer, max_parallel=1)

        # Act
        events = await collect(await pipeline.execute(make_lines(40), CONFIG))

        # Assert
        assert [event["type"] for event in events] == ["chunk", "error"]
        assert "upstream exploded" in events[-1]["message"]
        assert not any(key.startswith("test:whole:") for key in memory_store.keys())
        assert len(transformer.calls) == 2

    @pytest.mark.asyncio
    async def test_streaming_should_respect_concurrency_ceiling(self, memory_store) -> None:
        transformer = RecordingTransformer(delay_for=lambda contents: 0.01)
        pipeline = build_pipeline(memory_store, transformer, chunk_size=5, max_parallel=2)

        await collect(await pipeline.execute(make_lines(60), CONFIG))

        assert transformer.max_in_flight == 2
        assert len(transformer.calls) == 12

    @pytest.mark.asyncio
    async def test_partially_warm_chunk_cache_should_only_call_for_cold_chunks(
        self, memory_store, transformer
    ) -> None:
        # Arrange
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(40)
        await pipeline.execute(lines[:15], CONFIG)

        # Act
        events = await collect(await pipeline.execute(lines, CONFIG))

        # Assert
        assert events[-1]["type"] == "complete"
        assert len(transformer.calls) == 3


class TestDescribe:
    """Test suite for plan reporting."""

    @pytest.mark.asyncio
    async def test_describe_should_report_plan_without_transforming(
        self, memory_store, transformer
    ) -> None:
        pipeline = build_pipeline(memory_store, transformer)

        plan = await pipeline.describe(make_lines(40), CONFIG)

        assert plan.total_lines == 40
        assert plan.total_chunks == 3
        assert plan.chunk_size == 15
        assert plan.streaming
        assert not plan.cached
        assert transformer.calls == []

    @pytest.mark.asyncio
    async def test_describe_should_ignore_cached_entry_with_wrong_length(
        self, memory_store, transformer
    ) -> None:
        # Arrange
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(3)
        await pipeline.cache.set_whole(pipeline.request_fingerprint(lines, CONFIG), ["stale"])

        # Act
        plan = await pipeline.describe(lines, CONFIG)
        result = await pipeline.execute(lines, CONFIG)

        # Assert
        assert plan.cached is False
        assert result.cache_hit is False

    @pytest.mark.asyncio
    async def test_describe_should_report_cached_request(self, memory_store, transformer) -> None:
        pipeline = build_pipeline(memory_store, transformer)
        lines = make_lines(5)
        await pipeline.execute(lines, CONFIG)

        plan = await pipeline.describe(lines, CONFIG)

        assert plan.cached
        assert not plan.streaming
