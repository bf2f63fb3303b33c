"""
Fixtures for API endpoint tests.

Provides an application whose services run the real pipeline over an
in-memory cache store and a recording fake transformer.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lyrics_backend.api.deps import get_furigana_service, get_translation_service
from lyrics_backend.api.main import create_app
from lyrics_backend.application.domains import FuriganaDomain, TranslationDomain
from lyrics_backend.application.services import FuriganaService, TranslationService
from lyrics_backend.core.pipeline import PipelineOptions, TransformPipeline
from tests.helpers import RecordingTransformer


def annotate_kanji(text, config) -> list[dict]:
    return [{"text": text, "reading": "よみ"}]


@pytest.fixture
def furigana_transformer() -> RecordingTransformer:
    """Provide a furigana transformer fake."""
    return RecordingTransformer(fn=annotate_kanji)


@pytest.fixture
def translation_transformer() -> RecordingTransformer:
    """Provide a translation transformer fake."""
    return RecordingTransformer()


@pytest.fixture
def app(memory_store, furigana_transformer, translation_transformer) -> FastAPI:
    """Create application with pipeline services over test doubles."""
    furigana_service = FuriganaService(
        TransformPipeline(
            FuriganaDomain(),
            furigana_transformer,
            memory_store,
            PipelineOptions(whole_prefix="lyrics:furigana:", chunk_prefix="lyrics:furigana:chunk:"),
        )
    )
    translation_service = TranslationService(
        TransformPipeline(
            TranslationDomain(),
            translation_transformer,
            memory_store,
            PipelineOptions(
                whole_prefix="lyrics:translations:",
                chunk_prefix="lyrics:translations:chunk:",
            ),
        )
    )
    app = create_app()
    app.dependency_overrides[get_furigana_service] = lambda: furigana_service
    app.dependency_overrides[get_translation_service] = lambda: translation_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)
