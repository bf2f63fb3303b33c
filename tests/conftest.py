"""
Shared test fixtures and configuration for entire test suite.

Provides: instrumented fake transformers, cache stores
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import pytest

from lyrics_backend.boundary.cache import InMemoryCacheStore
from tests.helpers import FailingCacheStore, RecordingTransformer


@pytest.fixture
def memory_store() -> InMemoryCacheStore:
    """Provide an empty in-memory cache store."""
    return InMemoryCacheStore()


@pytest.fixture
def failing_store() -> FailingCacheStore:
    """Provide a cache store that always fails."""
    return FailingCacheStore()


@pytest.fixture
def transformer() -> RecordingTransformer:
    """Provide a recording transformer with default behavior."""
    return RecordingTransformer()
