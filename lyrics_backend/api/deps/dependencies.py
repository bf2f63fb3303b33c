"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: lyrics_backend.configs, lyrics_backend.application, lyrics_backend.boundary
System role: DI container for service injection
"""

import logging

from lyrics_backend.application.domains import FuriganaDomain, TranslationDomain
from lyrics_backend.application.services import FuriganaService, TranslationService
from lyrics_backend.boundary.cache import CacheStore, InMemoryCacheStore, RedisCacheStore
from lyrics_backend.configs import Settings, get_settings
from lyrics_backend.core.pipeline import PipelineOptions, TransformPipeline

logger = logging.getLogger(__name__)


def build_pipeline_options(settings: Settings, whole_prefix: str, chunk_prefix: str) -> PipelineOptions:
    """Pipeline options for one domain from application settings."""
    return PipelineOptions(
        whole_prefix=whole_prefix,
        chunk_prefix=chunk_prefix,
        chunk_size=settings.pipeline.chunk_size,
        max_parallel=settings.pipeline.max_parallel_chunks,
        stream_threshold_chunks=settings.pipeline.stream_threshold_chunks,
        cache_ttl_seconds=settings.pipeline.cache_ttl_seconds,
    )


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._cache_store = None
        self._furigana_pipeline = None
        self._translation_pipeline = None

    @property
    def cache_store(self) -> CacheStore:
        """Get cached cache store."""
        if self._cache_store is None:
            settings = get_settings()
            if settings.cache.backend == "memory":
                logger.info("Using in-memory cache store")
                self._cache_store = InMemoryCacheStore()
            else:
                self._cache_store = RedisCacheStore.from_url(settings.cache.redis_url)
        return self._cache_store

    @property
    def furigana_pipeline(self) -> TransformPipeline:
        """Get cached furigana pipeline."""
        if self._furigana_pipeline is None:
            from lyrics_backend.boundary.llm import GeminiFuriganaTransformer, build_chat_model

            settings = get_settings()
            transformer = GeminiFuriganaTransformer(
                build_chat_model(
                    settings.llm.model_id,
                    settings.llm.furigana_temperature,
                    settings.llm.google_api_key,
                )
            )
            self._furigana_pipeline = TransformPipeline(
                domain=FuriganaDomain(),
                transformer=transformer,
                store=self.cache_store,
                options=build_pipeline_options(
                    settings,
                    settings.cache.furigana_prefix,
                    settings.cache.furigana_chunk_prefix,
                ),
            )
        return self._furigana_pipeline

    @property
    def translation_pipeline(self) -> TransformPipeline:
        """Get cached translation pipeline."""
        if self._translation_pipeline is None:
            from lyrics_backend.boundary.llm import GeminiTranslationTransformer, build_chat_model

            settings = get_settings()
            transformer = GeminiTranslationTransformer(
                build_chat_model(
                    settings.llm.model_id,
                    settings.llm.translation_temperature,
                    settings.llm.google_api_key,
                )
            )
            self._translation_pipeline = TransformPipeline(
                domain=TranslationDomain(),
                transformer=transformer,
                store=self.cache_store,
                options=build_pipeline_options(
                    settings,
                    settings.cache.translation_prefix,
                    settings.cache.translation_chunk_prefix,
                ),
            )
        return self._translation_pipeline

    async def aclose(self) -> None:
        """Release the cache store connection and drop cached instances."""
        if isinstance(self._cache_store, RedisCacheStore):
            await self._cache_store.close()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._cache_store = None
        self._furigana_pipeline = None
        self._translation_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_cache_store() -> CacheStore:
    """
    Get the shared cache store.

    Returns:
        CacheStore: Redis or in-memory store per CACHE_BACKEND
    """
    return get_service_cache().cache_store


def get_furigana_service() -> FuriganaService:
    """
    Get furigana service instance.

    Returns:
        FuriganaService: Service over the shared furigana pipeline
    """
    return FuriganaService(pipeline=get_service_cache().furigana_pipeline)


def get_translation_service() -> TranslationService:
    """
    Get translation service instance.

    Returns:
        TranslationService: Service over the shared translation pipeline
    """
    return TranslationService(pipeline=get_service_cache().translation_pipeline)
