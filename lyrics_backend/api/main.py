"""
FastAPI application factory.

Mounts the furigana, translation and health routers under /api/v1 with
correlation, request logging and CORS middleware.

Dependencies: fastapi, lyrics_backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lyrics_backend.api.deps.dependencies import get_service_cache
from lyrics_backend.api.error_handlers import register_error_handlers
from lyrics_backend.configs import get_settings
from lyrics_backend.observability.logger import configure_logging
from lyrics_backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    furigana_router,
    health_router,
    translation_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup; release the cache connection pool on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        f"{__name__}:lifespan - Starting ({settings.environment}) with cache backend "
        f"{settings.cache.backend}, chunk_size={settings.pipeline.chunk_size}, "
        f"max_parallel={settings.pipeline.max_parallel_chunks}"
    )

    yield

    await get_service_cache().aclose()
    logger.info(f"{__name__}:lifespan - Cache store closed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Lyrics Annotation API",
        description="Chunked, cached, streaming furigana and lyric translation",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Added first = executes last; correlation ID is set before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID", "X-Furigana-Cache", "X-Lyrics-Translation-Cache"],
    )

    register_error_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(furigana_router, prefix="/api/v1")
    app.include_router(translation_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "lyrics_backend.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
