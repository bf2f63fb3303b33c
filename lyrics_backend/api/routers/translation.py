"""
Lyric translation API endpoints.

Routes:
- POST /translate-lyrics - Translate lyric lines to LRC (text, or SSE stream for long lyrics)
- POST /translate-lyrics/plan - Report chunking and cache status without translating

Dependencies: lyrics_backend.application.services.translation_service
System role: Translation HTTP API with streaming support
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from lyrics_backend.api.deps import get_translation_service
from lyrics_backend.api.routers.router_utils import sse_response
from lyrics_backend.application.services.translation_service import TranslationService
from lyrics_backend.core.exceptions import UpstreamTransformError, ValidationError
from lyrics_backend.models.common import ErrorResponse
from lyrics_backend.models.lyrics import TranslateLyricsRequest
from lyrics_backend.models.pipeline import ChunkPlanInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translate-lyrics", tags=["translation"])

CACHE_HEADER = "X-Lyrics-Translation-Cache"


@router.post("")
async def translate_lyrics(
    request: TranslateLyricsRequest,
    translation_service: TranslationService = Depends(get_translation_service),
) -> Response:
    """Translate lyric lines into the target language.

    Short or cached requests return a ``text/plain`` LRC document. Long
    requests return ``text/event-stream`` whose ``chunk`` events carry that
    chunk's LRC ``lines``.

    Args:
        request: TranslateLyricsRequest with lines, target language and force flag
        translation_service: Injected TranslationService

    Returns:
        Response: LRC text or SSE stream
    """
    try:
        result = await translation_service.translate(
            request.lines,
            request.target_language,
            force=request.force,
        )
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=e.message, details=e.details).model_dump(),
        )
    except UpstreamTransformError as e:
        logger.error(f"{__name__}:translate_lyrics - Upstream failure: {e}")
        return PlainTextResponse(
            f"Error: {e.message}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    except Exception as e:
        logger.exception(f"{__name__}:translate_lyrics - {type(e).__name__}: {e}")
        return PlainTextResponse(
            f"Error: Error translating lyrics: {e}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if result.streaming:
        return sse_response(result.events)

    headers = {CACHE_HEADER: "HIT"} if result.cache_hit else None
    return PlainTextResponse(
        translation_service.render(request.lines, result.outputs),
        headers=headers,
    )


@router.post("/plan", response_model=ChunkPlanInfo)
async def plan_translation(
    request: TranslateLyricsRequest,
    translation_service: TranslationService = Depends(get_translation_service),
) -> ChunkPlanInfo:
    """Report line count, chunk count, streaming mode and cache status."""
    return await translation_service.plan(
        request.lines,
        request.target_language,
        force=request.force,
    )
