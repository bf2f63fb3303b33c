"""
Furigana API endpoints.

Routes:
- POST /furigana - Annotate lyric lines (JSON, or SSE stream for long lyrics)
- POST /furigana/plan - Report chunking and cache status without annotating

Dependencies: lyrics_backend.application.services.furigana_service
System role: Furigana HTTP API with streaming support
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, Response

from lyrics_backend.api.deps import get_furigana_service
from lyrics_backend.api.routers.router_utils import sse_response
from lyrics_backend.application.services.furigana_service import FuriganaService
from lyrics_backend.core.exceptions import UpstreamTransformError, ValidationError
from lyrics_backend.models.common import ErrorResponse
from lyrics_backend.models.lyrics import FuriganaRequest
from lyrics_backend.models.pipeline import ChunkPlanInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/furigana", tags=["furigana"])

CACHE_HEADER = "X-Furigana-Cache"


@router.post("")
async def annotate_furigana(
    request: FuriganaRequest,
    furigana_service: FuriganaService = Depends(get_furigana_service),
) -> Response:
    """Annotate lyric lines with furigana.

    Short or cached requests return one JSON body ``{"annotatedLines": [...]}``.
    Long requests return ``text/event-stream`` with one ``chunk`` event per
    completed chunk (completion order, keyed by ``startIndex``), then a
    terminal ``complete`` or ``error`` event.

    Args:
        request: FuriganaRequest with lines and optional force flag
        furigana_service: Injected FuriganaService

    Returns:
        Response: JSON result or SSE stream
    """
    try:
        result = await furigana_service.annotate(request.lines, force=request.force)
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=e.message, details=e.details).model_dump(),
        )
    except UpstreamTransformError as e:
        logger.error(f"{__name__}:annotate_furigana - Upstream failure: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=e.message, details=e.details).model_dump(),
        )
    except Exception as e:
        logger.exception(f"{__name__}:annotate_furigana - {type(e).__name__}: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=f"Error generating furigana: {e}").model_dump(),
        )

    if result.streaming:
        return sse_response(result.events)

    headers = {CACHE_HEADER: "HIT"} if result.cache_hit else None
    return JSONResponse(content=furigana_service.render(result.outputs), headers=headers)


@router.post("/plan", response_model=ChunkPlanInfo)
async def plan_furigana(
    request: FuriganaRequest,
    furigana_service: FuriganaService = Depends(get_furigana_service),
) -> ChunkPlanInfo:
    """Report line count, chunk count, streaming mode and cache status."""
    return await furigana_service.plan(request.lines, force=request.force)
