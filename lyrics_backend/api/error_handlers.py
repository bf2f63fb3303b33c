"""
Application-wide exception handlers.

Maps request validation failures to HTTP 400 before any pipeline work
starts.

Dependencies: fastapi
System role: Consistent error responses
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lyrics_backend.core.exceptions import ValidationError
from lyrics_backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request bodies with 400."""
    logger.warning(f"{request.method} {request.url.path} - Invalid request body")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error="Invalid request body",
            details=jsonable_encoder(exc.errors()),
        ).model_dump(),
    )


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Reject requests failing domain validation with 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=exc.message, details=exc.details).model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach validation handlers to app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
