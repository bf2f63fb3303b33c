"""
Health check API endpoints.

Routes: GET /health, GET /health/cache

Dependencies: lyrics_backend.boundary.cache
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from lyrics_backend.api.deps import get_cache_store
from lyrics_backend.boundary.cache.base import CacheStore


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/cache", response_model=HealthResponse)
async def health_check_cache(store: CacheStore = Depends(get_cache_store)) -> HealthResponse:
    """Cache store health check. An unreachable store degrades, never fails, requests."""
    if await store.ping():
        return HealthResponse(status="healthy", message="Cache store reachable")
    return HealthResponse(status="degraded", message="Cache store unreachable; caching disabled")
