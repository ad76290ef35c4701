"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from shape2path import __version__
from shape2path.engine.registry import get_registry
from shape2path.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        converters_registered=get_registry().count,
    )
