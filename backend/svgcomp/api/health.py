"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svgcomp import __version__
from svgcomp.generators import get_registry
from svgcomp.models.responses import FrameworkInfo, FrameworksResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        generators_registered=get_registry().count,
    )


@router.get("/frameworks", response_model=FrameworksResponse)
async def frameworks() -> FrameworksResponse:
    return FrameworksResponse(
        frameworks=[
            FrameworkInfo(framework=s.framework, extension=s.extension, description=s.description)
            for s in get_registry().all()
        ]
    )
