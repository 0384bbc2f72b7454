"""POST /api/generate — SVG → component source for each requested framework."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from svgcomp.config import Settings
from svgcomp.dependencies import get_settings
from svgcomp.errors import InvalidComponentName, InvalidDocument, MissingRootElement, UnsupportedFramework
from svgcomp.generators import generate_components
from svgcomp.models.requests import GenerateRequest
from svgcomp.models.responses import GenerateResponse
from svgcomp.svg.transformer import filename_to_component_name

router = APIRouter()
logger = logging.getLogger(__name__)

DEFAULT_COMPONENT_NAME = "SvgIcon"


def resolve_component_name(name: str | None, filename: str | None) -> str:
    """Explicit name, else one derived from the file name, else a fixed default."""
    if name and name.strip():
        return name.strip()
    if filename and filename.strip():
        return filename_to_component_name(filename.strip())
    return DEFAULT_COMPONENT_NAME


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest, cfg: Settings = Depends(get_settings)) -> GenerateResponse:
    component_name = resolve_component_name(req.name, req.filename)
    requested = [fw.strip().lower() for fw in req.frameworks if fw.strip()]

    try:
        results = generate_components(
            req.svg,
            component_name,
            frameworks=requested or cfg.default_frameworks,
            props=req.props,
            typescript=req.typescript,
            optimizer=req.optimizer,
        )
    except UnsupportedFramework as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except InvalidComponentName as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except (InvalidDocument, MissingRootElement) as e:
        logger.info("Rejected document for %s: %s", component_name, e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return GenerateResponse(component_name=component_name, results=results)
