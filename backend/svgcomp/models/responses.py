"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgcomp.models.generation import GeneratorResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    generators_registered: int = 0


class FrameworkInfo(BaseModel):
    framework: str
    extension: str
    description: str = ""


class FrameworksResponse(BaseModel):
    frameworks: list[FrameworkInfo] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    component_name: str
    results: list[GeneratorResult] = Field(default_factory=list)
