"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgcomp.models.generation import OptimizerOptions


class GenerateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    name: str | None = Field(default=None, description="Component name (overrides filename)")
    filename: str | None = Field(
        default=None,
        description="Source file name, used to derive the component name (arrow-left.svg → ArrowLeftIcon)",
    )
    frameworks: list[str] = Field(
        default_factory=list,
        description="Target frameworks (react, vue); empty uses the configured defaults",
    )
    props: bool = Field(default=True, description="Expose size/color props")
    typescript: bool = Field(default=True, description="Emit TypeScript")
    optimizer: OptimizerOptions = Field(default_factory=OptimizerOptions)
