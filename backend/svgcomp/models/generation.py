"""Generator input/output models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OptimizerOptions(BaseModel):
    """Switches for the optimizer plugin pipeline."""

    remove_comments: bool = True
    remove_metadata: bool = True
    remove_title: bool = False
    remove_desc: bool = False
    remove_dimensions: bool = False
    cleanup_ids: bool = True


class GeneratorOptions(BaseModel):
    component_name: str
    svg_content: str
    props: bool = True  # expose size/color props and spread the rest
    typescript: bool = True
    optimizer: OptimizerOptions = Field(default_factory=OptimizerOptions)


class GeneratorResult(BaseModel):
    """One generated component for one framework."""

    code: str
    extension: str
    framework: str
