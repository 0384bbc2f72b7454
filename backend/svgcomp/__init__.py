"""svgcomp — turn SVG documents into React and Vue components."""

from svgcomp.errors import (
    InvalidComponentName,
    InvalidDocument,
    MissingRootElement,
    SvgComponentError,
    UnsupportedFramework,
)
from svgcomp.generators import generate_components, get_registry
from svgcomp.models.generation import GeneratorOptions, GeneratorResult, OptimizerOptions
from svgcomp.models.svg_document import Element, ParsedSvg, Text
from svgcomp.svg.optimizer import optimize_svg
from svgcomp.svg.parser import extract_root_svg, is_valid_svg, parse_svg
from svgcomp.svg.serializer import serialize_svg_element
from svgcomp.svg.transformer import (
    filename_to_component_name,
    is_valid_component_name,
    transform_attribute_name,
    transform_style_string,
)

__version__ = "0.1.0"

__all__ = [
    "Element",
    "GeneratorOptions",
    "GeneratorResult",
    "InvalidComponentName",
    "InvalidDocument",
    "MissingRootElement",
    "OptimizerOptions",
    "ParsedSvg",
    "SvgComponentError",
    "Text",
    "UnsupportedFramework",
    "extract_root_svg",
    "filename_to_component_name",
    "generate_components",
    "get_registry",
    "is_valid_component_name",
    "is_valid_svg",
    "optimize_svg",
    "parse_svg",
    "serialize_svg_element",
    "transform_attribute_name",
    "transform_style_string",
]
