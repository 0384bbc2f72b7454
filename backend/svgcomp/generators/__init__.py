"""Framework generators. Importing this package registers the built-in targets."""

from svgcomp.generators.registry import GeneratorRegistry, GeneratorSpec, generator, get_registry
from svgcomp.generators import react, vue  # noqa: F401  (registration side effect)
from svgcomp.generators.pipeline import generate_components, parse_frameworks

__all__ = [
    "GeneratorRegistry",
    "GeneratorSpec",
    "generator",
    "get_registry",
    "generate_components",
    "parse_frameworks",
]
