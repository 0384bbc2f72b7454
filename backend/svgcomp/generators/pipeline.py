"""Generation facade — one SVG document in, one result per requested framework out."""

from __future__ import annotations

import logging
import time

from svgcomp.config import settings
from svgcomp.errors import InvalidComponentName
from svgcomp.generators.registry import GeneratorRegistry, get_registry
from svgcomp.models.generation import GeneratorOptions, GeneratorResult, OptimizerOptions
from svgcomp.svg.transformer import is_valid_component_name

logger = logging.getLogger(__name__)


def parse_frameworks(value: str, registry: GeneratorRegistry | None = None) -> list[str]:
    """Parse ``"react,vue"`` into registered framework ids.

    Unknown ids are dropped; an empty result falls back to ``["react"]``.
    """
    registry = registry or get_registry()
    frameworks: list[str] = []
    for part in value.split(","):
        name = part.strip().lower()
        if name in registry and name not in frameworks:
            frameworks.append(name)
        elif name:
            logger.debug("Ignoring unknown framework %r", name)
    return frameworks or ["react"]


def generate_components(
    svg_content: str,
    component_name: str,
    frameworks: list[str] | None = None,
    props: bool = True,
    typescript: bool = True,
    optimizer: OptimizerOptions | None = None,
    registry: GeneratorRegistry | None = None,
) -> list[GeneratorResult]:
    """Run every requested generator over one document, in request order.

    Raises InvalidComponentName for a name that is not a JS identifier,
    UnsupportedFramework for an unregistered id, and InvalidDocument /
    MissingRootElement from the generators themselves.
    """
    if not is_valid_component_name(component_name):
        raise InvalidComponentName(component_name)

    registry = registry or get_registry()
    requested = list(dict.fromkeys(frameworks or settings.default_frameworks))
    # Resolve all ids up front so a typo fails before any work is done
    specs = [registry.get(fw) for fw in requested]

    options = GeneratorOptions(
        component_name=component_name,
        svg_content=svg_content,
        props=props,
        typescript=typescript,
        optimizer=optimizer or OptimizerOptions(),
    )

    start = time.perf_counter()
    results = [spec.fn(options) for spec in specs]
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Generated %s for %d framework(s) in %.1fms",
        component_name, len(results), elapsed,
    )
    return results
