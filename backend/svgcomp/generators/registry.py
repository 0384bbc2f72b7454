"""Generator registry — every framework target is a plain function registered via decorator.

Usage:
    @generator(framework="react", extension=".tsx", description="React function component")
    def generate_react(options: GeneratorOptions) -> GeneratorResult:
        ...

Adding a new framework = one module with the decorator, imported from
``svgcomp.generators``. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from svgcomp.errors import UnsupportedFramework

if TYPE_CHECKING:
    from svgcomp.models.generation import GeneratorOptions, GeneratorResult

logger = logging.getLogger(__name__)


@dataclass
class GeneratorSpec:
    framework: str
    extension: str
    fn: Callable[["GeneratorOptions"], "GeneratorResult"]
    description: str = ""


class GeneratorRegistry:
    """Framework id → generator spec."""

    def __init__(self) -> None:
        self._generators: dict[str, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.framework in self._generators:
            raise ValueError(f"Duplicate generator for framework: {spec.framework}")
        self._generators[spec.framework] = spec
        logger.debug("Registered generator %s (%s)", spec.framework, spec.extension)

    def get(self, framework: str) -> GeneratorSpec:
        try:
            return self._generators[framework]
        except KeyError:
            raise UnsupportedFramework(framework) from None

    def __contains__(self, framework: str) -> bool:
        return framework in self._generators

    def frameworks(self) -> list[str]:
        """Registered framework ids, in registration order."""
        return list(self._generators)

    def all(self) -> list[GeneratorSpec]:
        return list(self._generators.values())

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(*, framework: str, extension: str, description: str = ""):
    """Decorator to register a generator function."""

    def decorator(fn: Callable[["GeneratorOptions"], "GeneratorResult"]):
        _registry.register(
            GeneratorSpec(framework=framework, extension=extension, fn=fn, description=description)
        )
        return fn

    return decorator
