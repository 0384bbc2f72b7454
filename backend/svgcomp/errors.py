"""Error taxonomy for SVG → component generation."""

from __future__ import annotations


class SvgComponentError(Exception):
    """Base class for all generation failures."""


class InvalidDocument(SvgComponentError, ValueError):
    """Input has no recognisable <svg> root or is not well-formed markup."""


class MissingRootElement(SvgComponentError, ValueError):
    """Markup parsed, but no top-level <svg> element was found."""


class UnsupportedFramework(SvgComponentError, KeyError):
    """No generator is registered for the requested framework."""

    def __init__(self, framework: str) -> None:
        super().__init__(framework)
        self.framework = framework

    def __str__(self) -> str:
        return f"Unsupported framework: {self.framework!r}"


class InvalidComponentName(SvgComponentError, ValueError):
    """Component name cannot be used as a JS identifier."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Invalid component name: {self.name!r}"
