"""React generator — SVG tree → JSX function component (.tsx / .jsx)."""

from __future__ import annotations

import logging

from svgcomp.generators.formatter import format_code
from svgcomp.generators.registry import generator
from svgcomp.models.generation import GeneratorOptions, GeneratorResult
from svgcomp.models.svg_document import Element, Text
from svgcomp.svg.optimizer import optimize_svg
from svgcomp.svg.parser import parse_svg
from svgcomp.svg.transformer import (
    escape_jsx_attribute,
    escape_text,
    is_numeric_literal,
    style_to_object_literal,
    transform_attributes,
)

logger = logging.getLogger(__name__)

# Base indentation inside the component's return (...)
_BASE_INDENT = "    "
_INDENT_STEP = "  "


@generator(framework="react", extension=".tsx", description="React function component")
def generate_react(options: GeneratorOptions) -> GeneratorResult:
    """Optimize → parse → emit JSX → format."""
    optimized = optimize_svg(options.svg_content, options.optimizer)
    parsed = parse_svg(optimized)

    raw_code = build_react_component(
        options.component_name, parsed.root, options.props, options.typescript
    )
    syntax = "typescript" if options.typescript else "babel"
    code = format_code(raw_code, syntax=syntax)

    logger.info("Generated React component %s", options.component_name)
    return GeneratorResult(
        code=code.rstrip(),
        extension=".tsx" if options.typescript else ".jsx",
        framework="react",
    )


def build_react_component(
    name: str,
    root: Element,
    with_props: bool = True,
    typescript: bool = True,
) -> str:
    """Wrap the emitted JSX in a function component declaration."""
    jsx = emit_jsx(root, with_props)

    if not with_props:
        return (
            f"export function {name}() {{\n"
            f"  return (\n{jsx}\n  );\n"
            f"}}\n"
        )

    params = '{\n  size = 24,\n  color = "currentColor",\n  ...props\n}'
    if not typescript:
        return (
            f"export function {name}({params}) {{\n"
            f"  return (\n{jsx}\n  );\n"
            f"}}\n"
        )

    return (
        'import type { SVGProps } from "react";\n'
        "\n"
        f"interface {name}Props extends SVGProps<SVGSVGElement> {{\n"
        "  size?: number | string;\n"
        "  color?: string;\n"
        "}\n"
        "\n"
        f"export function {name}({params}: {name}Props) {{\n"
        f"  return (\n{jsx}\n  );\n"
        f"}}\n"
    )


def emit_jsx(root: Element, with_props: bool = True, indent: str = _BASE_INDENT) -> str:
    """Emit an element tree as JSX.

    With ``with_props`` the root <svg> takes its size and colour from the
    component props and spreads the remaining props last.
    """
    return _emit_node(root, indent, root_props=with_props)


def format_attribute(name: str, value: str) -> str:
    """One JSX attribute: style object, bare number, or escaped string."""
    if name == "style":
        return f"style={{{style_to_object_literal(value)}}}"
    if is_numeric_literal(value):
        return f"{name}={{{value}}}"
    return f'{name}="{escape_jsx_attribute(value)}"'


def _emit_node(node: Element | Text, indent: str, root_props: bool = False) -> str:
    if isinstance(node, Text):
        return f"{indent}{escape_text(node.value)}"

    attrs = transform_attributes(node.attributes, "react")
    if root_props and node.name == "svg":
        parts = _root_attribute_parts(attrs)
    else:
        parts = [format_attribute(k, v) for k, v in attrs.items()]

    open_tag = f"<{node.name} {' '.join(parts)}" if parts else f"<{node.name}"
    if not node.children:
        return f"{indent}{open_tag} />"

    children = "\n".join(_emit_node(child, indent + _INDENT_STEP) for child in node.children)
    return f"{indent}{open_tag}>\n{children}\n{indent}</{node.name}>"


def _root_attribute_parts(attrs: dict[str, str]) -> list[str]:
    """Root <svg> attributes: size/color props first, then the rest, then the spread."""
    remaining = dict(attrs)
    remaining.pop("width", None)
    remaining.pop("height", None)
    parts = ["width={size}", "height={size}"]

    # fill="none" marks an outline icon; recolouring it would flood the shape
    fill = remaining.get("fill")
    if fill and fill != "none":
        del remaining["fill"]
        parts.append("fill={color}")

    parts.extend(format_attribute(k, v) for k, v in remaining.items())
    parts.append("{...props}")
    return parts
