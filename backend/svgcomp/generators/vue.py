"""Vue generator — SVG tree → single-file component (.vue)."""

from __future__ import annotations

import logging

from svgcomp.config import settings
from svgcomp.generators.registry import generator
from svgcomp.models.generation import GeneratorOptions, GeneratorResult
from svgcomp.models.svg_document import Element, Text
from svgcomp.svg.parser import parse_svg
from svgcomp.svg.serializer import serialize_svg_element
from svgcomp.svg.transformer import escape_text, escape_xml, transform_attributes

logger = logging.getLogger(__name__)

_TS_SCRIPT = """<script setup lang="ts">
interface Props {
  size?: number | string;
  color?: string;
}

withDefaults(defineProps<Props>(), {
  size: 24,
  color: "currentColor",
});
</script>
"""

_JS_SCRIPT = """<script setup>
defineProps({
  size: { type: [Number, String], default: 24 },
  color: { type: String, default: "currentColor" },
});
</script>
"""


@generator(framework="vue", extension=".vue", description="Vue single-file component")
def generate_vue(options: GeneratorOptions) -> GeneratorResult:
    """Parse → template markup → SFC. No optimizer or formatter on this path."""
    parsed = parse_svg(options.svg_content)

    if settings.vue_bind_props:
        markup = emit_template(parsed.root, options.props)
    else:
        markup = serialize_svg_element(parsed.root, 1)

    code = wrap_template(markup, options.props, options.typescript)
    logger.info("Generated Vue component %s", options.component_name)
    return GeneratorResult(code=code, extension=".vue", framework="vue")


def wrap_template(markup: str, with_props: bool = True, typescript: bool = True) -> str:
    """Place markup verbatim inside <template>, optionally after the props script block."""
    template = f"<template>\n{markup}\n</template>\n"
    if not with_props:
        return template
    script = _TS_SCRIPT if typescript else _JS_SCRIPT
    return f"{script}\n{template}"


def emit_template(root: Element, with_props: bool = True, indent: int = 1) -> str:
    """Emit an element tree as Vue template markup.

    With ``with_props`` the root binds ``size``/``color``; other attributes
    reach the root through Vue's attribute fallthrough.
    """
    return _emit_node(root, "  " * indent, root_props=with_props)


def _emit_node(node: Element | Text, indent: str, root_props: bool = False) -> str:
    if isinstance(node, Text):
        return f"{indent}{escape_text(node.value)}"

    attrs = transform_attributes(node.attributes, "vue")
    if root_props and node.name == "svg":
        parts = _root_attribute_parts(attrs)
    else:
        parts = [f'{k}="{escape_xml(v)}"' for k, v in attrs.items()]

    open_tag = f"<{node.name} {' '.join(parts)}" if parts else f"<{node.name}"
    if not node.children:
        return f"{indent}{open_tag} />"

    children = "\n".join(_emit_node(child, indent + "  ") for child in node.children)
    return f"{indent}{open_tag}>\n{children}\n{indent}</{node.name}>"


def _root_attribute_parts(attrs: dict[str, str]) -> list[str]:
    remaining = dict(attrs)
    remaining.pop("width", None)
    remaining.pop("height", None)
    parts = [':width="size"', ':height="size"']

    fill = remaining.get("fill")
    if fill and fill != "none":
        del remaining["fill"]
        parts.append(':fill="color"')

    parts.extend(f'{k}="{escape_xml(v)}"' for k, v in remaining.items())
    return parts
