"""Write SVG markup back out from the document model."""

from __future__ import annotations

from svgcomp.models.svg_document import Element, Text
from svgcomp.svg.transformer import escape_xml


def serialize_svg_element(node: Element | Text, indent: int = 0) -> str:
    """Serialize a node to SVG markup, two spaces of indent per level.

    Text is written back raw. Attribute values get XML entity escaping.
    """
    if isinstance(node, Text):
        return node.value

    prefix = "  " * indent
    attrs = " ".join(f'{k}="{escape_xml(v)}"' for k, v in node.attributes.items())
    open_tag = f"<{node.name} {attrs}" if attrs else f"<{node.name}"

    if not node.children:
        return f"{prefix}{open_tag} />"

    children = "\n".join(serialize_svg_element(child, indent + 1) for child in node.children)
    return f"{prefix}{open_tag}>\n{children}\n{prefix}</{node.name}>"
