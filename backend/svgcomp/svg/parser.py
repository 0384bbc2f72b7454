"""SVG parser — facade over the expat DOM builder.

Converts raw SVG string → ParsedSvg (Element/Text tree). Namespace processing
is turned off so qualified names such as ``xlink:href`` and ``xmlns:xlink``
come through exactly as written.
"""

from __future__ import annotations

import logging
import re
from xml.dom import Node as DomNode
from xml.dom import expatbuilder
from xml.parsers.expat import ExpatError

from svgcomp.errors import InvalidDocument, MissingRootElement
from svgcomp.models.svg_document import Element, ParsedSvg, Text

logger = logging.getLogger(__name__)

# Self-closing <svg .../> or <svg ...> ... </svg>
_SVG_ROOT_RE = re.compile(r"<svg[^>]*(?:/>|>[\s\S]*</svg>)", re.IGNORECASE)


def is_valid_svg(content: str) -> bool:
    """Cheap structural check for an <svg> element; not a validator."""
    return bool(_SVG_ROOT_RE.search(content))


def parse_svg(svg_text: str) -> ParsedSvg:
    """Parse raw SVG string into a ParsedSvg.

    Raises:
        InvalidDocument: no <svg> element found by the structural scan, or the
            markup is not well-formed.
        MissingRootElement: the document's top-level element is not <svg>.
    """
    if not is_valid_svg(svg_text):
        raise InvalidDocument("Invalid SVG content: missing <svg> element")

    document = load_dom(svg_text)
    svg_node = _find_svg_element(document)
    if svg_node is None:
        raise MissingRootElement("Could not find SVG element in parsed content")

    root = _convert_element(svg_node)
    logger.debug("Parsed SVG: %d top-level children", len(root.children))
    return ParsedSvg(root=root)


def load_dom(svg_text: str):
    """Build a namespace-unaware minidom Document from markup."""
    try:
        return expatbuilder.parseString(svg_text, False)
    except ExpatError as e:
        raise InvalidDocument(f"Invalid SVG content: {e}") from e


def extract_root_svg(element: Element) -> Element | None:
    """Find the first <svg> element in a tree, depth first."""
    return element.find("svg")


def _find_svg_element(document) -> DomNode | None:
    for child in document.childNodes:
        if child.nodeType == DomNode.ELEMENT_NODE and child.tagName == "svg":
            return child
    return None


def _convert_element(node) -> Element:
    children = []
    for child in node.childNodes:
        converted = _convert_child(child)
        if converted is not None:
            children.append(converted)

    return Element(
        name=node.tagName,
        attributes=dict(node.attributes.items()),
        children=children,
    )


def _convert_child(node) -> Element | Text | None:
    if node.nodeType == DomNode.ELEMENT_NODE:
        return _convert_element(node)

    if node.nodeType == DomNode.TEXT_NODE:
        # Whitespace-only runs are layout, not content
        if node.data.strip():
            return Text(value=node.data)
        return None

    # Comments, CDATA, processing instructions
    return None
