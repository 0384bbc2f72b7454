"""SVG optimizer — plugin pipeline run over the markup before parsing.

Each plugin is a standalone function registered via decorator and mutates the
DOM it is handed:

    @plugin("removeTitle")
    def remove_title(document) -> None:
        _remove_elements(document, "title")

``build_plugins`` turns OptimizerOptions into the ordered plugin list. The
doctype/processing-instruction, editor-namespace and namespace cleanup steps always run.
Geometry (path data, transforms, numbers) is left untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Callable
from xml.dom import Node as DomNode

from svgcomp.models.generation import OptimizerOptions
from svgcomp.svg.parser import load_dom

logger = logging.getLogger(__name__)

PluginFn = Callable[..., None]

_PLUGINS: dict[str, PluginFn] = {}

_URL_REF_RE = re.compile(r"url\(\s*['\"]?#([^)'\"\s]+)['\"]?\s*\)")
_HASH_REF_RE = re.compile(r"^#([A-Za-z_][\w.:-]*)$")
_NUMBER_RE = re.compile(r"^\s*(-?[0-9]+(?:\.[0-9]+)?)(?:px)?\s*$")

# Namespaces that drawing tools write for their own bookkeeping
EDITOR_NAMESPACES = frozenset({
    "http://code.google.com/p/svg-edit/",
    "http://inkscape.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://www.inkscape.org/namespaces/inkscape",
    "http://www.bohemiancoding.com/sketch/ns",
    "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "http://ns.adobe.com/Graphs/1.0/",
    "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
    "http://ns.adobe.com/Variables/1.0/",
    "http://ns.adobe.com/SaveForWeb/1.0/",
    "http://ns.adobe.com/Extensibility/1.0/",
    "http://ns.adobe.com/Flows/1.0/",
    "http://ns.adobe.com/ImageReplacement/1.0/",
    "http://ns.adobe.com/GenericCustomNamespace/1.0/",
    "http://ns.adobe.com/XPath/1.0/",
    "http://schemas.microsoft.com/visio/2003/SVGExtensions/",
    "http://taptrix.com/vectorillusions/svg-extensions",
    "http://www.figma.com/figma/ns",
    "http://purl.org/dc/elements/1.1/",
    "http://creativecommons.org/ns#",
    "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "http://www.serif.com/",
    "http://www.vector.evaxdesign.sk",
})


def plugin(name: str):
    """Decorator to register an optimizer plugin under its pipeline name."""

    def decorator(fn: PluginFn) -> PluginFn:
        if name in _PLUGINS:
            raise ValueError(f"Duplicate optimizer plugin: {name}")
        _PLUGINS[name] = fn
        return fn

    return decorator


def available_plugins() -> list[str]:
    return sorted(_PLUGINS)


def build_plugins(options: OptimizerOptions | None = None) -> list[str]:
    """Resolve options into the ordered list of plugin names to run."""
    options = options or OptimizerOptions()
    plugins = ["removeDoctype", "removeXMLProcInst"]

    if options.remove_comments:
        plugins.append("removeComments")
    if options.remove_metadata:
        plugins.append("removeMetadata")
    plugins.append("removeEditorsNSData")
    if options.remove_title:
        plugins.append("removeTitle")
    if options.remove_desc:
        plugins.append("removeDesc")
    if options.remove_dimensions:
        plugins.append("removeDimensions")
    if options.cleanup_ids:
        plugins.append("cleanupIds")

    plugins.extend(["removeXMLNS", "removeUnusedNS", "removeXmlSpace"])
    return plugins


def optimize_svg(svg_text: str, options: OptimizerOptions | None = None) -> str:
    """Optimize SVG markup, returning the rewritten markup.

    Raises InvalidDocument when the markup cannot be read as XML.
    """
    document = load_dom(svg_text)
    plugins = build_plugins(options)
    for name in plugins:
        _PLUGINS[name](document)
        logger.debug("Optimizer plugin %s applied", name)

    result = "".join(child.toxml() for child in document.childNodes)
    logger.info("Optimized SVG: %d → %d chars (%d plugins)", len(svg_text), len(result), len(plugins))
    return result


# ── Helpers ───────────────────────────────────────────────────────────────


def _walk(node):
    """Yield every descendant node, depth first, document order."""
    for child in list(node.childNodes):
        yield child
        yield from _walk(child)


def _elements(document) -> list:
    return list(document.getElementsByTagName("*"))


def _remove_elements(document, tag_name: str) -> None:
    for element in document.getElementsByTagName(tag_name):
        element.parentNode.removeChild(element)


def _svg_root(document):
    root = document.documentElement
    if root is not None and root.tagName == "svg":
        return root
    return None


# ── Plugins ───────────────────────────────────────────────────────────────


@plugin("removeDoctype")
def remove_doctype(document) -> None:
    if document.doctype is not None:
        document.removeChild(document.doctype)


@plugin("removeXMLProcInst")
def remove_xml_proc_inst(document) -> None:
    for node in list(document.childNodes):
        if node.nodeType == DomNode.PROCESSING_INSTRUCTION_NODE:
            document.removeChild(node)


@plugin("removeComments")
def remove_comments(document) -> None:
    """Drop comments, keeping ``<!--! ... -->`` legal notices."""
    for node in list(_walk(document)):
        if node.nodeType == DomNode.COMMENT_NODE and not node.data.startswith("!"):
            node.parentNode.removeChild(node)


@plugin("removeMetadata")
def remove_metadata(document) -> None:
    _remove_elements(document, "metadata")


@plugin("removeTitle")
def remove_title(document) -> None:
    _remove_elements(document, "title")


@plugin("removeDesc")
def remove_desc(document) -> None:
    _remove_elements(document, "desc")


@plugin("removeDimensions")
def remove_dimensions(document) -> None:
    """Drop root width/height, deriving a viewBox from them when there is none."""
    root = _svg_root(document)
    if root is None or not (root.hasAttribute("width") and root.hasAttribute("height")):
        return

    if not root.hasAttribute("viewBox"):
        w = _NUMBER_RE.match(root.getAttribute("width"))
        h = _NUMBER_RE.match(root.getAttribute("height"))
        if not (w and h):
            return
        root.setAttribute("viewBox", f"0 0 {w.group(1)} {h.group(1)}")

    root.removeAttribute("width")
    root.removeAttribute("height")


@plugin("cleanupIds")
def cleanup_ids(document) -> None:
    """Strip ids nothing in the document points at."""
    elements = _elements(document)
    # Stylesheets and scripts can reference ids in ways we do not parse
    if any(el.tagName in ("style", "script") for el in elements):
        return

    referenced: set[str] = set()
    for el in elements:
        for name, value in el.attributes.items():
            referenced.update(_URL_REF_RE.findall(value))
            if name in ("href", "xlink:href"):
                m = _HASH_REF_RE.match(value.strip())
                if m:
                    referenced.add(m.group(1))

    for el in elements:
        if el.hasAttribute("id") and el.getAttribute("id") not in referenced:
            el.removeAttribute("id")


@plugin("removeEditorsNSData")
def remove_editors_ns_data(document) -> None:
    """Drop editor-namespaced elements and attributes along with their declarations."""
    elements = _elements(document)
    prefixes: set[str] = set()
    for el in elements:
        for name, value in list(el.attributes.items()):
            if name.startswith("xmlns:") and value in EDITOR_NAMESPACES:
                prefixes.add(name.split(":", 1)[1])
                el.removeAttribute(name)
    if not prefixes:
        return

    for el in elements:
        if ":" in el.tagName and el.tagName.split(":", 1)[0] in prefixes:
            if el.parentNode is not None:
                el.parentNode.removeChild(el)
            continue
        for name in list(el.attributes.keys()):
            if ":" in name and name.split(":", 1)[0] in prefixes:
                el.removeAttribute(name)
    logger.debug("Removed editor namespaces: %s", ", ".join(sorted(prefixes)))


@plugin("removeXMLNS")
def remove_xmlns(document) -> None:
    root = _svg_root(document)
    if root is not None and root.hasAttribute("xmlns"):
        root.removeAttribute("xmlns")


@plugin("removeUnusedNS")
def remove_unused_ns(document) -> None:
    """Drop ``xmlns:prefix`` declarations whose prefix no element or attribute uses."""
    elements = _elements(document)
    used: set[str] = set()
    for el in elements:
        if ":" in el.tagName:
            used.add(el.tagName.split(":", 1)[0])
        for name in el.attributes.keys():
            if ":" in name and not name.startswith("xmlns:"):
                used.add(name.split(":", 1)[0])

    for el in elements:
        for name in list(el.attributes.keys()):
            if name.startswith("xmlns:") and name.split(":", 1)[1] not in used:
                el.removeAttribute(name)


@plugin("removeXmlSpace")
def remove_xml_space(document) -> None:
    for el in _elements(document):
        if el.hasAttribute("xml:space"):
            el.removeAttribute("xml:space")
