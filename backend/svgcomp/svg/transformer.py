"""Attribute transformer — maps SVG attribute vocabulary onto framework vocabulary.

Everything here is a pure function over strings. The only shared data is the
read-only SVG → React name table.
"""

from __future__ import annotations

import json
import logging
import math
import re
from decimal import Decimal
from types import MappingProxyType

logger = logging.getLogger(__name__)

SVG_TO_REACT_ATTRS = MappingProxyType({
    "accent-height": "accentHeight",
    "alignment-baseline": "alignmentBaseline",
    "arabic-form": "arabicForm",
    "baseline-shift": "baselineShift",
    "cap-height": "capHeight",
    "clip-path": "clipPath",
    "clip-rule": "clipRule",
    "color-interpolation": "colorInterpolation",
    "color-interpolation-filters": "colorInterpolationFilters",
    "color-profile": "colorProfile",
    "color-rendering": "colorRendering",
    "dominant-baseline": "dominantBaseline",
    "enable-background": "enableBackground",
    "fill-opacity": "fillOpacity",
    "fill-rule": "fillRule",
    "flood-color": "floodColor",
    "flood-opacity": "floodOpacity",
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "font-size-adjust": "fontSizeAdjust",
    "font-stretch": "fontStretch",
    "font-style": "fontStyle",
    "font-variant": "fontVariant",
    "font-weight": "fontWeight",
    "glyph-name": "glyphName",
    "glyph-orientation-horizontal": "glyphOrientationHorizontal",
    "glyph-orientation-vertical": "glyphOrientationVertical",
    "horiz-adv-x": "horizAdvX",
    "horiz-origin-x": "horizOriginX",
    "image-rendering": "imageRendering",
    "letter-spacing": "letterSpacing",
    "lighting-color": "lightingColor",
    "marker-end": "markerEnd",
    "marker-mid": "markerMid",
    "marker-start": "markerStart",
    "overline-position": "overlinePosition",
    "overline-thickness": "overlineThickness",
    "paint-order": "paintOrder",
    "panose-1": "panose1",
    "pointer-events": "pointerEvents",
    "rendering-intent": "renderingIntent",
    "shape-rendering": "shapeRendering",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
    "strikethrough-position": "strikethroughPosition",
    "strikethrough-thickness": "strikethroughThickness",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-miterlimit": "strokeMiterlimit",
    "stroke-opacity": "strokeOpacity",
    "stroke-width": "strokeWidth",
    "text-anchor": "textAnchor",
    "text-decoration": "textDecoration",
    "text-rendering": "textRendering",
    "underline-position": "underlinePosition",
    "underline-thickness": "underlineThickness",
    "unicode-bidi": "unicodeBidi",
    "unicode-range": "unicodeRange",
    "units-per-em": "unitsPerEm",
    "v-alphabetic": "vAlphabetic",
    "v-hanging": "vHanging",
    "v-ideographic": "vIdeographic",
    "v-mathematical": "vMathematical",
    "vert-adv-y": "vertAdvY",
    "vert-origin-x": "vertOriginX",
    "vert-origin-y": "vertOriginY",
    "word-spacing": "wordSpacing",
    "writing-mode": "writingMode",
    "x-height": "xHeight",
    "xlink:actuate": "xlinkActuate",
    "xlink:arcrole": "xlinkArcrole",
    "xlink:href": "xlinkHref",
    "xlink:role": "xlinkRole",
    "xlink:show": "xlinkShow",
    "xlink:title": "xlinkTitle",
    "xlink:type": "xlinkType",
    "xml:base": "xmlBase",
    "xml:lang": "xmlLang",
    "xml:space": "xmlSpace",
    "xmlns": "xmlns",
    "xmlns:xlink": "xmlnsXlink",
    "class": "className",
})

_NUMERIC_LITERAL_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
_KEBAB_RE = re.compile(r"-([a-z])")
_FILENAME_SPLIT_RE = re.compile(r"[-_\s]+")
_COMPONENT_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

_XML_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"), ("'", "&apos;"))
_JSX_ATTR_ESCAPES = (
    ("&", "&amp;"), ('"', "&quot;"), ("<", "&lt;"), (">", "&gt;"), ("{", "&#123;"), ("}", "&#125;"),
)
_TEXT_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ("{", "&#123;"), ("}", "&#125;"))


def transform_attribute_name(name: str, framework: str) -> str:
    """Translate an SVG attribute name for a framework; only React renames."""
    if framework == "react":
        return SVG_TO_REACT_ATTRS.get(name, name)
    return name


def transform_attributes(attributes: dict[str, str], framework: str) -> dict[str, str]:
    """Translate every name in an attribute dict.

    Two source names can land on the same target name (``class`` and
    ``className`` both become ``className``). The later one in document order
    wins; the overwrite is logged.
    """
    transformed: dict[str, str] = {}
    origin: dict[str, str] = {}
    for key, value in attributes.items():
        new_key = transform_attribute_name(key, framework)
        if new_key in transformed:
            logger.warning(
                "Attribute %r overwrites %r (both map to %r for %s)",
                key, origin[new_key], new_key, framework,
            )
        transformed[new_key] = value
        origin[new_key] = key
    return transformed


def camel_case_property(prop: str) -> str:
    """CSS property → React style key (``stroke-width`` → ``strokeWidth``)."""
    return _KEBAB_RE.sub(lambda m: m.group(1).upper(), prop)


def transform_style_string(css: str) -> dict[str, str | int | float]:
    """Parse an inline ``style`` string into a camelCased style mapping.

    Values that survive a JavaScript number round trip unchanged become
    numbers; everything else stays a string. Declarations without a colon,
    property or value are dropped.
    """
    style: dict[str, str | int | float] = {}
    for declaration in css.split(";"):
        if not declaration:
            continue
        prop, sep, value = declaration.partition(":")
        if not sep:
            continue
        prop = prop.strip()
        value = value.strip()
        if not prop or not value:
            continue
        style[camel_case_property(prop)] = _coerce_number(value)
    return style


def style_to_object_literal(css: str) -> str:
    """Render a style string as a compact JS object literal."""
    return json.dumps(transform_style_string(css), separators=(",", ":"), ensure_ascii=False)


def is_numeric_literal(value: str) -> bool:
    """True for ``-?digits(.digits)?`` and nothing else."""
    return _NUMERIC_LITERAL_RE.fullmatch(value) is not None


def _coerce_number(value: str) -> str | int | float:
    try:
        number = float(value)
    except ValueError:
        return value
    if _js_number_to_string(number) != value:
        return value
    return int(number) if number.is_integer() else number


def _js_number_to_string(number: float) -> str | None:
    """Number → String() the way JavaScript prints it, for the fixed-notation range.

    Returns None where JS would switch to exponent notation (or print
    Infinity/NaN); no plain decimal literal can match those.
    """
    if not math.isfinite(number):
        return None
    if number == 0:
        return "0"
    if abs(number) >= 1e21 or abs(number) < 1e-6:
        return None
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def escape_xml(value: str) -> str:
    for char, entity in _XML_ESCAPES:
        value = value.replace(char, entity)
    return value


def escape_jsx_attribute(value: str) -> str:
    """Escape a value for a double-quoted JSX attribute; braces included, quotes ``'`` kept."""
    for char, entity in _JSX_ATTR_ESCAPES:
        value = value.replace(char, entity)
    return value


def escape_text(value: str) -> str:
    """Escape character data for JSX children and Vue templates, braces included."""
    for char, entity in _TEXT_ESCAPES:
        value = value.replace(char, entity)
    return value


def filename_to_component_name(filename: str) -> str:
    """``icons/arrow-left.svg`` → ``ArrowLeftIcon``."""
    base_name = re.sub(r"^.*[\\/]", "", filename)
    base_name = re.sub(r"\.svg$", "", base_name, flags=re.IGNORECASE)

    pascal = "".join(
        part[:1].upper() + part[1:].lower()
        for part in _FILENAME_SPLIT_RE.split(base_name)
        if part
    )
    return pascal if pascal.endswith("Icon") else f"{pascal}Icon"


def is_valid_component_name(name: str) -> bool:
    """ASCII JS identifier check for a generated component's name."""
    return _COMPONENT_NAME_RE.fullmatch(name) is not None
