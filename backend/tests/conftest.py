"""Shared test fixtures."""

from __future__ import annotations

import pytest


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" fill="#4ECDC4">
  <rect x="10" y="10" width="80" height="80"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

# Editor export: prolog, doctype, comments, metadata, namespaced attributes
EDITOR_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<!-- Generator: Sketch -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" xml:space="preserve" width="32" height="32">
  <title>Badge</title>
  <desc>A round badge</desc>
  <metadata><rdf>meta</rdf></metadata>
  <defs>
    <linearGradient id="grad"><stop offset="0" stop-color="#fff"/></linearGradient>
    <circle id="dot" r="4"/>
  </defs>
  <!-- body -->
  <g id="layer1" class="badge">
    <circle cx="16" cy="16" r="14" fill="url(#grad)"/>
    <use xlink:href="#dot" x="16" y="16"/>
  </g>
</svg>'''

# Inkscape save: editor namespaces on the root, a namedview, layer attributes
INKSCAPE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 24 24" sodipodi:docname="star.svg" inkscape:version="1.3">
  <sodipodi:namedview pagecolor="#fff" inkscape:zoom="2"/>
  <g inkscape:label="Layer 1" inkscape:groupmode="layer" id="layer1">
    <path d="M12 2l3 7h7l-6 4 2 7-6-4-6 4 2-7-6-4h7z" sodipodi:nodetypes="ccccccccccc"/>
  </g>
</svg>'''

TEXT_SVG = '<svg viewBox="0 0 100 100"><text x="10" y="20">Hello</text></svg>'

TEST_ICON_SVG = '<svg viewBox="0 0 24 24"><path d="M12 2" stroke="red" stroke-width="2"/></svg>'


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def editor_svg() -> str:
    return EDITOR_SVG
