"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Two regions drawn as groups, one lake drawn as a lone path, one clip path
GROUPED_MAP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" viewBox="0 0 100 100">
  <defs>
    <clipPath id="clip"><path d="M0,0 L1000,1000"/></clipPath>
  </defs>
  <g id="north" transform="translate(10,20)">
    <path d="M0,0 L10,0 L10,10" style="fill:#cccccc"/>
    <path d="m20,0 l5,5" style="fill: none"/>
  </g>
  <g inkscape:label="South" class="region">
    <path d="M0,50 L50,100" style="fill:none;stroke:#000"/>
  </g>
  <path id="lake" d="M60,60 H80 V80" fill="blue"/>
</svg>'''

# All paths share one parent, so each path is its own shape
FLAT_MAP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 50 100">
  <path id="west" d="M0,0 L50,0"/>
  <path id="east" d="M0,100 L50,100"/>
</svg>'''

# One path uses an arc, which the map format cannot carry
MIXED_SUPPORT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path id="square" d="M2,2 h20 v20 h-20 v-20"/>
  <path id="badge" d="M12,2 A10,10 0 0 1 22,12"/>
  <path class="tick" transform="translate(2 2)" d="m4,10 l4,4 l8,-8"/>
</svg>'''

EMPTY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10"></svg>'''


@pytest.fixture
def grouped_map_svg() -> str:
    return GROUPED_MAP_SVG


@pytest.fixture
def flat_map_svg() -> str:
    return FLAT_MAP_SVG


@pytest.fixture
def mixed_support_svg() -> str:
    return MIXED_SUPPORT_SVG
