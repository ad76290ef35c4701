"""Shared test fixtures."""

from __future__ import annotations

import pytest


# One of each shape, default namespace
SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 300 300">
  <rect width="100" height="100" />
  <rect x="110" y="10" width="80" height="80" rx="15" />
  <circle cx="250" cy="50" r="50" />
  <ellipse cx="200" cy="150" rx="100" ry="50" />
  <line x1="0" y1="180" x2="100" y2="120" stroke="black" />
  <polyline points="0,300 50,225 50,275 100,200" />
  <polyline points="100,300 150,225 150,275 200,200" fill="none" stroke="black" />
  <polygon points="200,300 250,225 250,275 300,200" fill="none" stroke="black" />
</svg>'''

# Expected d values for SHAPES_SVG, in document order
SHAPES_PATH_DATA = [
    "M0 0h100v100h-100z",
    "M110 25\na15 15 0 0 1 15 -15\nh50\na15 15 0 0 1 15 15\nv50\na15 15 0 0 1 -15 15\nh-50\na15 15 0 0 1 -15 -15\nz",
    "M 200 50 A 50 50 0 1 0 300 50 A 50 50 0 1 0 200 50",
    "M 100 150 A 100 50 0 1 0 300 150 A 100 50 0 1 0 100 150",
    "M0 180L100 120",
    "M0 300L50 225 50 275 100 200",
    "M100 300L150 225 150 275 200 200",
    "M200 300L250 225 250 275 300 200z",
]

NESTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <!-- icon -->
  <g id="outer" fill="none">
    <circle id="dot" cx="12" cy="12" r="10"/>
    <g id="inner">
      <RECT id="box" x="4" y="4" width="16" height="16"/>
    </g>
    <text x="1" y="1">label</text>
  </g>
  <line x1="1" y1="2" x2="3" y2="4"/>
</svg>'''

PATHS_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <g><path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999"/></g>
</svg>'''

NO_NAMESPACE_SVG = '''<svg><circle cx="5" cy="5" r="5"/></svg>'''


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def nested_svg() -> str:
    return NESTED_SVG


@pytest.fixture
def paths_only_svg() -> str:
    return PATHS_ONLY_SVG
