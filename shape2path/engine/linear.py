"""Straight-segment shapes: line, polyline, polygon."""

from __future__ import annotations

import re
from collections.abc import Sequence

from shape2path.engine.numbers import format_number, to_number

_SEPARATORS_RE = re.compile(r"\s+")


def build_line_path(x1: float, y1: float, x2: float, y2: float) -> str:
    n = format_number
    return f"M{n(x1)} {n(y1)}L{n(x2)} {n(y2)}"


def parse_points(text: str | None) -> tuple[float, ...]:
    """Flat number list from a ``points`` attribute.

    Commas and whitespace both separate values and runs collapse. Nothing is
    validated: an odd count or a bad token (``NaN``) goes through as-is.
    """
    cleaned = (text or "").strip().replace(",", " ")
    return tuple(to_number(token) for token in _SEPARATORS_RE.split(cleaned))


def build_poly_path(points: Sequence[float], closed: bool) -> str:
    """``M`` to the first pair, one ``L`` through the rest, ``z`` if closed."""
    head = " ".join(format_number(v) for v in points[:2])
    tail = " ".join(format_number(v) for v in points[2:])
    d = f"M{head}L{tail}"
    if closed:
        d += "z"
    return d
