"""Immutable shape descriptors read from element attributes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from shape2path.engine.linear import parse_points
from shape2path.engine.numbers import first_given, nan_min, to_number

Attributes = Mapping[str, str]


def _num(attributes: Attributes, name: str) -> float:
    return to_number(attributes.get(name))


@dataclass(frozen=True)
class RectShape:
    kind: ClassVar[str] = "rect"

    x: float
    y: float
    width: float
    height: float
    # Resolved corner radii: each falls back to the other, then 0, then is
    # clamped to half the matching side.
    rx: float
    ry: float

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> RectShape:
        width = _num(attributes, "width")
        height = _num(attributes, "height")
        ax = _num(attributes, "rx")
        ay = _num(attributes, "ry")
        return cls(
            x=first_given(_num(attributes, "x"), 0.0),
            y=first_given(_num(attributes, "y"), 0.0),
            width=width,
            height=height,
            rx=nan_min(first_given(ax, ay, 0.0), width / 2),
            ry=nan_min(first_given(ay, ax, 0.0), height / 2),
        )


@dataclass(frozen=True)
class CircleShape:
    kind: ClassVar[str] = "circle"

    cx: float
    cy: float
    r: float

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> CircleShape:
        return cls(_num(attributes, "cx"), _num(attributes, "cy"), _num(attributes, "r"))


@dataclass(frozen=True)
class EllipseShape:
    kind: ClassVar[str] = "ellipse"

    cx: float
    cy: float
    rx: float
    ry: float

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> EllipseShape:
        return cls(
            _num(attributes, "cx"),
            _num(attributes, "cy"),
            _num(attributes, "rx"),
            _num(attributes, "ry"),
        )


@dataclass(frozen=True)
class LineShape:
    """Endpoints of a line.

    Coordinates go through the same number coercion as every other shape,
    so ``1e3`` renders as ``1000`` and a missing attribute as ``0`` rather than
    being copied through as raw text.
    """

    kind: ClassVar[str] = "line"

    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> LineShape:
        return cls(
            _num(attributes, "x1"),
            _num(attributes, "y1"),
            _num(attributes, "x2"),
            _num(attributes, "y2"),
        )


@dataclass(frozen=True)
class PolyShape:
    """Shared by polyline (open) and polygon (closed)."""

    kind: str
    points: tuple[float, ...]

    @classmethod
    def from_attributes(cls, attributes: Attributes, kind: str = "polyline") -> PolyShape:
        return cls(kind=kind, points=parse_points(attributes.get("points")))

    @property
    def closed(self) -> bool:
        return self.kind == "polygon"
