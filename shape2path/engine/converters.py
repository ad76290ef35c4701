"""Shape converters. Importing this module registers them."""

from __future__ import annotations

from collections.abc import Mapping

from shape2path.engine.circle import circle_path_data
from shape2path.engine.linear import build_line_path, build_poly_path
from shape2path.engine.rect import build_rect_path
from shape2path.engine.registry import converter
from shape2path.engine.shapes import CircleShape, EllipseShape, LineShape, PolyShape, RectShape
from shape2path.models.options import ConversionOptions


@converter(
    kinds=("rect",),
    # Historical behaviour: rect drops the circle attribute names, not its own.
    strip=("cx", "cy", "r"),
    strict_strip=("x", "y", "width", "height", "rx", "ry"),
    description="Rectangle, optionally with rounded corners",
)
def rect_to_path(attributes: Mapping[str, str], kind: str, options: ConversionOptions) -> str:
    s = RectShape.from_attributes(attributes)
    return build_rect_path(s.x, s.y, s.width, s.height, s.rx, s.ry)


@converter(kinds=("circle",), strip=("cx", "cy", "r"), description="Circle")
def circle_to_path(attributes: Mapping[str, str], kind: str, options: ConversionOptions) -> str:
    s = CircleShape.from_attributes(attributes)
    return circle_path_data(s.cx, s.cy, s.r, s.r, options.circle_algorithm, options.circle_segments)


@converter(kinds=("ellipse",), strip=("cx", "cy", "rx", "ry"), description="Ellipse")
def ellipse_to_path(attributes: Mapping[str, str], kind: str, options: ConversionOptions) -> str:
    s = EllipseShape.from_attributes(attributes)
    return circle_path_data(s.cx, s.cy, s.rx, s.ry, options.circle_algorithm, options.circle_segments)


@converter(kinds=("line",), strip=("x1", "y1", "x2", "y2"), description="Line segment")
def line_to_path(attributes: Mapping[str, str], kind: str, options: ConversionOptions) -> str:
    s = LineShape.from_attributes(attributes)
    return build_line_path(s.x1, s.y1, s.x2, s.y2)


@converter(kinds=("polyline", "polygon"), strip=("points",), description="Open or closed point list")
def poly_to_path(attributes: Mapping[str, str], kind: str, options: ConversionOptions) -> str:
    s = PolyShape.from_attributes(attributes, kind)
    return build_poly_path(s.points, s.closed)
