"""Convert SVG basic shapes into equivalent path elements."""

from shape2path.engine.circle import KAPPA, approximate, circle_path_data
from shape2path.engine.commands import PathCommand, format_path_data, path_element
from shape2path.engine.dispatcher import convert, shape2path
from shape2path.engine.linear import build_line_path, build_poly_path
from shape2path.engine.rect import build_rect_path
from shape2path.models.options import AttributeCleanup, CircleAlgorithm, ConversionOptions

__version__ = "0.1.0"

__all__ = [
    "KAPPA",
    "AttributeCleanup",
    "CircleAlgorithm",
    "ConversionOptions",
    "PathCommand",
    "approximate",
    "build_line_path",
    "build_poly_path",
    "build_rect_path",
    "circle_path_data",
    "convert",
    "format_path_data",
    "path_element",
    "shape2path",
]
