"""Circle and ellipse approximation.

Three interchangeable ways to draw an axis-aligned ellipse:

- TwoArcs: two half-ellipse arc commands. Exact, smallest output.
- CubicBezier: four cubic curves, one per quadrant, using the kappa constant.
- QuadBezier: N quadratic curves whose control points sit where the tangents
  at neighbouring anchors meet. Fidelity grows with N.
"""

from __future__ import annotations

import math

from shape2path.engine.commands import PathCommand, format_path_data
from shape2path.models.options import DEFAULT_CIRCLE_SEGMENTS, CircleAlgorithm

# Control point distance for a quarter circle drawn with one cubic curve.
KAPPA = (-1 + math.sqrt(2)) / 3 * 4


def _two_arcs(cx: float, cy: float, rx: float, ry: float) -> list[PathCommand]:
    return [
        PathCommand.of("M", cx - rx, cy),
        PathCommand.of("A", rx, ry, 0, 1, 0, cx + rx, cy),
        PathCommand.of("A", rx, ry, 0, 1, 0, cx - rx, cy),
    ]


def _cubic_bezier(cx: float, cy: float, rx: float, ry: float) -> list[PathCommand]:
    k = KAPPA
    return [
        PathCommand.of("M", cx - rx, cy),
        PathCommand.of("C", cx - rx, cy - k * ry, cx - k * rx, cy - ry, cx, cy - ry),
        PathCommand.of("C", cx + k * rx, cy - ry, cx + rx, cy - k * ry, cx + rx, cy),
        PathCommand.of("C", cx + rx, cy + k * ry, cx + k * rx, cy + ry, cx, cy + ry),
        PathCommand.of("C", cx - k * rx, cy + ry, cx - rx, cy + k * ry, cx - rx, cy),
    ]


def _quad_bezier(cx: float, cy: float, rx: float, ry: float, segments: int) -> list[PathCommand]:
    step = 2 * math.pi / segments
    # Distance from an anchor to the tangent intersection, as a fraction of the radius.
    reach = math.tan(step / 2)

    commands = [PathCommand.of("M", cx + rx, cy)]
    for index in range(1, segments + 1):
        theta = index * step
        ax = rx * math.cos(theta)
        ay = ry * math.sin(theta)
        cpx = ax + rx * reach * math.cos(theta - math.pi / 2)
        cpy = ay + ry * reach * math.sin(theta - math.pi / 2)
        commands.append(PathCommand.of("Q", cpx + cx, cpy + cy, ax + cx, ay + cy))
    return commands


def approximate(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    algorithm: CircleAlgorithm | str | None = CircleAlgorithm.TWO_ARCS,
    segments: int = DEFAULT_CIRCLE_SEGMENTS,
) -> list[PathCommand]:
    """Commands for a closed ellipse centred on (cx, cy)."""
    algorithm = CircleAlgorithm.resolve(algorithm)
    if algorithm is CircleAlgorithm.CUBIC_BEZIER:
        return _cubic_bezier(cx, cy, rx, ry)
    if algorithm is CircleAlgorithm.QUAD_BEZIER:
        return _quad_bezier(cx, cy, rx, ry, segments or DEFAULT_CIRCLE_SEGMENTS)
    return _two_arcs(cx, cy, rx, ry)


def circle_path_data(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    algorithm: CircleAlgorithm | str | None = CircleAlgorithm.TWO_ARCS,
    segments: int = DEFAULT_CIRCLE_SEGMENTS,
) -> str:
    return format_path_data(approximate(cx, cy, rx, ry, algorithm, segments))
