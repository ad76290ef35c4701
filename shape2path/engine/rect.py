"""Rectangle → path data, with optional rounded corners."""

from __future__ import annotations

from shape2path.engine.numbers import format_number as _n


def build_rect_path(x: float, y: float, width: float, height: float, rx: float, ry: float) -> str:
    """Path data for a rectangle whose corner radii are already resolved.

    Without rounding this is ``M x y h w v h h -w z``. With rounding the path
    starts below the top-left corner and walks clockwise, one quarter arc per
    corner, with the straight edges shortened by both radii. Degenerate edges
    are emitted as they come out.
    """
    if rx == 0 or ry == 0:
        return f"M{_n(x)} {_n(y)}h{_n(width)}v{_n(height)}h{_n(-width)}z"

    arc = f"a{_n(rx)} {_n(ry)} 0 0 1"
    segments = [
        f"M{_n(x)} {_n(y + ry)}",
        f"{arc} {_n(rx)} {_n(-ry)}",
        f"h{_n(width - rx - rx)}",
        f"{arc} {_n(rx)} {_n(ry)}",
        f"v{_n(height - ry - ry)}",
        f"{arc} {_n(-rx)} {_n(ry)}",
        f"h{_n(rx + rx - width)}",
        f"{arc} {_n(-rx)} {_n(-ry)}",
        "z",
    ]
    return "\n".join(segments)
