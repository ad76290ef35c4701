"""Attribute number coercion and rendering.

Shape attributes arrive as strings (or are missing). Coercion follows the
permissive rules browsers apply to ``Number(value)``: a missing or blank
value is ``0``, anything that is not a numeric literal is ``NaN``. Rendering
mirrors ``Number.prototype.toString`` so that path data looks the same as
hand-written SVG (``50`` rather than ``50.0``, ``NaN`` kept verbatim).
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_RE = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def to_number(value: str | float | None) -> float:
    """Coerce an attribute value to a float. Never raises."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    text = value.strip()
    if not text:
        return 0.0
    if text in _INFINITY:
        return _INFINITY[text]
    if _DECIMAL_RE.fullmatch(text):
        return float(text)

    radix = _RADIX_RE.fullmatch(text)
    if radix:
        try:
            return float(int(radix.group(2), _RADIX_BASES[radix.group(1).lower()]))
        except ValueError:
            return math.nan
    return math.nan


def is_truthy(value: float) -> bool:
    """Zero and NaN count as 'not given'."""
    return not (value == 0 or math.isnan(value))


def first_given(*values: float) -> float:
    """Return the first truthy value, or the last value if none is."""
    for value in values[:-1]:
        if is_truthy(value):
            return value
    return values[-1]


def nan_min(a: float, b: float) -> float:
    """``min`` that propagates NaN from either side."""
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return a if a <= b else b


def format_number(value: float) -> str:
    """Render a number the way ECMAScript ``Number#toString`` does."""
    if isinstance(value, bool):
        value = int(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() yields the shortest digit string that round-trips.
    _, digits, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1

    text = "".join(str(d) for d in digits)
    k = len(text)
    n = exponent + k

    if k <= n <= 21:
        return sign + text + "0" * (n - k)
    if 0 < n <= 21:
        return sign + text[:n] + "." + text[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + text

    e = n - 1
    mantissa = text if k == 1 else text[0] + "." + text[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
