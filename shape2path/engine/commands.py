"""Path commands and their serialization to SVG path data."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shape2path.engine.numbers import format_number

# Absolute command letters produced by the converters and their operand counts.
#   M/L (x y), H/V (x | y), A (rx ry rotation large-arc sweep x y),
#   C (x1 y1 x2 y2 x y), Q (x1 y1 x y), Z ()
OPERAND_COUNTS: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "A": 7,
    "C": 6,
    "Q": 4,
    "Z": 0,
}


@dataclass(frozen=True)
class PathCommand:
    """One drawing instruction with a fixed number of operands."""

    code: str
    operands: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        expected = OPERAND_COUNTS.get(self.code)
        if expected is None:
            raise ValueError(f"Unknown path command: {self.code!r}")
        operands = tuple(self.operands)
        if len(operands) != expected:
            raise ValueError(
                f"Path command {self.code} takes {expected} operands, got {len(operands)}"
            )
        object.__setattr__(self, "operands", operands)

    @classmethod
    def of(cls, code: str, *operands: float) -> PathCommand:
        return cls(code, operands)

    def to_list(self) -> list[str | float]:
        return [self.code, *self.operands]

    def __str__(self) -> str:
        return " ".join([self.code, *(format_number(v) for v in self.operands)])


def format_path_data(commands: Iterable[PathCommand]) -> str:
    """Join commands into a path data string: ``M 0 0 L 10 0 ...``."""
    return " ".join(str(cmd) for cmd in commands)


def path_element(d: str) -> str:
    """Standalone ``<path>`` markup for a path data string."""
    safe_d = d.replace('"', "&quot;")
    return f'<path d="{safe_d}"/>'
