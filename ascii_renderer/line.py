#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/line.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .math_utils import Vector2

GridPoint = Tuple[int, int]


@dataclass(frozen=True)
class Line:
    """A single segment in floating-point screen space, drawn with `char`."""
    char: str
    points: Tuple[Vector2, Vector2]

    def __post_init__(self):
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"Line.char must be a single character, got {self.char!r}")
        # Accept plain (x, y) pairs as well as Vector2
        a, b = self.points
        object.__setattr__(self, 'points', (Vector2(*a), Vector2(*b)))


def round_coord(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero, saturating at 0.

    Grid coordinates are unsigned, so anything that rounds below zero lands
    on the first row/column.
    """
    if value <= 0.0:
        return 0
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def _to_grid(x: float, y: float) -> GridPoint:
    return round_coord(x), round_coord(y)


def clip_line(line: Line) -> Optional[Tuple[GridPoint, GridPoint]]:
    """
    Convert a screen-space Line into two non-negative grid coordinates.

    Only the x=0 and y=0 edges are clipped here; cells past the right or
    bottom edge are dropped later by the buffer's bounds check.

    Returns None when the segment cannot reach the non-negative quadrant,
    in which case nothing should be drawn.
    """
    p0, p1 = line.points
    if not all(math.isfinite(c) for c in (p0.x, p0.y, p1.x, p1.y)):
        return None

    if (p0.x < 0 and p1.x < 0) or (p0.y < 0 and p1.y < 0):
        return None

    # Axis-aligned: rounding (and saturating) each end is already exact
    if p0.x == p1.x or p0.y == p1.y:
        return _to_grid(p0.x, p0.y), _to_grid(p1.x, p1.y)

    first, second = (p0, p1) if p0.x < p1.x else (p1, p0)
    slope = (second.y - first.y) / (second.x - first.x)
    if slope == 0.0 or not math.isfinite(slope):
        # Underflow/overflow of a nearly axis-aligned segment
        return _to_grid(p0.x, p0.y), _to_grid(p1.x, p1.y)

    def y_at(x):
        return slope * (x - first.x) + first.y

    def x_at(y):
        return (y - first.y) / slope + first.x

    if first.x < 0:
        # Enters through the left edge, or through the top edge if the
        # left-edge crossing is above the grid.
        entry_y = y_at(0.0)
        if entry_y >= 0:
            return _to_grid(0.0, entry_y), _to_grid(second.x, second.y)
        entry_x = x_at(0.0)
        if entry_x < 0:
            return None
        return _to_grid(entry_x, 0.0), _to_grid(second.x, second.y)

    if first.y < 0:
        entry_x = x_at(0.0)
        if entry_x >= 0:
            return _to_grid(entry_x, 0.0), _to_grid(second.x, second.y)
        entry_y = y_at(0.0)
        if entry_y < 0:
            return None
        return _to_grid(0.0, entry_y), _to_grid(second.x, second.y)

    if second.y < 0:
        return _to_grid(first.x, first.y), _to_grid(x_at(0.0), 0.0)

    return _to_grid(p0.x, p0.y), _to_grid(p1.x, p1.y)
