#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from enum import Enum

from .errors import OutOfBoundsError


class LineKind(Enum):
    """Which axis a segment is stepped along."""
    HORIZONTAL = 'horizontal'        # |slope| <= 1, one cell per column
    VERTICAL_UP = 'vertical_up'      # slope > 1, y grows with x
    VERTICAL_DOWN = 'vertical_down'  # slope < -1, y shrinks as x grows


def classify(start, end) -> LineKind:
    """Classify a segment whose start has the smaller (or equal) x."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if dx == 0:
        if dy > 0:
            return LineKind.VERTICAL_UP
        if dy < 0:
            return LineKind.VERTICAL_DOWN
        return LineKind.HORIZONTAL  # single cell
    slope = dy / dx
    if slope > 1:
        return LineKind.VERTICAL_UP
    if slope < -1:
        return LineKind.VERTICAL_DOWN
    return LineKind.HORIZONTAL


def _plot(buf, x, y, char):
    try:
        buf.set_char(x, y, char)
    except OutOfBoundsError:
        pass


def draw_horizontal(buf, char, start, end):
    """One write per column from start.x to end.x (inclusive)."""
    x0, y0 = start
    x1, y1 = end
    slope = (y1 - y0) / (x1 - x0) if x1 != x0 else 0.0
    # Columns past the right edge can never be in bounds
    for x in range(x0, min(x1, buf.width - 1) + 1):
        _plot(buf, x, int(slope * (x - x0) + y0), char)


def draw_vertical_up(buf, char, start, end):
    """One write per row, walking y upward from the start point."""
    x0, y0 = start
    x1, y1 = end
    inv_slope = (x1 - x0) / (y1 - y0)
    for y in range(y0, min(y1, buf.height - 1) + 1):
        _plot(buf, int(inv_slope * (y - y0) + x0), y, char)


def draw_vertical_down(buf, char, start, end):
    """One write per row, anchored at the end point so y still increases."""
    x0, y0 = start
    x1, y1 = end
    inv_slope = (x1 - x0) / (y1 - y0)
    for y in range(y1, min(y0, buf.height - 1) + 1):
        _plot(buf, int(inv_slope * (y - y1) + x1), y, char)


_DRAWERS = {
    LineKind.HORIZONTAL: draw_horizontal,
    LineKind.VERTICAL_UP: draw_vertical_up,
    LineKind.VERTICAL_DOWN: draw_vertical_down,
}


def rasterize(buf, char, start, end):
    """
    Mark every cell the segment between two non-negative grid points covers.

    Cells outside the buffer are skipped silently; partially off-grid
    lines are normal, not errors.
    """
    if start[0] > end[0]:
        start, end = end, start
    _DRAWERS[classify(start, end)](buf, char, start, end)
