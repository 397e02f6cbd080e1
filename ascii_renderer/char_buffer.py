#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/char_buffer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .errors import OutOfBoundsError
from .line import clip_line
from .rasterizer import rasterize


def _check_char(char):
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


class CharBuffer:
    """
    Fixed-size grid of characters, the only output surface.

    Cells are stored row-major (``cells[y][x]``) with ``(0, 0)`` at the top
    left. The buffer persists between frames; callers usually start each
    frame with ``fill(' ')``.
    """
    __slots__ = ['_width', '_height', 'cells']

    def __init__(self, width: int, height: int, fill: str = ' '):
        self._width, self._height = int(width), int(height)
        if self._width <= 0 or self._height <= 0:
            raise ValueError(f"buffer dimensions must be positive, got {width}x{height}")
        _check_char(fill)
        self.cells = [[fill] * self._width for _ in range(self._height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def fill(self, char: str):
        _check_char(char)
        for row in self.cells:
            row[:] = [char] * self._width

    def in_bounds(self, x, y) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_char(self, x: int, y: int, char: str):
        """Write one cell. Raises OutOfBoundsError outside the grid."""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        _check_char(char)
        self.cells[y][x] = char

    def get_char(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return self.cells[y][x]

    def rows(self):
        """Each grid row joined into a string, top to bottom."""
        return [''.join(row) for row in self.cells]

    def __str__(self):
        return '\n'.join(self.rows())

    def draw_line(self, line):
        """Clip a screen-space Line to the grid and rasterize it."""
        coords = clip_line(line)
        if coords is None:
            return
        rasterize(self, line.char, coords[0], coords[1])

    def draw_lines(self, lines):
        """Draw lines in order; later lines win where they overlap."""
        for line in lines:
            self.draw_line(line)
