#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import os
import shutil
from dataclasses import dataclass

from .math_utils import Vector2


@dataclass
class RenderConfig:
    """Settings for a render loop: grid size, pacing and glyphs."""
    width: int = 50
    height: int = 50
    fps_cap: float = 25.0
    clear_screen: bool = True
    line_char: str = '#'
    background: str = ' '
    fov: float = 0.8

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.fps_cap <= 0:
            raise ValueError(f"fps_cap must be positive, got {self.fps_cap}")
        for name in ('line_char', 'background'):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")

    def camera_fov(self) -> Vector2:
        """Horizontal/vertical fov with the vertical angle as the base.

        The horizontal half-angle is widened so tan(fov) follows the grid's
        width:height ratio and the image is not stretched.
        """
        tan_y = math.tan(self.fov)
        return Vector2(math.atan(tan_y * self.width / self.height), self.fov)

    @classmethod
    def detect_terminal(cls, reserve_rows: int = 1) -> 'RenderConfig':
        """
        Size the grid to the current terminal and guess its capabilities.
        Checks the terminal size and the TERM environment variable.
        """
        cols, rows = shutil.get_terminal_size()
        term = os.environ.get('TERM', '').lower()

        # A dumb terminal cannot interpret the clear-screen escape
        is_dumb = term in ('dumb', 'unknown')

        return cls(
            width=max(1, cols - 1),
            height=max(1, rows - reserve_rows),
            clear_screen=not is_dumb,
        )
