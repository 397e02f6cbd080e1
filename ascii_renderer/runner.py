#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/runner.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys
import time
from enum import Enum

from .char_buffer import CharBuffer

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


class ProcessReturn(Enum):
    """What the logic wants the runner to do after this frame."""
    CONTINUE = 'continue'
    END = 'end'


class Logic:
    """Per-frame callback driven by a Runner. Subclass and override process()."""

    def process(self, buffer: CharBuffer, delta: float) -> ProcessReturn:
        """Mutate buffer for this frame; delta is seconds since the last one."""
        raise NotImplementedError


class Runner:
    """
    Frame loop: call the logic, print the buffer, sleep to honor fps_cap.

    The buffer persists across frames, so logic usually begins with
    ``buffer.fill(' ')``.
    """

    def __init__(self, width: int, height: int, fps_cap: float, logic, stream=None):
        if fps_cap <= 0:
            raise ValueError(f"fps_cap must be positive, got {fps_cap}")
        self.buffer = CharBuffer(width, height)
        self.fps_cap = fps_cap
        self.logic = logic
        self.stream = stream if stream is not None else sys.stdout
        self.frames = 0

    @classmethod
    def from_config(cls, config, logic, stream=None):
        return cls(config.width, config.height, config.fps_cap, logic, stream=stream)

    def present(self, clear: bool = True):
        out = self.stream
        if clear:
            out.write(CLEAR_SCREEN)
        out.write(str(self.buffer))
        out.write('\n')
        out.flush()

    def step(self, delta: float, clear: bool = True) -> ProcessReturn:
        """Run one frame: process, then present."""
        process = getattr(self.logic, 'process', self.logic)
        result = process(self.buffer, delta)
        self.frames += 1
        self.present(clear)
        return result

    def run(self, clear: bool = True):
        """Loop until the logic returns ProcessReturn.END."""
        frame_time = 1.0 / self.fps_cap
        if clear:
            self.stream.write(HIDE_CURSOR)
        logger.debug("runner started: %dx%d at <= %s fps",
                     self.buffer.width, self.buffer.height, self.fps_cap)
        last = time.perf_counter()
        # First frame gets a nominal delta so logic never divides by zero
        delta = frame_time
        try:
            while True:
                start = time.perf_counter()
                if self.step(delta, clear) is ProcessReturn.END:
                    break
                elapsed = time.perf_counter() - start
                if elapsed < frame_time:
                    time.sleep(frame_time - elapsed)
                now = time.perf_counter()
                delta = now - last
                last = now
        finally:
            if clear:
                self.stream.write(SHOW_CURSOR)
                self.stream.flush()
        logger.debug("runner stopped after %d frame(s)", self.frames)
