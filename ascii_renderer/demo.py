#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import math

from .camera import Camera
from .config import RenderConfig
from .math_utils import Vector3
from .mesh import create_cube
from .obj import load_obj
from .renderer import Renderer
from .runner import Logic, ProcessReturn, Runner

logger = logging.getLogger(__name__)


class SpinningMeshLogic(Logic):
    """
    Clears the buffer, draws the scene, then spins every mesh.

    With ``wobble`` each mesh's scale also pulses with sin(time), like the
    classic breathing-cube demo.
    """

    def __init__(self, renderer: Renderer, background=' ', wobble=False,
                 spin=Vector3(0.8, 1.0, 1.2)):
        self.renderer = renderer
        self.background = background
        self.wobble = wobble
        self.spin = spin
        self.time_offset = 0.0

    def process(self, buffer, delta):
        buffer.fill(self.background)
        self.time_offset += delta

        self.renderer.draw(buffer)

        t = self.time_offset
        for mesh in self.renderer.meshes:
            mesh.rotation = mesh.rotation + self.spin * delta
            if self.wobble:
                mesh.scale = Vector3(1.0 + math.sin(t * 2.0) * 0.5,
                                     1.0 + math.sin(t * 3.0) * 0.5,
                                     1.0 + math.sin(t * 5.0) * 0.5)
        return ProcessReturn.CONTINUE


def build_renderer(config: RenderConfig, model=None, model_scale=1.0):
    """Cube by default, otherwise every mesh in the OBJ file, recentred."""
    if model:
        meshes = load_obj(model, char=config.line_char)
        for mesh in meshes:
            mesh.scale = Vector3(model_scale, model_scale, model_scale)
            origin = mesh.recenter()
            logger.debug("recentred %r from %s", mesh.name, origin)
    else:
        cube = create_cube()
        cube.char = config.line_char
        meshes = [cube]

    camera = Camera(position=Vector3(0.0, 0.0, -7.0), fov=config.camera_fov())
    return Renderer(meshes, camera)


class CursesRunner(Runner):
    """Runner that paints the buffer onto a curses screen instead of a stream."""

    def __init__(self, stdscr, config, logic):
        super().__init__(config.width, config.height, config.fps_cap, logic)
        self.stdscr = stdscr
        self.hud = ''

    def present(self, clear=True):
        stdscr = self.stdscr
        stdscr.erase()
        th, tw = stdscr.getmaxyx()
        try:
            stdscr.addstr(0, 0, self.hud[:tw - 1], curses.A_BOLD)
        except curses.error:
            pass
        for y, row in enumerate(self.buffer.rows()):
            if y + 1 >= th:
                break
            try:
                stdscr.addstr(y + 1, 0, row[:tw - 1])
            except curses.error:
                pass
        stdscr.refresh()


class DemoApp(Logic):
    """
    Interactive harness: arrow keys orbit the camera around the origin,
    [ ] change the fov, + - zoom in and out, space toggles the scale
    wobble, q quits.
    """

    def __init__(self, stdscr, args, config=None):
        self.stdscr = stdscr

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        # ── RenderConfig from terminal detection + CLI overrides ────────
        config = config or RenderConfig.detect_terminal(reserve_rows=2)
        if args.char:
            config.line_char = args.char
        if args.fps:
            config.fps_cap = args.fps
        self.config = config

        renderer = build_renderer(config, args.model, args.scale)
        self.renderer = renderer
        self.scene = SpinningMeshLogic(renderer, background=config.background,
                                       wobble=args.wobble)
        self.runner = CursesRunner(stdscr, config, self)
        self.fps = 0.0

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return True

        camera = self.renderer.camera
        if key == ord('q'):
            return False
        elif key == curses.KEY_UP:
            camera.orbit(0.0, 0.1)
        elif key == curses.KEY_DOWN:
            camera.orbit(0.0, -0.1)
        elif key == curses.KEY_RIGHT:
            camera.orbit(0.1, 0.0)
        elif key == curses.KEY_LEFT:
            camera.orbit(-0.1, 0.0)
        elif key in (ord('='), ord('+')):
            camera.zoom(-0.5)
        elif key == ord('-'):
            camera.zoom(0.5)
        elif key == ord('['):
            camera.adjust_fov(-0.05)
        elif key == ord(']'):
            camera.adjust_fov(0.05)
        elif key == ord(' '):
            self.scene.wobble = not self.scene.wobble
        return True

    def process(self, buffer, delta):
        if not self.handle_input():
            return ProcessReturn.END
        if delta > 0:
            self.fps = 1.0 / delta
        edges = sum(len(m.edges) for m in self.renderer.meshes)
        self.runner.hud = (f" MESH:{len(self.renderer.meshes)}"
                           f" | E:{edges}"
                           f" | FPS:{self.fps:.0f}"
                           f" | q quit ").center(buffer.width, '=')
        return self.scene.process(buffer, delta)

    def run(self):
        self.runner.run(clear=False)


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
