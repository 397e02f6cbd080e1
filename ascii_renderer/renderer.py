#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from typing import Iterator, Optional

from .camera import Camera
from .line import Line
from .math_utils import Vector2, Vector3

logger = logging.getLogger(__name__)


class Renderer:
    """
    Wireframe renderer owning a list of meshes and one camera.

    draw(buffer) walks every edge of every mesh (mesh order, then edge
    order) and pushes it through:

      1. model transform   -- mesh scale, then rotation X -> Y -> Z
      2. view transform    -- translate by -camera.position, inverse rotation
      3. near-plane check  -- edges touching cz <= 0 are skipped whole
      4. perspective       -- ndc = (cx/cz, cy/cz) / tan(fov)
      5. viewport          -- ndc [-1, 1] onto buffer cells, y flipped
      6. clip + rasterize  -- CharBuffer.draw_line

    There is no depth test: later edges overwrite earlier ones.
    """

    def __init__(self, meshes=None, camera: Optional[Camera] = None):
        self.meshes = list(meshes) if meshes is not None else []
        self.camera = camera if camera is not None else Camera()

    def __repr__(self):
        return f"Renderer(meshes={self.meshes!r}, camera={self.camera!r})"

    @staticmethod
    def project(point: Vector3, width, height, tan_fov) -> Optional[Vector2]:
        """Camera-space point -> buffer space, or None at/behind the eye."""
        if point.z <= 0:
            return None
        ndc_x = point.x / point.z / tan_fov[0]
        ndc_y = point.y / point.z / tan_fov[1]
        return Vector2((ndc_x + 1.0) * width / 2.0,
                       (1.0 - ndc_y) * height / 2.0)

    def lines(self, width: int, height: int) -> Iterator[Line]:
        """Yield the screen-space Line of every drawable edge."""
        tan_fov = self.camera.tan_fov()
        view = self.camera.view_matrix()

        for mesh in self.meshes:
            matrix = view @ mesh.model_matrix()
            screen = {}

            def to_screen(index):
                if index not in screen:
                    cam = matrix.mul_vec3(mesh.vertex(index))
                    screen[index] = self.project(cam, width, height, tan_fov)
                return screen[index]

            skipped = 0
            for i, j in mesh.edges:
                a = to_screen(i)
                b = to_screen(j)
                if a is None or b is None:
                    skipped += 1
                    continue
                yield Line(mesh.char, (a, b))

            if skipped:
                logger.debug("mesh %r: skipped %d edge(s) crossing the eye plane",
                             mesh.name, skipped)

    def draw(self, buffer):
        """Render every mesh into buffer (which is not cleared first).

        All lines are projected before the first write, so a broken mesh
        raises without leaving a partial frame behind.
        """
        lines = list(self.lines(buffer.width, buffer.height))
        buffer.draw_lines(lines)
