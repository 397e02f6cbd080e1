#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vector2, Vector3, Mat4, ZERO3


class Camera:
    """
    Viewpoint for the renderer.

    position is the eye in world space, rotation its per-axis orientation
    (radians, same X-then-Y-then-Z order as meshes), and fov the half-extent
    view angles (radians) across the buffer's width and height. Keep fov
    proportional to the buffer's width:height ratio or the image stretches.
    """
    __slots__ = ('position', 'rotation', 'fov')

    def __init__(self, position: Vector3 = Vector3(0.0, 0.0, -7.0),
                 rotation: Vector3 = ZERO3,
                 fov: Vector2 = Vector2(0.8, 0.8)):
        self.position = position
        self.rotation = rotation
        self.fov = fov
        self.tan_fov()

    def __repr__(self):
        return f"Camera(position={self.position}, rotation={self.rotation}, fov={self.fov})"

    def view_matrix(self) -> Mat4:
        """World space -> camera space: undo the translation, then the rotation."""
        p = self.position
        return (Mat4.rotation_xyz_inverse(self.rotation)
                @ Mat4.translation(-p.x, -p.y, -p.z))

    def tan_fov(self):
        """(tan(fov.x), tan(fov.y)); raises ValueError for unusable angles."""
        fx, fy = self.fov
        if not (0 < fx < math.pi / 2 and 0 < fy < math.pi / 2):
            raise ValueError(f"fov angles must be in (0, pi/2) radians, got {self.fov}")
        return math.tan(fx), math.tan(fy)

    def orbit(self, dyaw: float, dpitch: float):
        """
        Swing the eye around the world origin, keeping its distance.

        Yaw and pitch (radians) are added to the Y and X angles and the
        position is moved so the origin stays straight ahead.
        """
        distance = self.position.magnitude()
        self.rotation = self.rotation + Vector3(dpitch, dyaw, 0.0)
        self.position = Mat4.rotation_xyz(self.rotation).mul_vec3(
            Vector3(0.0, 0.0, -distance))

    def zoom(self, delta: float):
        """Move toward (negative) or away from (positive) the origin, min 0.5."""
        distance = self.position.magnitude()
        target = max(0.5, distance + delta)
        if distance == 0:
            self.position = Mat4.rotation_xyz(self.rotation).mul_vec3(
                Vector3(0.0, 0.0, -target))
        else:
            self.position = self.position * (target / distance)

    def adjust_fov(self, delta: float):
        """Widen or narrow both fov angles by delta radians, keeping them usable."""
        limit = math.pi / 2 - 0.01
        fx, fy = self.fov
        self.fov = Vector2(max(0.05, min(limit, fx + delta)),
                           max(0.05, min(limit, fy + delta)))
