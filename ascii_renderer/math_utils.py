#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Immutable 2-component vector (screen space)."""
    x: float
    y: float

    def __repr__(self):
        return f"Vector2({self.x:.2f}, {self.y:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar):
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar):
        return Vector2(self.x / scalar, self.y / scalar)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3-component vector.

    Used for positions, per-axis rotation angles (radians) and per-axis
    scale factors alike.
    """
    x: float
    y: float
    z: float

    def __repr__(self):
        return f"Vector3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vector3 index out of range")

    def __add__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar):
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def mul(self, other) -> 'Vector3':
        """Componentwise product."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))


ZERO3 = Vector3(0.0, 0.0, 0.0)
ONE3 = Vector3(1.0, 1.0, 1.0)


def _axis_rows(axis, rad):
    """Rows of the 3x3 rotation by rad about axis 0 (X), 1 (Y) or 2 (Z)."""
    c, s = math.cos(rad), math.sin(rad)
    if axis == 0:
        return ((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c))
    if axis == 1:
        return ((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c))
    return ((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0))


class Mat4:
    """
    Affine 4x4 transform acting on column vectors, stored as ``m[row][col]``.

    Built only from scale, translation and the X, Y, Z rotation sequence
    the model and view transforms use.
    """
    __slots__ = ('m',)

    def __init__(self, linear=((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
                 offset=(0.0, 0.0, 0.0)):
        self.m = [list(row) + [t] for row, t in zip(linear, offset)]
        self.m.append([0.0, 0.0, 0.0, 1.0])

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        return cls(offset=(x, y, z))

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Mat4':
        return cls(linear=((sx, 0.0, 0.0), (0.0, sy, 0.0), (0.0, 0.0, sz)))

    @classmethod
    def rotation_xyz(cls, angles: Vector3) -> 'Mat4':
        """Rotate about X, then Y, then Z (extrinsic): Rz @ Ry @ Rx."""
        result = cls()
        for axis in (0, 1, 2):
            result = cls(_axis_rows(axis, angles[axis])) @ result
        return result

    @classmethod
    def rotation_xyz_inverse(cls, angles: Vector3) -> 'Mat4':
        """Exact inverse of rotation_xyz(angles): Rx(-x) @ Ry(-y) @ Rz(-z)."""
        result = cls()
        for axis in (2, 1, 0):
            result = cls(_axis_rows(axis, -angles[axis])) @ result
        return result

    def __matmul__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        cols = list(zip(*other.m))
        res = Mat4()
        res.m = [[sum(a * b for a, b in zip(row, col)) for col in cols]
                 for row in self.m]
        return res

    def mul_vec3(self, v: Vector3) -> Vector3:
        """Apply to the point v (w=1); the w row is ignored."""
        x, y, z = (r[0] * v.x + r[1] * v.y + r[2] * v.z + r[3] for r in self.m[:3])
        return Vector3(x, y, z)
