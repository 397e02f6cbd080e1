#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .errors import MissingVertexError
from .math_utils import Vector3, Mat4, ZERO3, ONE3

DEFAULT_CHAR = '#'


class Mesh:
    """
    Wireframe mesh: sparse indexed vertices plus an edge list.

    Vertices live in local space keyed by arbitrary non-negative ints, so
    procedural builders can insert by id and leave gaps. Rotation (radians)
    and scale are applied about the local origin every frame; call
    recenter() first on geometry that is not authored around the origin.
    """

    def __init__(self, name=None, char=DEFAULT_CHAR):
        self.name = name
        self.char = char
        self.vertices = {}   # int -> Vector3
        self.edges = []      # list of (int, int)
        self.rotation = ZERO3
        self.scale = ONE3

    def __repr__(self):
        return (f"Mesh(name={self.name!r}, vertices={len(self.vertices)}, "
                f"edges={len(self.edges)})")

    @classmethod
    def from_geometry(cls, positions, edges, name=None, char=DEFAULT_CHAR):
        """Build a mesh from already-parsed positions and index pairs.

        Vertex indices are the positions' list offsets.
        """
        mesh = cls(name=name, char=char)
        for index, pos in enumerate(positions):
            mesh.insert_vertex(index, pos)
        for edge in edges:
            mesh.add_edge(edge)
        return mesh

    def insert_vertex(self, index: int, position):
        if index < 0:
            raise ValueError(f"vertex index must be non-negative, got {index}")
        if not isinstance(position, Vector3):
            position = Vector3(*position)
        self.vertices[index] = position

    def add_edge(self, edge):
        i, j = edge
        self.edges.append((i, j))

    def vertex(self, index: int) -> Vector3:
        try:
            return self.vertices[index]
        except KeyError:
            raise MissingVertexError(index, self.name) from None

    def recenter(self) -> Vector3:
        """Move the centroid to the local origin and return the old centroid."""
        if not self.vertices:
            return ZERO3
        total = ZERO3
        for v in self.vertices.values():
            total = total + v
        centroid = total / len(self.vertices)
        for index, v in self.vertices.items():
            self.vertices[index] = v - centroid
        return centroid

    def model_matrix(self) -> Mat4:
        """Scale first, then rotate about X, Y and Z in that order."""
        return (Mat4.rotation_xyz(self.rotation)
                @ Mat4.scale(self.scale.x, self.scale.y, self.scale.z))

    def transformed_vertex(self, index: int, matrix=None) -> Vector3:
        if matrix is None:
            matrix = self.model_matrix()
        return matrix.mul_vec3(self.vertex(index))


def create_cube() -> Mesh:
    """Generate a 2 x 2 x 2 cube centred on the origin, for testing and demos."""
    cube = Mesh(name='cube')
    # Top square
    cube.insert_vertex(0, Vector3(1.0, 1.0, 1.0))
    cube.insert_vertex(1, Vector3(-1.0, 1.0, 1.0))
    cube.insert_vertex(2, Vector3(-1.0, -1.0, 1.0))
    cube.insert_vertex(3, Vector3(1.0, -1.0, 1.0))
    for edge in ((0, 1), (1, 2), (2, 3), (3, 0)):
        cube.add_edge(edge)

    # Bottom square
    cube.insert_vertex(4, Vector3(1.0, 1.0, -1.0))
    cube.insert_vertex(5, Vector3(-1.0, 1.0, -1.0))
    cube.insert_vertex(6, Vector3(-1.0, -1.0, -1.0))
    cube.insert_vertex(7, Vector3(1.0, -1.0, -1.0))
    for edge in ((4, 5), (5, 6), (6, 7), (7, 4)):
        cube.add_edge(edge)

    # Connecting the squares
    for edge in ((0, 4), (1, 5), (2, 6), (3, 7)):
        cube.add_edge(edge)
    return cube
