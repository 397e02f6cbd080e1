#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class OutOfBoundsError(IndexError):
    """A cell write landed outside the CharBuffer grid."""

    def __init__(self, x, y, width, height):
        super().__init__(
            f"cell ({x}, {y}) is outside the {width}x{height} buffer")
        self.x = x
        self.y = y


class MissingVertexError(KeyError):
    """An edge references a vertex index the mesh does not contain."""

    def __init__(self, index, mesh_name=None):
        where = f" in mesh '{mesh_name}'" if mesh_name else ""
        super().__init__(f"edge references missing vertex {index}{where}")
        self.index = index


class ObjError(ValueError):
    """Malformed Wavefront OBJ data."""

    def __init__(self, message, line_no=None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
