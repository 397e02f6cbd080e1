#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vector2, Vector3, Mat4
from .errors import OutOfBoundsError, MissingVertexError, ObjError
from .config import RenderConfig
from .line import Line, clip_line
from .rasterizer import LineKind, rasterize
from .char_buffer import CharBuffer
from .mesh import Mesh, create_cube
from .camera import Camera
from .renderer import Renderer
from .obj import load_obj, parse_obj
from .runner import Logic, ProcessReturn, Runner
