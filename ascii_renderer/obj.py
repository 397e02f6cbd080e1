#
# PROJECT: ascii-renderer
# MODULE: ascii_renderer/obj.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .errors import ObjError
from .math_utils import Vector3
from .mesh import Mesh, DEFAULT_CHAR

logger = logging.getLogger(__name__)


def _resolve_index(token, vertex_count, line_no):
    # Handle v/vt/vn format by splitting by '/'
    raw = token.split('/')[0]
    try:
        n = int(raw)
    except ValueError:
        raise ObjError(f"bad vertex reference {token!r}", line_no) from None
    index = n - 1 if n > 0 else vertex_count + n
    if n == 0 or not 0 <= index < vertex_count:
        raise ObjError(f"vertex reference {n} out of range (have {vertex_count})", line_no)
    return index


def parse_obj(lines, char=DEFAULT_CHAR):
    """
    Parse Wavefront OBJ text into wireframe meshes.

    Each ``o``/``g`` statement starts a new mesh. Faces become closed edge
    loops and ``l`` polylines open chains. A mesh holds only the vertices it
    references, keyed by their zero-based position in the file, so indices
    are shared with the file and may have gaps.
    """
    positions = []
    meshes = []
    current = None
    pending_name = None
    ignored = 0

    def target():
        nonlocal current
        if current is None:
            current = Mesh(name=pending_name, char=char)
            meshes.append(current)
        return current

    def attach(mesh, index):
        if index not in mesh.vertices:
            mesh.insert_vertex(index, positions[index])

    for line_no, line in enumerate(lines, start=1):
        parts = line.split('#', 1)[0].split()
        if not parts:
            continue
        tag, args = parts[0], parts[1:]

        if tag == 'v':
            if len(args) < 3:
                raise ObjError("vertex needs three coordinates", line_no)
            try:
                positions.append(Vector3(*(float(a) for a in args[:3])))
            except ValueError:
                raise ObjError(f"bad vertex coordinates {args[:3]}", line_no) from None
        elif tag in ('o', 'g'):
            pending_name = ' '.join(args) or None
            current = None
        elif tag in ('f', 'l'):
            indices = [_resolve_index(a, len(positions), line_no) for a in args]
            if len(indices) < 2:
                logger.warning("line %d: '%s' with fewer than two vertices ignored",
                               line_no, tag)
                continue
            mesh = target()
            for index in indices:
                attach(mesh, index)
            for a, b in zip(indices, indices[1:]):
                mesh.add_edge((a, b))
            if tag == 'f' and len(indices) > 2:
                mesh.add_edge((indices[-1], indices[0]))
        else:
            ignored += 1

    if ignored:
        logger.debug("ignored %d unsupported OBJ statement(s)", ignored)
    return meshes


def load_obj(filename, char=DEFAULT_CHAR):
    """Load meshes from an OBJ file. File errors propagate as OSError."""
    with open(filename, 'r') as f:
        meshes = parse_obj(f, char=char)
    logger.info("loaded %d mesh(es) from %s", len(meshes), filename)
    return meshes
