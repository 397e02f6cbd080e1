import logging
import math

import pytest

from ascii_renderer.camera import Camera
from ascii_renderer.char_buffer import CharBuffer
from ascii_renderer.errors import MissingVertexError
from ascii_renderer.math_utils import Vector2, Vector3
from ascii_renderer.mesh import Mesh, create_cube
from ascii_renderer.renderer import Renderer

TAN = (math.tan(0.8), math.tan(0.8))


def marked(buf):
    return {(x, y) for y, row in enumerate(buf.cells)
            for x, c in enumerate(row) if c != ' '}


def cube_scene():
    camera = Camera(position=Vector3(0.0, 0.0, -7.0),
                    rotation=Vector3(0.0, 0.0, 0.0),
                    fov=Vector2(0.8, 0.8))
    return Renderer([create_cube()], camera)


def test_project_centre_of_view():
    p = Renderer.project(Vector3(0.0, 0.0, 5.0), 50, 50, TAN)
    assert p.x == pytest.approx(25.0)
    assert p.y == pytest.approx(25.0)


def test_project_edge_of_fov_maps_to_buffer_edge():
    p = Renderer.project(Vector3(2.0 * TAN[0], 2.0 * TAN[1], 2.0), 40, 20, TAN)
    assert p.x == pytest.approx(40.0)
    assert p.y == pytest.approx(0.0)  # up is row 0


@pytest.mark.parametrize("z", [0.0, -0.001, -5.0])
def test_project_at_or_behind_eye_is_none(z):
    assert Renderer.project(Vector3(1.0, 1.0, z), 50, 50, TAN) is None


def test_cube_renders_symmetric_wireframe():
    buf = CharBuffer(50, 50)
    cube_scene().draw(buf)
    cells = marked(buf)
    assert cells
    assert all(buf.get_char(x, y) == '#' for x, y in cells)
    # screen coordinate c mirrors to 50 - c about the view centre
    assert {(50 - x, y) for x, y in cells} == cells
    assert {(x, 50 - y) for x, y in cells} == cells
    # near face corners
    assert {(21, 21), (29, 21), (21, 29), (29, 29)} <= cells


def test_full_turn_returns_to_the_same_frame():
    renderer = cube_scene()
    before = CharBuffer(50, 50)
    renderer.draw(before)

    renderer.meshes[0].rotation = Vector3(0.0, 0.0, 0.7)
    quarter = CharBuffer(50, 50)
    renderer.draw(quarter)
    assert quarter.cells != before.cells

    renderer.meshes[0].rotation = Vector3(0.0, 0.0, 2 * math.pi)
    after = CharBuffer(50, 50)
    renderer.draw(after)
    assert after.cells == before.cells


def test_lines_follow_mesh_then_edge_order():
    renderer = cube_scene()
    second = create_cube()
    second.char = '*'
    renderer.meshes.append(second)
    lines = list(renderer.lines(50, 50))
    assert len(lines) == 24
    assert [l.char for l in lines] == ['#'] * 12 + ['*'] * 12


def test_later_mesh_overwrites_earlier():
    renderer = cube_scene()
    second = create_cube()
    second.char = '*'
    renderer.meshes.append(second)
    buf = CharBuffer(50, 50)
    renderer.draw(buf)
    assert {buf.get_char(x, y) for x, y in marked(buf)} == {'*'}


def test_edges_crossing_the_eye_plane_are_skipped(caplog):
    renderer = cube_scene()
    renderer.camera.position = Vector3(0.0, 0.0, 0.0)
    with caplog.at_level(logging.DEBUG, logger='ascii_renderer.renderer'):
        lines = list(renderer.lines(50, 50))
    # only the square at z=+1 is in front of the eye
    assert len(lines) == 4
    assert "skipped 8" in caplog.text
    buf = CharBuffer(50, 50)
    renderer.draw(buf)
    assert marked(buf)


def test_mesh_behind_camera_draws_nothing():
    renderer = cube_scene()
    renderer.camera.position = Vector3(0.0, 0.0, 7.0)
    buf = CharBuffer(50, 50)
    renderer.draw(buf)
    assert not marked(buf)


def test_empty_mesh_draws_nothing():
    renderer = Renderer([Mesh()], Camera())
    buf = CharBuffer(10, 10)
    renderer.draw(buf)
    assert not marked(buf)


def test_missing_vertex_fails_fast():
    mesh = Mesh(name='broken')
    mesh.insert_vertex(0, Vector3(0.0, 0.0, 0.0))
    mesh.add_edge((0, 5))
    renderer = Renderer([mesh], Camera())
    with pytest.raises(MissingVertexError):
        renderer.draw(CharBuffer(10, 10))


def test_draw_does_not_clear_buffer():
    buf = CharBuffer(50, 50)
    buf.set_char(0, 0, '@')
    cube_scene().draw(buf)
    assert buf.get_char(0, 0) == '@'


def test_missing_vertex_leaves_buffer_untouched():
    mesh = create_cube()
    mesh.add_edge((0, 99))
    renderer = Renderer([mesh], Camera())
    buf = CharBuffer(50, 50)
    with pytest.raises(MissingVertexError):
        renderer.draw(buf)
    assert not marked(buf)


def test_vertex_just_in_front_of_the_eye_is_clipped_not_fatal():
    # cz = 1e-300 projects roughly 1e301 cells off screen
    mesh = Mesh.from_geometry([(1.0, 1.0, 1e-300), (0.0, 0.0, 1.0)], [(0, 1)])
    camera = Camera(position=Vector3(0.0, 0.0, 0.0))
    buf = CharBuffer(50, 50)
    Renderer([mesh], camera).draw(buf)
    assert (buf.width, buf.height) == (50, 50)
    assert len(buf.cells) == 50 and all(len(row) == 50 for row in buf.cells)
    assert (25, 25) in marked(buf)
