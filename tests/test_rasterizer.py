import pytest

from ascii_renderer.char_buffer import CharBuffer
from ascii_renderer.line import Line
from ascii_renderer.rasterizer import (
    LineKind, classify, rasterize,
    draw_horizontal, draw_vertical_up, draw_vertical_down,
)


def marked(buf, char='#'):
    return {(x, y) for y, row in enumerate(buf.cells)
            for x, c in enumerate(row) if c == char}


@pytest.mark.parametrize("start, end, kind", [
    ((0, 0), (4, 2), LineKind.HORIZONTAL),
    ((0, 0), (4, 4), LineKind.HORIZONTAL),
    ((0, 4), (4, 0), LineKind.HORIZONTAL),
    ((0, 0), (2, 4), LineKind.VERTICAL_UP),
    ((0, 4), (2, 0), LineKind.VERTICAL_DOWN),
    ((3, 1), (3, 4), LineKind.VERTICAL_UP),
    ((3, 4), (3, 1), LineKind.VERTICAL_DOWN),
    ((2, 2), (2, 2), LineKind.HORIZONTAL),
])
def test_classify(start, end, kind):
    assert classify(start, end) is kind


def test_horizontal_steps_one_cell_per_column():
    buf = CharBuffer(8, 8)
    draw_horizontal(buf, '#', (0, 0), (4, 2))
    assert marked(buf) == {(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)}


def test_vertical_up_steps_one_cell_per_row():
    buf = CharBuffer(8, 8)
    draw_vertical_up(buf, '#', (0, 0), (2, 4))
    assert marked(buf) == {(0, 0), (0, 1), (1, 2), (1, 3), (2, 4)}


def test_vertical_down_is_anchored_at_end_point():
    buf = CharBuffer(8, 8)
    draw_vertical_down(buf, '#', (0, 4), (2, 0))
    assert marked(buf) == {(2, 0), (1, 1), (1, 2), (0, 3), (0, 4)}


def test_rasterize_swaps_right_to_left_lines():
    a = CharBuffer(8, 8)
    b = CharBuffer(8, 8)
    rasterize(a, '#', (0, 0), (4, 2))
    rasterize(b, '#', (4, 2), (0, 0))
    assert a.cells == b.cells


@pytest.mark.parametrize("start, end", [((3, 1), (3, 4)), ((3, 4), (3, 1))])
def test_pure_vertical_line(start, end):
    buf = CharBuffer(8, 8)
    rasterize(buf, '#', start, end)
    assert marked(buf) == {(3, 1), (3, 2), (3, 3), (3, 4)}


def test_single_point():
    buf = CharBuffer(5, 5)
    rasterize(buf, '@', (2, 2), (2, 2))
    assert marked(buf, '@') == {(2, 2)}


def test_cells_past_the_grid_are_dropped():
    buf = CharBuffer(5, 5)
    rasterize(buf, '#', (0, 0), (9, 9))
    assert marked(buf) == {(i, i) for i in range(5)}


def test_far_off_grid_line_does_not_hang():
    buf = CharBuffer(5, 5)
    rasterize(buf, '#', (0, 2), (10 ** 9, 2))
    assert marked(buf) == {(x, 2) for x in range(5)}


def test_in_bounds_line_is_unchanged_by_clipping():
    for start, end in [((1, 1), (4, 3)), ((0, 6), (5, 0)), ((6, 6), (2, 1))]:
        direct = CharBuffer(8, 8)
        rasterize(direct, '#', start, end)
        clipped = CharBuffer(8, 8)
        clipped.draw_line(Line('#', (start, end)))
        assert clipped.cells == direct.cells
