import pytest

from rastercraft.fill import Cell, FillMethod, FrameBuffer


def test_small_rectangle_interior_single_cell():
    fb = FrameBuffer(5, 5, rectangle=(1, 1, 3, 3))
    assert fb.flood_fill(2, 2) == 1
    assert fb[2, 2] == Cell.FILL
    assert fb[1, 1] == Cell.BOUNDARY
    assert fb[0, 0] == Cell.BACKGROUND


def test_rectangle_outline_cells():
    fb = FrameBuffer(10, 8, rectangle=(2, 1, 6, 5))
    for x in range(2, 7):
        assert fb[x, 1] == Cell.BOUNDARY
        assert fb[x, 5] == Cell.BOUNDARY
    for y in range(1, 6):
        assert fb[2, y] == Cell.BOUNDARY
        assert fb[6, y] == Cell.BOUNDARY
    assert fb[4, 3] == Cell.BACKGROUND


@pytest.mark.parametrize("method", list(FillMethod))
def test_fill_stays_inside_rectangle(method):
    fb = FrameBuffer(40, 30, rectangle=(5, 5, 20, 15))
    filled = fb.fill(10, 10, method)
    assert filled == (20 - 5 - 1) * (15 - 5 - 1)
    assert fb.count(Cell.FILL) == filled
    assert fb[4, 10] == Cell.BACKGROUND
    assert fb[21, 10] == Cell.BACKGROUND


def test_cell_counts_partition_buffer():
    fb = FrameBuffer(30, 20, rectangle=(3, 3, 12, 9))
    fb.flood_fill(5, 5)
    fb.boundary_fill(0, 0)
    assert fb.count(Cell.BACKGROUND) == 0
    total = sum(fb.count(c) for c in Cell)
    assert total == 30 * 20


def test_refill_fills_nothing():
    fb = FrameBuffer(20, 20, rectangle=(2, 2, 10, 10))
    fb.flood_fill(5, 5)
    assert fb.flood_fill(5, 5) == 0
    assert fb.boundary_fill(5, 5) == 0


def test_click_outside_or_on_boundary_ignored():
    fb = FrameBuffer()
    assert fb.click(100, 200, FillMethod.FLOOD) == 0
    assert fb.click(50, 50, FillMethod.BOUNDARY) == 0
    assert fb.count(Cell.FILL) == 0


def test_click_inside_fills_rectangle_interior():
    fb = FrameBuffer()
    x1, y1, x2, y2 = fb.rectangle
    filled = fb.click(250, 250, FillMethod.BOUNDARY)
    assert filled == (x2 - x1 - 1) * (y2 - y1 - 1)
    assert fb[x1 - 1, y1] == Cell.BACKGROUND


def test_index_outside_buffer_raises():
    fb = FrameBuffer(5, 5, rectangle=None)
    assert fb[4, 4] == Cell.BACKGROUND
    assert fb[0, 0] == Cell.BACKGROUND
    assert fb.count(Cell.BACKGROUND) == 25
    with pytest.raises(IndexError):
        fb[5, 0]
    with pytest.raises(IndexError):
        fb[-1, 2]