import pytest

from rastercraft.lines import (
    Algorithm,
    Line,
    LineBoard,
    LineStyle,
    bresenham_line,
    dda_line,
)


@pytest.mark.parametrize("draw", [dda_line, bresenham_line])
def test_horizontal_solid_line(draw):
    assert draw(0, 0, 3, 0, LineStyle.SOLID) == [(0, 0), (1, 0), (2, 0), (3, 0)]


@pytest.mark.parametrize("draw", [dda_line, bresenham_line])
@pytest.mark.parametrize("end", [(17, 5), (-9, 14), (-12, -12), (4, -20)])
def test_solid_line_hits_both_endpoints(draw, end):
    pts = draw(2, 3, end[0], end[1], LineStyle.SOLID)
    assert pts[0] == (2, 3)
    assert pts[-1] == end
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


@pytest.mark.parametrize("draw", [dda_line, bresenham_line])
def test_dotted_takes_every_fourth_pixel(draw):
    solid = draw(0, 0, 30, 11, LineStyle.SOLID)
    assert draw(0, 0, 30, 11, LineStyle.DOTTED) == solid[::4]


@pytest.mark.parametrize("draw", [dda_line, bresenham_line])
def test_dashed_alternates_runs_of_five(draw):
    solid = draw(0, 0, 19, 0, LineStyle.SOLID)
    assert draw(0, 0, 19, 0, LineStyle.DASHED) == solid[0:5] + solid[10:15]


def test_dda_rounds_half_away_from_zero():
    assert dda_line(0, 0, 2, 1) == [(0, 0), (1, 1), (2, 1)]


def test_zero_length_line_is_single_pixel():
    assert dda_line(4, 4, 4, 4) == [(4, 4)]
    assert bresenham_line(4, 4, 4, 4) == [(4, 4)]


def test_line_pixels_dispatch_on_algorithm():
    line = Line(0, 0, 10, 7, Algorithm.BRESENHAM, LineStyle.DOTTED)
    assert line.pixels() == bresenham_line(0, 0, 10, 7, LineStyle.DOTTED)


def test_board_converts_clicks_to_centred_line():
    board = LineBoard()
    assert board.click(250, 250) is None
    line = board.click(260, 240)
    assert (line.x1, line.y1, line.x2, line.y2) == (0, 0, 10, 10)
    assert board.lines == [line]


def test_board_keys_change_state():
    board = LineBoard()
    assert board.state_label() == "DDA : Solid"
    assert board.key("b") == "Bresenham : Solid"
    assert board.key("3") == "Bresenham : Dashed"
    assert board.key("2") == "Bresenham : Dotted"
    assert board.key("d") == "DDA : Dotted"
    assert board.key("x") == "DDA : Dotted"


def test_board_lines_keep_style_at_creation():
    board = LineBoard()
    board.key("b")
    board.click(250, 250)
    first = board.click(270, 250)
    board.key("d")
    board.click(250, 250)
    second = board.click(250, 230)
    assert first.algo == Algorithm.BRESENHAM
    assert second.algo == Algorithm.DDA
    assert board.pixels() == first.pixels() + second.pixels()