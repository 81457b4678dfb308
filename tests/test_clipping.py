import pytest

from rastercraft.clipping import ClipSession, ClipWindow, Outcode


def test_outcode_regions():
    w = ClipWindow()
    assert w.outcode(0, 0) == Outcode.INSIDE
    assert w.outcode(-150, 150) == Outcode.LEFT | Outcode.TOP
    assert w.outcode(150, -150) == Outcode.RIGHT | Outcode.BOTTOM
    assert w.outcode(100, 100) == Outcode.INSIDE


def test_inside_segment_unchanged():
    assert ClipWindow().clip(-10, 5, 20, -30) == (-10, 5, 20, -30)


def test_segment_on_one_side_rejected():
    assert ClipWindow().clip(-200, 150, 200, 180) is None
    assert ClipWindow().clip(-300, -50, -150, 50) is None


def test_horizontal_segment_clipped_to_edges():
    assert ClipWindow().clip(-200, 0, 200, 0) == pytest.approx((-100, 0, 100, 0))


def test_diagonal_segment_clipped_to_corners():
    assert ClipWindow().clip(-300, -300, 300, 300) == pytest.approx((-100, -100, 100, 100))


def test_session_clicks_and_clip():
    s = ClipSession()
    s.click(120, 240)
    assert s.click(520, 240) == (-200.0, 0.0, 200.0, 0.0)
    assert s.key("x") is False
    assert s.key("c") is True
    assert s.line == pytest.approx((-100, 0, 100, 0))


def test_session_rejected_line_keeps_endpoints():
    s = ClipSession()
    s.click(0, 0)
    s.click(40, 10)
    before = s.line
    assert s.key("c") is False
    assert s.line == before