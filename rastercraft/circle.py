"""Midpoint (Bresenham) circle rasterisation with eight-way symmetry."""

from __future__ import annotations

Point = tuple[int, int]

QUADRANT_CENTRES: tuple[Point, ...] = ((100, 100), (-100, 100), (-100, -100), (100, -100))


def octant_points(xc: int, yc: int, x: int, y: int) -> list[Point]:
    """Return the eight symmetric points of offset (x, y) around (xc, yc)."""
    return [
        (xc + x, yc + y), (xc - x, yc + y),
        (xc + x, yc - y), (xc - x, yc - y),
        (xc + y, yc + x), (xc - y, yc + x),
        (xc + y, yc - x), (xc - y, yc - x),
    ]


def bresenham_circle(xc: int, yc: int, r: int) -> list[Point]:
    """Rasterise a circle of radius ``r`` centred on (xc, yc).

    Points are returned in plotting order; symmetric duplicates are kept.
    """
    points: list[Point] = []
    x, y, d = 0, r, 3 - 2 * r
    while x <= y:
        points.extend(octant_points(xc, yc, x, y))
        if d < 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1
    return points


def quadrant_circles(r: int) -> list[Point]:
    """Rasterise one circle of radius ``r`` in each quadrant."""
    points: list[Point] = []
    for xc, yc in QUADRANT_CENTRES:
        points.extend(bresenham_circle(xc, yc, r))
    return points