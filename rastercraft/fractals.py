"""Recursive Bezier subdivision and Koch curve segment generation."""

from __future__ import annotations

import math

Point = tuple[float, float]
Segment = tuple[Point, Point]

DEFAULT_CONTROLS: tuple[Point, Point, Point, Point] = (
    (-150.0, -100.0),
    (-50.0, 200.0),
    (50.0, -200.0),
    (150.0, 100.0),
)

_SQRT3 = math.sqrt(3)


def bezier_point(t: float, controls=DEFAULT_CONTROLS) -> Point:
    """Evaluate the cubic Bezier curve defined by four control points at ``t``."""
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = controls
    u = 1 - t
    b0, b1, b2, b3 = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    return (
        b0 * x0 + b1 * x1 + b2 * x2 + b3 * x3,
        b0 * y0 + b1 * y1 + b2 * y2 + b3 * y3,
    )


def bezier_segments(t1: float, t2: float, depth: int, controls=DEFAULT_CONTROLS) -> list[Segment]:
    """Approximate the curve on [t1, t2] by 3**depth straight segments."""
    if depth < 0:
        raise ValueError("depth must not be negative")
    if depth == 0:
        return [(bezier_point(t1, controls), bezier_point(t2, controls))]
    mid1 = (2 * t1 + t2) / 3
    mid2 = (t1 + 2 * t2) / 3
    return (
        bezier_segments(t1, mid1, depth - 1, controls)
        + bezier_segments(mid1, mid2, depth - 1, controls)
        + bezier_segments(mid2, t2, depth - 1, controls)
    )


def koch_segments(x1: float, y1: float, x2: float, y2: float, n: int) -> list[Segment]:
    """Return the 4**n segments of a Koch curve of order ``n``."""
    if n < 0:
        raise ValueError("order must not be negative")
    if n == 0:
        return [((x1, y1), (x2, y2))]
    dx = (x2 - x1) / 3
    dy = (y2 - y1) / 3
    xa, ya = x1 + dx, y1 + dy
    xb, yb = x2 - dx, y2 - dy
    xm = (xa + xb) / 2 - _SQRT3 * (yb - ya) / 2
    ym = (ya + yb) / 2 + _SQRT3 * (xb - xa) / 2
    return (
        koch_segments(x1, y1, xa, ya, n - 1)
        + koch_segments(xa, ya, xm, ym, n - 1)
        + koch_segments(xm, ym, xb, yb, n - 1)
        + koch_segments(xb, yb, x2, y2, n - 1)
    )