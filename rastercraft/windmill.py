"""Geometry of the animated windmill scene."""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]
Color = tuple[float, float, float]

YELLOW: Color = (1.0, 1.0, 0.0)
RED: Color = (1.0, 0.0, 0.0)

TOWER: tuple[Point, ...] = ((-0.05, 0.0), (-0.05, 3.0), (0.05, 3.0), (0.05, 0.0))
BLADE: tuple[Point, ...] = ((0.0, 0.0), (1.0, 0.2), (1.0, -0.2))
HUB_HEIGHT = 3.0
DEGREES_PER_FRAME = 4
BLADE_COUNT = 4


@dataclass(frozen=True)
class Affine:
    """2D affine map: x' = a*x + c*y + e, y' = b*x + d*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Affine:
        return cls()

    def __matmul__(self, other: Affine) -> Affine:
        return Affine(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )

    def translate(self, dx: float, dy: float) -> Affine:
        """Compose with a translation applied before this map."""
        return self @ Affine(e=dx, f=dy)

    def scale(self, sx: float, sy: float) -> Affine:
        return self @ Affine(a=sx, d=sy)

    def rotate(self, degrees: float) -> Affine:
        rad = math.radians(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return self @ Affine(a=c, b=s, c=-s, d=c)

    def apply(self, x: float, y: float) -> Point:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)


@dataclass(frozen=True)
class Polygon:
    color: Color
    points: tuple[Point, ...]


def _place(transform: Affine, color: Color, shape) -> Polygon:
    return Polygon(color, tuple(transform.apply(x, y) for x, y in shape))


def windmill_polygons(transform: Affine, frame: int) -> list[Polygon]:
    """Tower and four blades of one windmill at the given animation frame."""
    polygons = [_place(transform, YELLOW, TOWER)]
    hub = transform.translate(0, HUB_HEIGHT).rotate(frame * DEGREES_PER_FRAME)
    for _ in range(BLADE_COUNT):
        hub = hub.rotate(90)
        polygons.append(_place(hub, RED, BLADE))
    return polygons


def scene(frame: int) -> list[Polygon]:
    """All polygons of the two-windmill scene at the given frame."""
    small = Affine.identity().translate(2.2, 1.6).scale(0.4, 0.4)
    large = Affine.identity().translate(3.7, 0.8).scale(0.7, 0.7)
    return windmill_polygons(small, frame) + windmill_polygons(large, frame)