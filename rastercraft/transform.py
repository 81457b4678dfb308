"""Scaling, rotation and reflection of a triangle, with a console menu."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field
from enum import IntEnum

Point = tuple[float, float]


class Axis(IntEnum):
    X = 1
    Y = 2


def _default_vertices() -> list[Point]:
    return [(50.0, 50.0), (100.0, 50.0), (75.0, 86.6)]


@dataclass
class Triangle:
    vertices: list[Point] = field(default_factory=_default_vertices)

    def scale(self, sx: float, sy: float) -> None:
        """Scale every vertex about the origin."""
        self.vertices = [(x * sx, y * sy) for x, y in self.vertices]

    def rotate(self, degrees: float) -> None:
        """Rotate counter-clockwise about the first vertex."""
        rad = math.radians(degrees)
        c, s = math.cos(rad), math.sin(rad)
        px, py = self.vertices[0]
        self.vertices = [
            (px + (x - px) * c - (y - py) * s, py + (x - px) * s + (y - py) * c)
            for x, y in self.vertices
        ]

    def reflect(self, axis: Axis) -> None:
        """Mirror about the X axis or the Y axis."""
        if Axis(axis) == Axis.X:
            self.vertices = [(x, -y) for x, y in self.vertices]
        else:
            self.vertices = [(-x, y) for x, y in self.vertices]


_MENU = "1. Scale\n2. Rotate\n3. Reflect\n4. Exit"


def _describe(triangle: Triangle) -> str:
    return " ".join(f"({x:g}, {y:g})" for x, y in triangle.vertices)


def _read_numbers(prompt: str, count: int, kind=float) -> list | None:
    parts = input(prompt).split()
    try:
        values = [kind(p) for p in parts[:count]]
    except ValueError:
        return None
    return values if len(values) == count else None


def main(argv=None) -> int:
    """Run the interactive transformation menu on standard input."""
    argparse.ArgumentParser(description="Transform a triangle interactively.").parse_args(argv)
    triangle = Triangle()
    print(_describe(triangle))
    try:
        while True:
            print(_MENU)
            choice = input("Enter choice: ").strip()
            if choice == "4":
                return 0
            if choice == "1":
                values = _read_numbers("Enter scale factors (x y): ", 2)
                if values is None:
                    print("Invalid input")
                    continue
                triangle.scale(*values)
            elif choice == "2":
                values = _read_numbers("Enter rotation angle in degrees: ", 1)
                if values is None:
                    print("Invalid input")
                    continue
                triangle.rotate(values[0])
            elif choice == "3":
                print("1. Reflect about X axis\n2. Reflect about Y axis")
                values = _read_numbers("Enter choice: ", 1, int)
                if values is None:
                    print("Invalid input")
                    continue
                triangle.reflect(Axis.X if values[0] == 1 else Axis.Y)
            else:
                continue
            print(_describe(triangle))
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())