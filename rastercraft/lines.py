"""DDA and Bresenham line rasterisation with solid, dotted and dashed styles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

Point = tuple[int, int]

BOARD_HALF_SIZE = 250


class Algorithm(IntEnum):
    DDA = 0
    BRESENHAM = 1


class LineStyle(IntEnum):
    SOLID = 0
    DOTTED = 1
    DASHED = 2


_ALGORITHM_NAMES = {Algorithm.DDA: "DDA", Algorithm.BRESENHAM: "Bresenham"}
_STYLE_NAMES = {LineStyle.SOLID: "Solid", LineStyle.DOTTED: "Dotted", LineStyle.DASHED: "Dashed"}


def _visible(style: LineStyle, step: int) -> bool:
    if style == LineStyle.DOTTED:
        return step % 4 == 0
    if style == LineStyle.DASHED:
        return (step // 5) % 2 == 0
    return True


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def dda_line(x1: int, y1: int, x2: int, y2: int, style: LineStyle = LineStyle.SOLID) -> list[Point]:
    """Rasterise a line with the digital differential analyser."""
    style = LineStyle(style)
    dx, dy = float(x2 - x1), float(y2 - y1)
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [(x1, y1)] if _visible(style, 0) else []
    x_inc, y_inc = dx / steps, dy / steps
    x, y = float(x1), float(y1)
    pixels: list[Point] = []
    for step in range(int(steps) + 1):
        if _visible(style, step):
            pixels.append((_round(x), _round(y)))
        x += x_inc
        y += y_inc
    return pixels


def bresenham_line(x1: int, y1: int, x2: int, y2: int, style: LineStyle = LineStyle.SOLID) -> list[Point]:
    """Rasterise a line with Bresenham's integer algorithm."""
    style = LineStyle(style)
    dx, dy = abs(x2 - x1), abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    x, y = x1, y1
    pixels: list[Point] = []
    step = 0
    while True:
        if _visible(style, step):
            pixels.append((x, y))
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
        step += 1
    return pixels


@dataclass(frozen=True)
class Line:
    x1: int
    y1: int
    x2: int
    y2: int
    algo: Algorithm = Algorithm.DDA
    style: LineStyle = LineStyle.SOLID

    def pixels(self) -> list[Point]:
        """Pixels of this line drawn with its own algorithm and style."""
        draw = dda_line if self.algo == Algorithm.DDA else bresenham_line
        return draw(self.x1, self.y1, self.x2, self.y2, self.style)


@dataclass
class LineBoard:
    """Collects lines from pairs of clicks in a 500x500 window."""

    algorithm: Algorithm = Algorithm.DDA
    style: LineStyle = LineStyle.SOLID
    lines: list[Line] = field(default_factory=list)
    _pending: Point | None = None

    def click(self, x: int, y: int) -> Line | None:
        """Register a click in window coordinates; return a line once completed."""
        point = (x - BOARD_HALF_SIZE, BOARD_HALF_SIZE - y)
        if self._pending is None:
            self._pending = point
            return None
        start, self._pending = self._pending, None
        line = Line(*start, *point, self.algorithm, self.style)
        self.lines.append(line)
        return line

    def key(self, ch: str) -> str:
        """Apply a key press and return the resulting state label."""
        if ch == "d":
            self.algorithm = Algorithm.DDA
        elif ch == "b":
            self.algorithm = Algorithm.BRESENHAM
        elif ch == "1":
            self.style = LineStyle.SOLID
        elif ch == "2":
            self.style = LineStyle.DOTTED
        elif ch == "3":
            self.style = LineStyle.DASHED
        return self.state_label()

    def state_label(self) -> str:
        return f"{_ALGORITHM_NAMES[self.algorithm]} : {_STYLE_NAMES[self.style]}"

    def pixels(self) -> list[Point]:
        """All pixels of every stored line, in drawing order."""
        return [p for line in self.lines for p in line.pixels()]