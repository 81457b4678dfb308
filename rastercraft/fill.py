"""Flood and boundary filling on a cell frame buffer."""

from __future__ import annotations

from enum import IntEnum

DEFAULT_SIZE = 500
DEFAULT_RECTANGLE = (100, 100, 400, 400)


class Cell(IntEnum):
    BACKGROUND = 0
    BOUNDARY = 1
    FILL = 2


class FillMethod(IntEnum):
    FLOOD = 0
    BOUNDARY = 1


class FrameBuffer:
    """A grid of cells, optionally holding one rectangle outline."""

    def __init__(
        self,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
        rectangle: tuple[int, int, int, int] | None = DEFAULT_RECTANGLE,
    ) -> None:
        self.width = width
        self.height = height
        self._rows = [bytearray(width) for _ in range(height)]
        self.rectangle: tuple[int, int, int, int] | None = None
        if rectangle is not None:
            self.draw_rectangle(*rectangle)

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} buffer")
        return Cell(self._rows[y][x])

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a rectangle outline in boundary cells."""
        for x in range(x1, x2 + 1):
            self._rows[y1][x] = Cell.BOUNDARY
            self._rows[y2][x] = Cell.BOUNDARY
        for y in range(y1, y2 + 1):
            self._rows[y][x1] = Cell.BOUNDARY
            self._rows[y][x2] = Cell.BOUNDARY
        self.rectangle = (x1, y1, x2, y2)

    def _fill(self, x: int, y: int, fillable) -> int:
        filled = 0
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            if not self._inside(cx, cy) or not fillable(self._rows[cy][cx]):
                continue
            self._rows[cy][cx] = Cell.FILL
            filled += 1
            stack.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))
        return filled

    def flood_fill(self, x: int, y: int) -> int:
        """4-way fill of background cells; return the number of cells filled."""
        return self._fill(x, y, lambda cell: cell == Cell.BACKGROUND)

    def boundary_fill(self, x: int, y: int) -> int:
        """4-way fill up to boundary cells; return the number of cells filled."""
        return self._fill(x, y, lambda cell: cell not in (Cell.BOUNDARY, Cell.FILL))

    def fill(self, x: int, y: int, method: FillMethod) -> int:
        if FillMethod(method) == FillMethod.FLOOD:
            return self.flood_fill(x, y)
        return self.boundary_fill(x, y)

    def count(self, cell: Cell) -> int:
        value = int(cell)
        return sum(row.count(value) for row in self._rows)

    def click(self, x: int, y: int, method: FillMethod) -> int:
        """Fill from a click strictly inside the rectangle; clicks elsewhere do nothing."""
        if self.rectangle is None:
            return 0
        x1, y1, x2, y2 = self.rectangle
        if x <= x1 or x >= x2 or y <= y1 or y >= y2:
            return 0
        return self.fill(x, y, method)