"""Cohen-Sutherland line clipping against an axis-aligned window."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

Segment = tuple[float, float, float, float]

SCREEN_HALF_WIDTH = 320
SCREEN_HALF_HEIGHT = 240


class Outcode(IntFlag):
    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


@dataclass(frozen=True)
class ClipWindow:
    xmin: float = -100
    ymin: float = -100
    xmax: float = 100
    ymax: float = 100

    def outcode(self, x: float, y: float) -> Outcode:
        code = Outcode.INSIDE
        if x < self.xmin:
            code |= Outcode.LEFT
        elif x > self.xmax:
            code |= Outcode.RIGHT
        if y < self.ymin:
            code |= Outcode.BOTTOM
        elif y > self.ymax:
            code |= Outcode.TOP
        return code

    def clip(self, x1: float, y1: float, x2: float, y2: float) -> Segment | None:
        """Clip a segment to the window; return None if it lies wholly outside."""
        code1 = self.outcode(x1, y1)
        code2 = self.outcode(x2, y2)
        while True:
            if not (code1 | code2):
                return (x1, y1, x2, y2)
            if code1 & code2:
                return None
            out = code1 if code1 else code2
            if out & Outcode.TOP:
                x = x1 + (x2 - x1) * (self.ymax - y1) / (y2 - y1)
                y = self.ymax
            elif out & Outcode.BOTTOM:
                x = x1 + (x2 - x1) * (self.ymin - y1) / (y2 - y1)
                y = self.ymin
            elif out & Outcode.RIGHT:
                y = y1 + (y2 - y1) * (self.xmax - x1) / (x2 - x1)
                x = self.xmax
            else:
                y = y1 + (y2 - y1) * (self.xmin - x1) / (x2 - x1)
                x = self.xmin
            if out == code1:
                x1, y1 = x, y
                code1 = self.outcode(x1, y1)
            else:
                x2, y2 = x, y
                code2 = self.outcode(x2, y2)


@dataclass
class ClipSession:
    """A line set by two clicks on a 640x480 screen, clipped on the 'c' key."""

    window: ClipWindow = field(default_factory=ClipWindow)
    line: Segment = (0.0, 0.0, 0.0, 0.0)
    _awaiting_end: bool = False

    def click(self, x: int, y: int) -> Segment:
        """Register a click in screen coordinates and return the current line."""
        mx = float(x - SCREEN_HALF_WIDTH)
        my = float(SCREEN_HALF_HEIGHT - y)
        x1, y1, x2, y2 = self.line
        if self._awaiting_end:
            self.line = (x1, y1, mx, my)
        else:
            self.line = (mx, my, x2, y2)
        self._awaiting_end = not self._awaiting_end
        return self.line

    def key(self, ch: str) -> bool:
        """Handle a key press; 'c' clips the line. Return True if the line was redrawn."""
        if ch != "c":
            return False
        clipped = self.window.clip(*self.line)
        if clipped is None:
            return False
        self.line = clipped
        return True