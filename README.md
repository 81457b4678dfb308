# rastercraft

rastercraft collects the classic 2D raster graphics algorithms. It works on
plain numbers. Each algorithm returns pixels, segments or polygons as tuples,
and you can pass them to any canvas you like.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `rastercraft.circle`

This module draws circles with the midpoint (Bresenham) method.

- `octant_points(xc, yc, x, y)` returns the eight symmetric points of the offset `(x, y)` around `(xc, yc)`.
- `bresenham_circle(xc, yc, r)` returns the points of a circle in plotting order. Duplicate points are kept.
- `quadrant_circles(r)` returns the points of four circles of radius `r`, centred at (100, 100), (-100, 100), (-100, -100) and (100, -100).

### `rastercraft.lines`

This module draws lines.

- `dda_line(x1, y1, x2, y2, style)` draws a line with the digital differential analyser. Halves are rounded away from zero.
- `bresenham_line(x1, y1, x2, y2, style)` draws a line with Bresenham's integer algorithm.
- `LineStyle` can be `SOLID`, `DOTTED` or `DASHED`:
  - `DOTTED` keeps every fourth step.
  - `DASHED` alternates runs of five steps drawn and five skipped.
- `Algorithm` can be `DDA` or `BRESENHAM`.
- `Line` is a frozen record of the two endpoints, the algorithm and the style. `Line.pixels()` draws it.
- `LineBoard` builds lines from pairs of clicks in a 500×500 window whose origin is at the centre. Its members:
  - `click(x, y)` returns the new `Line` on every second click, and `None` otherwise.
  - `key(ch)` changes the state. `d` and `b` select the algorithm. `1`, `2` and `3` select the style. It returns the state label, for example `"Bresenham : Dashed"`.
  - `state_label()` returns the current state label.
  - `pixels()` returns the pixels of every stored line.

### `rastercraft.clipping`

This module implements Cohen–Sutherland line clipping.

- `Outcode` is an `IntFlag` holding `INSIDE`, `LEFT`, `RIGHT`, `BOTTOM` and `TOP`.
- `ClipWindow(xmin, ymin, xmax, ymax)` is a clipping window. By default it runs from -100 to 100 on both axes.
  - `outcode(x, y)` returns the region code of a point.
  - `clip(x1, y1, x2, y2)` returns the clipped segment. It returns `None` when the segment lies wholly outside the window.
- `ClipSession` holds a line that you set by two clicks on a 640×480 screen.
  - `click(x, y)` sets the start point and the end point in turn, and returns the current line.
  - `key("c")` clips the line in place. It returns `True` when a clipped line remains. Any other key does nothing and returns `False`.

### `rastercraft.fill`

This module fills regions of a grid.

- `Cell` can be `BACKGROUND`, `BOUNDARY` or `FILL`.
- `FillMethod` can be `FLOOD` or `BOUNDARY`.
- `FrameBuffer(width, height, rectangle)` is a grid of cells. By default it is 500×500 with a rectangle outline from (100, 100) to (400, 400). Pass `rectangle=None` for an empty grid.
  - `buffer[x, y]` reads one cell. Coordinates outside the grid raise `IndexError`.
  - `draw_rectangle(x1, y1, x2, y2)` draws a rectangle outline.
  - `flood_fill(x, y)` performs a 4-way fill and returns the number of cells filled.
  - `boundary_fill(x, y)` performs a 4-way fill and returns the number of cells filled.
  - `fill(x, y, method)` runs the fill chosen by `method`.
  - `count(cell)` returns how many cells hold the given value.
  - `click(x, y, method)` fills only when the point lies strictly inside the rectangle. Otherwise it returns 0.

### `rastercraft.fractals`

This module builds a Bézier curve and the Koch curve.

- `bezier_point(t, controls)` evaluates a cubic Bézier curve. There are default control points.
- `bezier_segments(t1, t2, depth, controls)` splits `[t1, t2]` into `3**depth` straight segments.
- `koch_segments(x1, y1, x2, y2, n)` returns the `4**n` segments of a Koch curve of order `n`.

Both functions that take a depth or an order raise `ValueError` when it is negative.

### `rastercraft.transform`

This module transforms a triangle.

- `Triangle` starts with the vertices (50, 50), (100, 50) and (75, 86.6). Its methods change it in place:
  - `scale(sx, sy)` scales about the origin.
  - `rotate(degrees)` turns it counter-clockwise about its first vertex.
  - `reflect(axis)` mirrors it about `Axis.X` or `Axis.Y`.
- `main(argv=None)` runs the interactive menu described under "Command line".

### `rastercraft.windmill`

This module computes the geometry of an animated scene with two windmills.

- `Affine` is an immutable 2D affine map. It has these members:
  - `Affine.identity()` returns the identity map.
  - `translate`, `scale` and `rotate` each return a new map. The new step is applied before the existing one.
  - `apply(x, y)` maps a point.
  - The `@` operator composes two maps.
- `Polygon` holds a colour and a tuple of points.
- `windmill_polygons(transform, frame)` returns the yellow tower and four red blades of one windmill. The blades turn 4 degrees per frame.
- `scene(frame)` returns the polygons of both windmills at the given frame.

## Examples

```python
from rastercraft.circle import bresenham_circle
from rastercraft.lines import LineStyle, bresenham_line
from rastercraft.clipping import ClipWindow
from rastercraft.fill import Cell, FillMethod, FrameBuffer
from rastercraft.fractals import koch_segments
from rastercraft.windmill import scene

circle = bresenham_circle(0, 0, 10)
dashed = bresenham_line(0, 0, 40, 15, LineStyle.DASHED)
clipped = ClipWindow().clip(-200, 0, 200, 50)

buffer = FrameBuffer()
buffer.fill(250, 250, FillMethod.FLOOD)
print(buffer.count(Cell.FILL))

koch = koch_segments(-200, -50, 200, -50, 3)
polygons = scene(25)
```

## Command line

```
rastercraft-transform
```

This command starts an interactive session on a triangle. The session reads from standard input:

1. It prints the triangle's vertices.
2. It shows a menu with four choices: scale, rotate, reflect or exit.
3. It asks for the numbers that the chosen step needs.
4. It prints the vertices again after each step.

If the input cannot be read as numbers, the session reports "Invalid input". The session ends on choice 4 or at the end of input.

## What it does not do

rastercraft opens no windows and renders nothing. It has no event loop, no mouse or keyboard handling, and no animation timer. `LineBoard`, `ClipSession` and `FrameBuffer.click` only hold state. Your own interface has to feed them clicks and key presses and then draw what they return. The only command is `rastercraft-transform`.