"""Classic 2D raster graphics algorithms on plain coordinates."""

__version__ = "0.1.0"

__all__ = [
    "circle",
    "clipping",
    "fill",
    "fractals",
    "lines",
    "transform",
    "windmill",
]