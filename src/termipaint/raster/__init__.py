"""Rasterization: turn tool geometry into grid coordinates."""

from termipaint.raster.fill import flood_fill_points
from termipaint.raster.shapes import (
    bresenham_line,
    brush_points,
    dedup_points,
    ellipse_points,
    rectangle_points,
)

__all__ = [
    "bresenham_line",
    "brush_points",
    "dedup_points",
    "ellipse_points",
    "flood_fill_points",
    "rectangle_points",
]
