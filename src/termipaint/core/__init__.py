"""Core data structures for the drawing grid."""

from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.grid import Grid
from termipaint.core.point import Point

__all__ = ["Cell", "Color", "Grid", "Point"]
