"""Point - signed integer coordinate used by rasterization."""

from typing import NamedTuple


class Point(NamedTuple):
    """
    A 2D integer coordinate.

    Unlike grid indices, points may be negative or beyond the grid:
    shape geometry routinely strays outside before writes clip it.
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        """Return this point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)
