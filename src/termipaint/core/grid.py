"""Grid - fixed-size 2D buffer of cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from termipaint.core.cell import BLANK, Cell


@dataclass
class Grid:
    """
    A fixed-extent, row-major buffer of Cells.

    The grid never fails on coordinates: reading outside the grid returns
    a blank cell and writing outside it does nothing. Drawing code can
    therefore hand over raw shape geometry without clipping it first.
    """
    width: int = 80
    height: int = 24
    _cells: list[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Clamp dimensions and allocate the buffer."""
        self.width = max(1, self.width)
        self.height = max(1, self.height)
        if len(self._cells) != self.width * self.height:
            self._cells = [BLANK] * (self.width * self.height)

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[Cell]) -> Grid:
        """Build a grid from a dense row-major cell sequence.

        Raises:
            ValueError: if the number of cells is not width * height
        """
        cells = list(cells)
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if len(cells) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for {width}x{height}, got {len(cells)}"
            )
        return cls(width=width, height=height, _cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y), or a blank cell when off the grid."""
        if not self.in_bounds(x, y):
            return BLANK
        return self._cells[self._index(x, y)]

    def get_signed(self, x: int, y: int) -> Cell | None:
        """Get the cell at (x, y), or None when off the grid.

        Use this when off-grid must be told apart from a blank cell.
        """
        if not self.in_bounds(x, y):
            return None
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at (x, y); writes off the grid are ignored."""
        if not self.in_bounds(x, y):
            return
        self._cells[self._index(x, y)] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: grid[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def resize_preserve(self, width: int, height: int) -> None:
        """Resize in place, keeping the overlapping top-left region.

        Newly exposed cells are blank. Dimensions are clamped to 1.
        """
        width = max(1, width)
        height = max(1, height)
        if width == self.width and height == self.height:
            return

        cells = [BLANK] * (width * height)
        copy_w = min(self.width, width)
        copy_h = min(self.height, height)
        for y in range(copy_h):
            old_row = y * self.width
            new_row = y * width
            cells[new_row:new_row + copy_w] = self._cells[old_row:old_row + copy_w]

        self.width = width
        self.height = height
        self._cells = cells

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows as lists of cells."""
        for y in range(self.height):
            start = y * self.width
            yield self._cells[start:start + self.width]

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for i, cell in enumerate(self._cells):
            y, x = divmod(i, self.width)
            yield x, y, cell

    def flat(self) -> list[Cell]:
        """Return a copy of the dense row-major cell sequence."""
        return list(self._cells)

    def copy(self) -> Grid:
        """Create a copy of this grid (cells are immutable and shared)."""
        return Grid(width=self.width, height=self.height, _cells=list(self._cells))

    def clear(self) -> None:
        """Reset every cell to blank."""
        self._cells = [BLANK] * (self.width * self.height)
