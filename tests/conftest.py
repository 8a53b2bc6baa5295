"""Shared fixtures for termipaint tests."""

import pytest

from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.grid import Grid
from termipaint.edit.session import EditSession


@pytest.fixture
def grid() -> Grid:
    """A blank 5x5 grid."""
    return Grid(5, 5)


@pytest.fixture
def red_hash() -> Cell:
    return Cell.of('#', Color.RED)


@pytest.fixture
def session() -> EditSession:
    """A session over a blank 10x6 grid."""
    return EditSession(Grid(10, 6))


def snapshot(grid: Grid) -> list[str]:
    """Characters of each row, for compact assertions."""
    return [''.join(cell.char for cell in row) for row in grid.rows()]


@pytest.fixture
def rows():
    """Fixture exposing the row snapshot helper."""
    return snapshot
