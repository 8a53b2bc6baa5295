"""Structured JSON form of a grid.

Lossless: every cell is stored with its character and colors, in
row-major order.

Example:
{
  "width": 2,
  "height": 1,
  "cells": [
    {"ch": "#", "fg": "Red", "bg": null},
    {"ch": " ", "fg": "Default", "bg": "Blue"}
  ]
}
"""

from __future__ import annotations

import json
from typing import Any

from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.grid import Grid


def cell_to_dict(cell: Cell) -> dict[str, Any]:
    return {
        "ch": cell.char,
        "fg": cell.fg.display_name,
        "bg": cell.bg.display_name if cell.bg is not None else None,
    }


def cell_from_dict(data: Any) -> Cell:
    """Parse one cell object.

    Raises:
        ValueError: if the object is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"Cell must be an object, got {type(data).__name__}")
    ch = data.get("ch")
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"Cell 'ch' must be a single character, got {ch!r}")
    if 0xD800 <= ord(ch) <= 0xDFFF:
        raise ValueError(f"Cell 'ch' must not be a surrogate, got {ch!r}")
    fg = data.get("fg", Color.DEFAULT.display_name)
    bg = data.get("bg")
    if not isinstance(fg, str):
        raise ValueError(f"Cell 'fg' must be a color name, got {fg!r}")
    if bg is not None and not isinstance(bg, str):
        raise ValueError(f"Cell 'bg' must be a color name or null, got {bg!r}")
    return Cell(
        char=ch,
        fg=Color.from_name(fg),
        bg=Color.from_name(bg) if bg is not None else None,
    )


def grid_to_dict(grid: Grid) -> dict[str, Any]:
    return {
        "width": grid.width,
        "height": grid.height,
        "cells": [cell_to_dict(cell) for cell in grid.flat()],
    }


def grid_from_dict(data: Any) -> Grid:
    """Rebuild a grid from its JSON object form.

    Raises:
        ValueError: if fields are missing, mistyped or inconsistent
    """
    if not isinstance(data, dict):
        raise ValueError("Canvas JSON must be an object")
    width = data.get("width")
    height = data.get("height")
    cells = data.get("cells")
    # bool is an int subclass; reject it explicitly
    for name, value in (("width", width), ("height", height)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Canvas '{name}' must be an integer, got {value!r}")
    if not isinstance(cells, list):
        raise ValueError("Canvas 'cells' must be a list")
    return Grid.from_cells(width, height, (cell_from_dict(c) for c in cells))


def dumps(grid: Grid, indent: int | None = 2) -> str:
    """Serialize a grid to JSON text."""
    return json.dumps(grid_to_dict(grid), indent=indent, ensure_ascii=False)


def loads(text: str) -> Grid:
    """Parse JSON text into a grid.

    Raises:
        ValueError: on invalid JSON or an invalid canvas structure
    """
    return grid_from_dict(json.loads(text))
