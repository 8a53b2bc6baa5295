"""Display style for the preview of an in-progress shape."""

from __future__ import annotations

from dataclasses import dataclass

from termipaint.core.cell import Cell
from termipaint.core.color import Color


@dataclass(frozen=True)
class PreviewStyle:
    """How preview coordinates of a shape drag should be displayed."""
    char: str
    fg: Color
    erase: bool = False

    def preview_cell(self) -> Cell:
        """The cell shown at preview coordinates: blank when erasing."""
        if self.erase:
            return Cell.blank()
        return Cell.of(self.char, self.fg)
