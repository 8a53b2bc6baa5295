"""Cell - atomic unit of the drawing grid."""

from __future__ import annotations

from dataclasses import dataclass

from termipaint.core.color import Color


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with its colors.

    Cells are immutable values compared structurally, so the same
    instance can sit in many grid positions and in history records.
    """
    char: str = ' '
    fg: Color = Color.DEFAULT
    bg: Color | None = None

    @classmethod
    def blank(cls) -> Cell:
        """The empty cell: a space in default colors with no background."""
        return cls()

    @classmethod
    def of(cls, char: str, fg: Color) -> Cell:
        """A painted cell with no background."""
        return cls(char=char, fg=fg, bg=None)

    def is_blank(self) -> bool:
        """Check if this cell equals the blank cell."""
        return self.char == ' ' and self.fg is Color.DEFAULT and self.bg is None


BLANK = Cell.blank()
