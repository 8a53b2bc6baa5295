"""Render a grid to plain text (strip colors)."""

from termipaint.core.grid import Grid


class TextRenderer:
    """Render a Grid to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, grid: Grid) -> str:
        """Render grid to plain text, one line per row.

        Every row is emitted, blank ones as empty lines; trailing spaces
        are trimmed unless `preserve_whitespace` is set.
        """
        lines: list[str] = []

        for row in grid.rows():
            line = ''.join(cell.char for cell in row)
            if not self.preserve_whitespace:
                line = line.rstrip(' ')
            lines.append(line)

        return '\n'.join(lines)
