"""Render a grid to terminal-compatible escape sequences."""

from __future__ import annotations

from typing import Iterable

from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.grid import Grid
from termipaint.core.point import Point
from termipaint.render.preview import PreviewStyle

UNDERLINE_ON = '4'
UNDERLINE_OFF = '24'


class TerminalRenderer:
    """
    Render a Grid to ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when attributes change.
    Preview coordinates (the shape being dragged) are drawn with the
    preview cell and underlined, without touching the grid.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(
        self,
        grid: Grid,
        preview: Iterable[Point] = (),
        style: PreviewStyle | None = None,
    ) -> str:
        """Render grid to ANSI string."""
        preview_set = {(p.x, p.y) for p in preview if grid.in_bounds(p.x, p.y)}
        preview_cell = style.preview_cell() if style is not None else None

        lines: list[str] = []
        last_fg = Color.DEFAULT
        last_bg: Color | None = None
        last_underline = False

        for y, row in enumerate(grid.rows()):
            line_parts: list[str] = []

            for x, cell in enumerate(row):
                underline = (x, y) in preview_set
                if underline and preview_cell is not None:
                    cell = preview_cell

                sgr_parts: list[str] = []

                if underline != last_underline:
                    sgr_parts.append(UNDERLINE_ON if underline else UNDERLINE_OFF)
                    last_underline = underline

                if cell.fg is not last_fg:
                    sgr_parts.append(cell.fg.to_sgr_fg())
                    last_fg = cell.fg

                if cell.bg is not last_bg:
                    sgr_parts.append(_bg_code(cell))
                    last_bg = cell.bg

                if sgr_parts:
                    line_parts.append(f"\x1b[{';'.join(sgr_parts)}m")

                line_parts.append(cell.char)

            # Reset at end of each line to prevent color bleeding
            if last_bg is not None or last_underline or last_fg is not Color.DEFAULT:
                line_parts.append('\x1b[0m')
                last_fg = Color.DEFAULT
                last_bg = None
                last_underline = False

            lines.append(''.join(line_parts))

        result = '\n'.join(lines)

        if self.reset_at_end:
            result += '\x1b[0m'

        return result


def _bg_code(cell: Cell) -> str:
    if cell.bg is None:
        return '49'
    return cell.bg.to_sgr_bg()
