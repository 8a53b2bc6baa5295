"""Drawing tools and the brush settings they paint with."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.constants import DEFAULT_BRUSH_CHAR, clamp_brush_size
from termipaint.core.grid import Grid
from termipaint.core.point import Point
from termipaint.edit.history import OperationBuilder
from termipaint.raster import bresenham_line, brush_points, ellipse_points, rectangle_points


class Tool(Enum):
    """Drawing tool selected by the user."""
    PENCIL = "pencil"
    ERASER = "eraser"
    LINE = "line"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    FILL = "fill"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def short_label(self) -> str:
        """Toolbar label with the tool's hotkey."""
        return _SHORT_LABELS[self]

    @property
    def is_freehand(self) -> bool:
        return self in (Tool.PENCIL, Tool.ERASER)

    @property
    def is_shape(self) -> bool:
        return self in (Tool.LINE, Tool.RECTANGLE, Tool.ELLIPSE)

    @classmethod
    def from_name(cls, name: str) -> Tool:
        """Parse a tool name case-insensitively ("circle" means ELLIPSE)."""
        wanted = name.strip().lower()
        if wanted == "circle":
            return cls.ELLIPSE
        if wanted == "rect":
            return cls.RECTANGLE
        for tool in cls:
            if tool.value == wanted:
                return tool
        raise ValueError(f"Unknown tool: {name!r}")


_SHORT_LABELS = {
    Tool.PENCIL: "Pencil(P)",
    Tool.ERASER: "Eraser(E)",
    Tool.LINE: "Line(L)",
    Tool.RECTANGLE: "Rect(R)",
    Tool.ELLIPSE: "Ellipse(C)",
    Tool.FILL: "Fill(F)",
}


@dataclass(frozen=True)
class DrawSpec:
    """
    Snapshot of the brush settings a gesture paints with.

    Captured when the gesture begins so that changing settings mid-drag
    does not affect it.

    Attributes:
        tool: Tool that started the gesture
        char: Character painted (ignored by the eraser)
        color: Foreground color painted (ignored by the eraser)
        size: Brush stamp size, 1-3
    """
    tool: Tool = Tool.PENCIL
    char: str = DEFAULT_BRUSH_CHAR
    color: Color = Color.WHITE
    size: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", clamp_brush_size(self.size))

    def draw_cell(self) -> Cell:
        """The cell this spec writes: blank for the eraser."""
        if self.tool is Tool.ERASER:
            return Cell.blank()
        return Cell.of(self.char, self.color)


def stamp(grid: Grid, builder: OperationBuilder, point: Point, spec: DrawSpec) -> None:
    """Apply the spec's brush stamp centered on `point`."""
    cell = spec.draw_cell()
    for p in brush_points(point, spec.size):
        builder.apply(grid, p.x, p.y, cell)


def shape_points(tool: Tool, start: Point, end: Point, filled: bool) -> list[Point]:
    """Outline (or filled area) traced by a shape tool between two points."""
    if tool is Tool.LINE:
        return bresenham_line(start, end)
    if tool is Tool.RECTANGLE:
        return rectangle_points(start, end, filled)
    if tool is Tool.ELLIPSE:
        return ellipse_points(start, end)
    return []
