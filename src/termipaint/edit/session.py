"""EditSession - the editing state an interactive front end owns.

The session ties a Grid to its History and to the brush settings the user
has picked, holds the gesture in progress, and keeps a one-line status
message for display. Front ends translate their raw input into the calls
below (or into InputEvents for `dispatch`).
"""

from __future__ import annotations

import logging
from pathlib import Path

from termipaint.config import PaintConfig
from termipaint.core.color import Color
from termipaint.core.constants import BRUSH_CHOICES, clamp_brush_size
from termipaint.core.grid import Grid
from termipaint.core.point import Point
from termipaint.edit import events as ev
from termipaint.edit.gesture import (
    Gesture,
    ShapeDrag,
    begin_gesture,
    continue_gesture,
    finish_gesture,
    preview_points,
    preview_style,
)
from termipaint.edit.history import History, Operation
from termipaint.edit.tools import DrawSpec, Tool
from termipaint.errors import CanvasIOError
from termipaint.io import reader, writer
from termipaint.render.preview import PreviewStyle

logger = logging.getLogger(__name__)


class EditSession:
    """
    One user's editing session over a single grid.

    Attributes:
        grid: The grid being edited
        history: Undo/redo history for `grid`
        tool: Currently selected tool
        brush_char: Character painted by drawing tools
        brush_size: Brush stamp size (1-3)
        color: Foreground color painted by drawing tools
        filled_shapes: Whether rectangles are drawn filled
        status: Short message describing the last action
        current_file: Path last saved to or loaded from

    Example:
        session = EditSession(Grid(40, 10))
        session.select_tool(Tool.LINE)
        session.begin_stroke(Point(0, 0))
        session.end_stroke(Point(39, 9))
        session.undo()
    """

    def __init__(self, grid: Grid | None = None, config: PaintConfig | None = None) -> None:
        self.config = config or PaintConfig()
        self.grid = grid if grid is not None else Grid(self.config.width, self.config.height)
        self.history = History(capacity=self.config.undo_limit)
        self.tool = Tool.PENCIL
        self.brush_char = self.config.brush_char
        self.brush_size = self.config.brush_size
        self.color = self.config.color
        self.filled_shapes = False
        self.status = "Ready"
        self.current_file: Path | None = None
        self._gesture: Gesture | None = None

    # -------------------------------------------------------------------------
    # Brush settings
    # -------------------------------------------------------------------------

    def draw_spec(self) -> DrawSpec:
        """Snapshot of the current brush settings."""
        return DrawSpec(
            tool=self.tool,
            char=self.brush_char,
            color=self.color,
            size=self.brush_size,
        )

    def select_tool(self, tool: Tool) -> None:
        self.tool = tool
        self.status = f"Tool: {tool.display_name}"

    def select_color(self, color: Color) -> None:
        self.color = color
        self.status = f"Color: {color.display_name}"

    def select_brush_char(self, char: str) -> None:
        self.brush_char = char
        self.status = f"Brush char: {printable_char(char)}"

    def set_brush_size(self, size: int) -> None:
        self.brush_size = clamp_brush_size(size)
        self.status = f"Brush size: {self.brush_size}"

    def grow_brush(self) -> None:
        self.set_brush_size(self.brush_size + 1)

    def shrink_brush(self) -> None:
        self.set_brush_size(self.brush_size - 1)

    def toggle_filled(self, value: bool | None = None) -> None:
        """Flip (or set) whether rectangles are drawn filled."""
        self.filled_shapes = (not self.filled_shapes) if value is None else value
        state = "enabled" if self.filled_shapes else "disabled"
        self.status = f"Rectangle fill {state}"

    def cycle_color(self, forward: bool = True) -> None:
        """Step through the quick palette, wrapping at either end."""
        palette = Color.quick_palette()
        idx = palette.index(self.color) if self.color in palette else 0
        idx = (idx + (1 if forward else -1)) % len(palette)
        self.color = palette[idx]

    def cycle_brush_char(self, forward: bool = True) -> None:
        """Step through the brush character choices, wrapping at either end."""
        choices = BRUSH_CHOICES
        idx = choices.index(self.brush_char) if self.brush_char in choices else 0
        idx = (idx + (1 if forward else -1)) % len(choices)
        self.brush_char = choices[idx]

    def sample(self, point: Point) -> bool:
        """Eyedropper: adopt the character and color under `point`.

        A space is not adopted as brush character. Returns False when
        the point is off the grid.
        """
        cell = self.grid.get_signed(point.x, point.y)
        if cell is None:
            return False
        if cell.char != ' ':
            self.brush_char = cell.char
        self.color = cell.fg
        self.status = f"Sampled '{printable_char(self.brush_char)}' / {self.color.display_name}"
        return True

    # -------------------------------------------------------------------------
    # Strokes
    # -------------------------------------------------------------------------

    @property
    def gesture(self) -> Gesture | None:
        """The gesture in progress, if any."""
        return self._gesture

    def begin_stroke(self, point: Point) -> None:
        """Press: start a gesture with the current tool at `point`.

        A fill completes immediately and is recorded right away.
        """
        gesture = begin_gesture(self.grid, point, self.draw_spec(), self.filled_shapes)
        if self.tool is Tool.FILL:
            self._commit(finish_gesture(self.grid, gesture))
            return
        self._gesture = gesture

    def move_to(self, point: Point) -> None:
        """Drag: extend the gesture in progress to `point`."""
        if self._gesture is not None:
            continue_gesture(self.grid, self._gesture, point)

    def end_stroke(self, point: Point | None = None) -> None:
        """Release: finish the gesture in progress and record it."""
        gesture, self._gesture = self._gesture, None
        if gesture is not None:
            self._commit(finish_gesture(self.grid, gesture, point))

    def cancel_shape(self) -> bool:
        """Abandon a shape drag before anything is drawn."""
        if not isinstance(self._gesture, ShapeDrag):
            return False
        self._gesture = None
        self.status = "Shape cancelled"
        return True

    def _commit(self, op: Operation) -> None:
        if op.is_empty():
            return
        self.history.push(op)
        logger.debug("Recorded operation of %d changes", len(op))

    def preview_points(self) -> list[Point]:
        """Coordinates a shape drag would paint if released now."""
        return preview_points(self._gesture)

    def preview_style(self) -> PreviewStyle | None:
        return preview_style(self._gesture)

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def undo(self) -> bool:
        done = self.history.undo(self.grid)
        self.status = "Undo" if done else "Nothing to undo"
        return done

    def redo(self) -> bool:
        done = self.history.redo(self.grid)
        self.status = "Redo" if done else "Nothing to redo"
        return done

    # -------------------------------------------------------------------------
    # Canvas management
    # -------------------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """Resize the grid, keeping its top-left content."""
        self.grid.resize_preserve(width, height)

    def save(self, path: str | Path | None = None) -> bool:
        """Save the grid; failures are reported in `status`."""
        target = Path(path) if path is not None else self._default_path()
        try:
            writer.save(self.grid, target)
        except CanvasIOError as exc:
            self.status = f"Save failed: {exc}"
            return False
        self.current_file = target
        self.status = f"Saved {target}"
        return True

    def load(self, path: str | Path | None = None) -> bool:
        """Replace the grid with a file's contents.

        The loaded grid is fitted to the current size and the history is
        cleared. On failure grid, history and current file are untouched.
        """
        source = Path(path) if path is not None else self._default_path()
        try:
            loaded = reader.load(source)
        except CanvasIOError as exc:
            self.status = f"Load failed: {exc}"
            return False

        loaded.resize_preserve(self.grid.width, self.grid.height)
        self.grid = loaded
        self.history.clear()
        self._gesture = None
        self.current_file = source
        self.status = f"Loaded {source}"
        return True

    def _default_path(self) -> Path:
        if self.current_file is not None:
            return self.current_file
        return Path(self.config.default_file)

    # -------------------------------------------------------------------------
    # Event dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, event: ev.InputEvent) -> None:
        """Apply one input event to the session."""
        if isinstance(event, ev.BeginStroke):
            self.begin_stroke(event.point)
        elif isinstance(event, ev.MoveTo):
            self.move_to(event.point)
        elif isinstance(event, ev.EndStroke):
            self.end_stroke(event.point)
        elif isinstance(event, ev.Undo):
            self.undo()
        elif isinstance(event, ev.Redo):
            self.redo()
        elif isinstance(event, ev.Resize):
            self.resize(event.width, event.height)
        elif isinstance(event, ev.SelectTool):
            self.select_tool(event.tool)
        elif isinstance(event, ev.SelectColor):
            self.select_color(event.color)
        elif isinstance(event, ev.SelectBrushChar):
            self.select_brush_char(event.char)
        elif isinstance(event, ev.SetBrushSize):
            self.set_brush_size(event.size)
        elif isinstance(event, ev.ToggleFilled):
            self.toggle_filled(event.value)
        elif isinstance(event, ev.CancelShape):
            self.cancel_shape()
        else:
            raise TypeError(f"Unsupported input event: {event!r}")

    def play(self, events: list[ev.InputEvent]) -> None:
        """Dispatch a sequence of events in order."""
        for event in events:
            self.dispatch(event)
        logger.debug("Played %d events", len(events))


def printable_char(char: str) -> str:
    """Show a space brush as a visible symbol."""
    return '␠' if char == ' ' else char
