"""
termipaint: character-grid drawing surface

A fixed-size grid of colored character cells, drawing tools that turn
pointer gestures into cell writes, and full undo/redo of every gesture.

Quick Start:
    >>> import termipaint as tp
    >>> session = tp.EditSession(tp.Grid(40, 10))
    >>> session.select_tool(tp.Tool.RECTANGLE)
    >>> session.begin_stroke(tp.Point(2, 2))
    >>> session.end_stroke(tp.Point(12, 6))
    >>> print(tp.TextRenderer().render(session.grid))
    >>> session.undo()

Features:
    - Bounds-safe grid: off-grid reads are blank, off-grid writes ignored
    - Pencil, eraser, line, rectangle, ellipse and flood fill tools
    - Coalesced per-gesture diffs with bounded undo/redo history
    - Lossless JSON and plain-text canvas files
    - ANSI terminal and plain-text rendering with shape previews
"""

__version__ = "0.1.0"

# Core types
from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.grid import Grid
from termipaint.core.point import Point

# Editing
from termipaint.edit.history import CellChange, History, Operation, OperationBuilder
from termipaint.edit.session import EditSession
from termipaint.edit.tools import DrawSpec, Tool

# Configuration and errors
from termipaint.config import PaintConfig
from termipaint.errors import CanvasIOError, ScriptError, TermipaintError

# I/O
from termipaint.io.reader import load
from termipaint.io.writer import save

# Rendering
from termipaint.render.terminal import TerminalRenderer
from termipaint.render.text import TextRenderer

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "Grid",
    "Point",
    # Editing
    "CellChange",
    "DrawSpec",
    "EditSession",
    "History",
    "Operation",
    "OperationBuilder",
    "Tool",
    # Configuration and errors
    "PaintConfig",
    "CanvasIOError",
    "ScriptError",
    "TermipaintError",
    # I/O
    "load",
    "save",
    # Rendering
    "TerminalRenderer",
    "TextRenderer",
]
