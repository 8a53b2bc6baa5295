"""Editing: change tracking, undo/redo, tools, gestures and sessions."""

from termipaint.edit.gesture import (
    FillClick,
    FreehandStroke,
    Gesture,
    ShapeDrag,
    begin_gesture,
    continue_gesture,
    finish_gesture,
    preview_points,
    preview_style,
)
from termipaint.edit.history import CellChange, History, Operation, OperationBuilder
from termipaint.edit.session import EditSession
from termipaint.edit.tools import DrawSpec, Tool, shape_points, stamp

__all__ = [
    "CellChange",
    "DrawSpec",
    "EditSession",
    "FillClick",
    "FreehandStroke",
    "Gesture",
    "History",
    "Operation",
    "OperationBuilder",
    "ShapeDrag",
    "Tool",
    "begin_gesture",
    "continue_gesture",
    "finish_gesture",
    "preview_points",
    "preview_style",
    "shape_points",
    "stamp",
]
