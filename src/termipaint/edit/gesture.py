"""Gesture state for press, drag and release interactions.

A gesture is one of three plain values owned by the caller:

- FreehandStroke: pencil/eraser drags, painted as the pointer moves
- ShapeDrag: line/rectangle/ellipse drags, painted only on release
- FillClick: a flood fill, computed entirely on press

The caller threads the value through begin_gesture, continue_gesture and
finish_gesture. Nothing in this module keeps state between calls, so a
gesture the caller drops is simply abandoned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from termipaint.core.grid import Grid
from termipaint.core.point import Point
from termipaint.edit.history import Operation, OperationBuilder
from termipaint.edit.tools import DrawSpec, Tool, shape_points, stamp
from termipaint.raster import bresenham_line, brush_points, dedup_points, flood_fill_points
from termipaint.render.preview import PreviewStyle


@dataclass
class FreehandStroke:
    """Pencil or eraser drag in progress; already applied to the grid."""
    last: Point
    spec: DrawSpec
    builder: OperationBuilder = field(default_factory=OperationBuilder)


@dataclass
class ShapeDrag:
    """Shape drag in progress; nothing is written until it finishes."""
    start: Point
    current: Point
    spec: DrawSpec
    kind: Tool
    filled: bool = False


@dataclass
class FillClick:
    """Flood fill already applied on press, waiting to be finalized."""
    builder: OperationBuilder = field(default_factory=OperationBuilder)


Gesture = Union[FreehandStroke, ShapeDrag, FillClick]


def begin_gesture(grid: Grid, point: Point, spec: DrawSpec, filled: bool = False) -> Gesture:
    """Start a gesture for `spec.tool` at `point`.

    Freehand tools stamp the first point right away and fills are
    computed in full; shape tools only remember where they started.
    """
    tool = spec.tool
    if tool.is_freehand:
        stroke = FreehandStroke(last=point, spec=spec)
        stamp(grid, stroke.builder, point, spec)
        return stroke

    if tool.is_shape:
        return ShapeDrag(start=point, current=point, spec=spec, kind=tool, filled=filled)

    click = FillClick()
    target = grid.get_signed(point.x, point.y)
    if target is not None:
        replacement = spec.draw_cell()
        for p in flood_fill_points(grid, point, target, replacement):
            click.builder.apply(grid, p.x, p.y, replacement)
    return click


def continue_gesture(grid: Grid, gesture: Gesture, point: Point) -> None:
    """Move an in-progress gesture to `point`."""
    if isinstance(gesture, FreehandStroke):
        # Bridge the gap so fast pointer moves leave no holes
        for p in bresenham_line(gesture.last, point):
            stamp(grid, gesture.builder, p, gesture.spec)
        gesture.last = point
    elif isinstance(gesture, ShapeDrag):
        gesture.current = point


def finish_gesture(grid: Grid, gesture: Gesture, end: Point | None = None) -> Operation:
    """End a gesture and return its operation (possibly empty).

    A shape drag is drawn now, from its start to `end` (or to the last
    position it was dragged to when `end` is None).
    """
    if isinstance(gesture, ShapeDrag):
        target = end if end is not None else gesture.current
        builder = OperationBuilder()
        for p in shape_points(gesture.kind, gesture.start, target, gesture.filled):
            stamp(grid, builder, p, gesture.spec)
        return builder.into_operation()

    return gesture.builder.into_operation()


def preview_points(gesture: Gesture | None) -> list[Point]:
    """Points a shape drag would paint if released now."""
    if not isinstance(gesture, ShapeDrag):
        return []

    base = shape_points(gesture.kind, gesture.start, gesture.current, gesture.filled)
    if gesture.spec.size <= 1:
        return base
    return dedup_points(
        p for point in base for p in brush_points(point, gesture.spec.size)
    )


def preview_style(gesture: Gesture | None) -> PreviewStyle | None:
    if not isinstance(gesture, ShapeDrag):
        return None
    spec = gesture.spec
    return PreviewStyle(char=spec.char, fg=spec.color, erase=spec.tool is Tool.ERASER)
