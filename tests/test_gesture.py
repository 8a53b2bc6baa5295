"""Tests for tools and press/drag/release gestures."""

import pytest

from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.grid import Grid
from termipaint.core.point import Point
from termipaint.edit.gesture import (
    FillClick,
    FreehandStroke,
    ShapeDrag,
    begin_gesture,
    continue_gesture,
    finish_gesture,
    preview_points,
    preview_style,
)
from termipaint.edit.tools import DrawSpec, Tool, shape_points


class TestTool:
    """Tests for Tool and DrawSpec."""

    def test_from_name(self) -> None:
        assert Tool.from_name("line") is Tool.LINE
        assert Tool.from_name("Rect") is Tool.RECTANGLE
        assert Tool.from_name("circle") is Tool.ELLIPSE
        with pytest.raises(ValueError):
            Tool.from_name("spray")

    def test_tool_kinds(self) -> None:
        assert Tool.PENCIL.is_freehand and Tool.ERASER.is_freehand
        assert all(t.is_shape for t in (Tool.LINE, Tool.RECTANGLE, Tool.ELLIPSE))
        assert not Tool.FILL.is_shape and not Tool.FILL.is_freehand
        assert Tool.RECTANGLE.short_label == "Rect(R)"

    def test_draw_cell(self) -> None:
        assert DrawSpec(Tool.PENCIL, '@', Color.CYAN).draw_cell() == Cell.of('@', Color.CYAN)
        assert DrawSpec(Tool.ERASER, '@', Color.CYAN).draw_cell() == Cell.blank()

    def test_size_clamped(self) -> None:
        assert DrawSpec(size=0).size == 1
        assert DrawSpec(size=7).size == 3

    def test_shape_points_for_non_shape_tool(self) -> None:
        assert shape_points(Tool.PENCIL, Point(0, 0), Point(3, 3), False) == []


class TestFreehand:
    """Tests for pencil and eraser strokes."""

    def test_begin_stamps_first_point(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.PENCIL, '#', Color.RED)
        gesture = begin_gesture(grid, Point(1, 1), spec)
        assert isinstance(gesture, FreehandStroke)
        assert grid.get(1, 1) == Cell.of('#', Color.RED)

    def test_drag_connects_points(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.PENCIL, '#', Color.RED)
        gesture = begin_gesture(grid, Point(0, 0), spec)
        continue_gesture(grid, gesture, Point(4, 0))
        continue_gesture(grid, gesture, Point(4, 2))
        op = finish_gesture(grid, gesture)

        painted = {(c.x, c.y) for c in op.changes}
        assert painted == {(x, 0) for x in range(5)} | {(4, 1), (4, 2)}
        assert all(c.before == Cell.blank() for c in op.changes)

    def test_large_brush(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.PENCIL, '#', Color.RED, size=2)
        gesture = begin_gesture(grid, Point(0, 0), spec)
        op = finish_gesture(grid, gesture)
        # 3x3 stamp clipped to the grid corner
        assert {(c.x, c.y) for c in op.changes} == {(0, 0), (1, 0), (0, 1), (1, 1)}

    def test_overpainting_records_original_before(self, grid: Grid) -> None:
        grid.set(2, 0, Cell(char='Q'))
        spec = DrawSpec(Tool.PENCIL, '#', Color.RED)
        gesture = begin_gesture(grid, Point(0, 0), spec)
        continue_gesture(grid, gesture, Point(4, 0))
        continue_gesture(grid, gesture, Point(0, 0))
        op = finish_gesture(grid, gesture)
        assert len(op) == 5
        change = next(c for c in op.changes if (c.x, c.y) == (2, 0))
        assert change.before == Cell(char='Q')

    def test_eraser(self, grid: Grid) -> None:
        grid.set(2, 2, Cell.of('#', Color.RED))
        gesture = begin_gesture(grid, Point(2, 2), DrawSpec(Tool.ERASER))
        op = finish_gesture(grid, gesture)
        assert grid.get(2, 2) == Cell.blank()
        assert len(op) == 1

    def test_off_grid_stroke_is_empty(self, grid: Grid) -> None:
        gesture = begin_gesture(grid, Point(-3, -3), DrawSpec())
        continue_gesture(grid, gesture, Point(-10, -1))
        assert finish_gesture(grid, gesture).is_empty()


class TestShapeDrag:
    """Tests for line, rectangle and ellipse drags."""

    def test_nothing_drawn_until_release(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.RECTANGLE, '#', Color.RED)
        gesture = begin_gesture(grid, Point(0, 0), spec)
        continue_gesture(grid, gesture, Point(2, 2))
        assert isinstance(gesture, ShapeDrag)
        assert gesture.current == Point(2, 2)
        assert all(cell.is_blank() for _, _, cell in grid.cells())

    def test_release_uses_last_drag_point(self, grid: Grid, rows) -> None:
        spec = DrawSpec(Tool.RECTANGLE, '#', Color.RED)
        gesture = begin_gesture(grid, Point(0, 0), spec)
        continue_gesture(grid, gesture, Point(2, 2))
        op = finish_gesture(grid, gesture)
        assert len(op) == 8
        assert rows(grid) == ["###  ", "# #  ", "###  ", "     ", "     "]

    def test_release_point_overrides(self, grid: Grid, rows) -> None:
        spec = DrawSpec(Tool.LINE, '-', Color.RED)
        gesture = begin_gesture(grid, Point(0, 1), spec)
        continue_gesture(grid, gesture, Point(1, 1))
        finish_gesture(grid, gesture, Point(4, 1))
        assert rows(grid)[1] == "-----"

    def test_filled_rectangle(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.RECTANGLE, '#', Color.RED)
        gesture = begin_gesture(grid, Point(1, 1), spec, filled=True)
        op = finish_gesture(grid, gesture, Point(3, 3))
        assert len(op) == 9

    def test_ellipse(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.ELLIPSE, 'o', Color.YELLOW)
        gesture = begin_gesture(grid, Point(0, 0), spec)
        op = finish_gesture(grid, gesture, Point(4, 0))
        assert [(c.x, c.y) for c in op.changes] == [(x, 0) for x in range(5)]

    def test_preview(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.LINE, '*', Color.GREEN)
        gesture = begin_gesture(grid, Point(0, 0), spec)
        continue_gesture(grid, gesture, Point(3, 0))
        assert preview_points(gesture) == [Point(x, 0) for x in range(4)]
        assert preview_style(gesture).preview_cell() == Cell.of('*', Color.GREEN)

    def test_preview_with_brush_is_deduplicated(self, grid: Grid) -> None:
        spec = DrawSpec(Tool.LINE, '*', Color.GREEN, size=2)
        gesture = begin_gesture(grid, Point(1, 1), spec)
        continue_gesture(grid, gesture, Point(2, 1))
        points = preview_points(gesture)
        assert len(points) == len(set(points)) == 12

    def test_no_preview_for_other_gestures(self, grid: Grid) -> None:
        gesture = begin_gesture(grid, Point(0, 0), DrawSpec(Tool.PENCIL))
        assert preview_points(gesture) == []
        assert preview_style(gesture) is None
        assert preview_points(None) == []


class TestFillClick:
    """Tests for flood fill gestures."""

    def test_fill_applies_on_press(self, grid: Grid) -> None:
        grid.set(2, 2, Cell(char='X'))
        gesture = begin_gesture(grid, Point(0, 0), DrawSpec(Tool.FILL, '.', Color.BLUE))
        assert isinstance(gesture, FillClick)
        assert grid.get(4, 4) == Cell.of('.', Color.BLUE)
        assert grid.get(2, 2) == Cell(char='X')
        op = finish_gesture(grid, gesture)
        assert len(op) == 24

    def test_fill_off_grid(self, grid: Grid) -> None:
        gesture = begin_gesture(grid, Point(9, 9), DrawSpec(Tool.FILL))
        assert finish_gesture(grid, gesture).is_empty()

    def test_fill_with_same_cell(self, grid: Grid) -> None:
        grid.set(0, 0, Cell.of('#', Color.WHITE))
        gesture = begin_gesture(grid, Point(0, 0), DrawSpec(Tool.FILL, '#', Color.WHITE))
        assert finish_gesture(grid, gesture).is_empty()
