"""Breadth-first flood fill over the grid."""

from __future__ import annotations

from collections import deque

from termipaint.core.cell import Cell
from termipaint.core.grid import Grid
from termipaint.core.point import Point


def flood_fill_points(
    grid: Grid,
    start: Point,
    target: Cell,
    replacement: Cell,
) -> list[Point]:
    """Find the 4-connected region of `target` cells containing `start`.

    The grid is only read; the caller writes `replacement` to the returned
    points. Points come back in breadth-first discovery order. Nothing is
    returned when `start` is off the grid or when filling would not change
    anything (`target == replacement`).

    Args:
        grid: Grid to search
        start: Seed point
        target: Cell value that belongs to the region
        replacement: Cell the caller intends to write

    Returns:
        Region points, each exactly once
    """
    if target == replacement or not grid.in_bounds(start.x, start.y):
        return []

    width = grid.width
    visited = bytearray(width * grid.height)
    queue: deque[Point] = deque([start])
    out: list[Point] = []

    while queue:
        p = queue.popleft()
        if not grid.in_bounds(p.x, p.y):
            continue

        idx = p.y * width + p.x
        if visited[idx]:
            continue
        visited[idx] = 1

        if grid.get(p.x, p.y) != target:
            continue

        out.append(p)
        queue.append(Point(p.x + 1, p.y))
        queue.append(Point(p.x - 1, p.y))
        queue.append(Point(p.x, p.y + 1))
        queue.append(Point(p.x, p.y - 1))

    return out
