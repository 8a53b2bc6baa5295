"""Integer rasterization of brush stamps, lines, rectangles and ellipses.

Every function here is pure: it takes integer points and returns a list
of integer points. Nothing is clipped to a grid; writes that land off the
grid are dropped by the grid itself.
"""

from __future__ import annotations

from typing import Iterable

from termipaint.core.point import Point


def dedup_points(points: Iterable[Point]) -> list[Point]:
    """Drop repeated points, keeping first-seen order."""
    seen: set[Point] = set()
    out: list[Point] = []
    for p in points:
        if p not in seen:
            seen.add(p)
            out.append(p)
    return out


def brush_points(center: Point, size: int) -> list[Point]:
    """Square brush stamp centered on `center`.

    Size 1 is the center cell alone; size n covers a square of side
    2*(n-1)+1 in row-major order.
    """
    radius = max(size - 1, 0)
    return [
        Point(center.x + dx, center.y + dy)
        for dy in range(-radius, radius + 1)
        for dx in range(-radius, radius + 1)
    ]


def bresenham_line(start: Point, end: Point) -> list[Point]:
    """Cells crossed by the line from `start` to `end`, both inclusive.

    Uses the all-octant integer Bresenham algorithm, so consecutive points
    are 8-connected and no point repeats.
    """
    x0, y0 = start
    x1, y1 = end

    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    points: list[Point] = []
    while True:
        points.append(Point(x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy and x0 != x1:
            err += dy
            x0 += sx
        if e2 <= dx and y0 != y1:
            err += dx
            y0 += sy

    return points


def _bounds(start: Point, end: Point) -> tuple[int, int, int, int]:
    """Normalize two corners into (min_x, min_y, max_x, max_y)."""
    return (
        min(start.x, end.x),
        min(start.y, end.y),
        max(start.x, end.x),
        max(start.y, end.y),
    )


def rectangle_points(start: Point, end: Point, filled: bool) -> list[Point]:
    """Rectangle spanned by two opposite corners.

    Filled rectangles come back in row-major order. Outlines list the
    top and bottom edges column by column, then the left and right edges
    row by row, with corners kept at their first appearance.
    """
    min_x, min_y, max_x, max_y = _bounds(start, end)

    if filled:
        return [
            Point(x, y)
            for y in range(min_y, max_y + 1)
            for x in range(min_x, max_x + 1)
        ]

    points: list[Point] = []
    for x in range(min_x, max_x + 1):
        points.append(Point(x, min_y))
        points.append(Point(x, max_y))
    for y in range(min_y, max_y + 1):
        points.append(Point(min_x, y))
        points.append(Point(max_x, y))

    return dedup_points(points)


def _plot_quadrants(points: list[Point], cx: int, cy: int, x: int, y: int) -> None:
    points.append(Point(cx + x, cy + y))
    points.append(Point(cx - x, cy + y))
    points.append(Point(cx + x, cy - y))
    points.append(Point(cx - x, cy - y))


def ellipse_points(start: Point, end: Point) -> list[Point]:
    """Outline of the ellipse inscribed in the box spanned by two corners.

    Radii are half the box extents (rounded down) and the center sits
    `radius` cells in from the top-left corner. A box that is flat in one
    axis yields the straight segment along the other axis. Otherwise the
    midpoint ellipse algorithm runs in two regions with all arithmetic on
    integers.
    """
    min_x, min_y, max_x, max_y = _bounds(start, end)

    rx = (max_x - min_x) // 2
    ry = (max_y - min_y) // 2
    cx = min_x + rx
    cy = min_y + ry

    if rx == 0 and ry == 0:
        return [Point(cx, cy)]
    if rx == 0:
        return [Point(cx, y) for y in range(min_y, max_y + 1)]
    if ry == 0:
        return [Point(x, cy) for x in range(min_x, max_x + 1)]

    rx2 = rx * rx
    ry2 = ry * ry
    two_rx2 = 2 * rx2
    two_ry2 = 2 * ry2

    x = 0
    y = ry
    px = 0
    py = two_rx2 * y

    points: list[Point] = []

    # Region 1: slope magnitude below 1, step in x
    p = ry2 - rx2 * ry + rx2 // 4
    while px < py:
        _plot_quadrants(points, cx, cy, x, y)
        x += 1
        px += two_ry2
        if p < 0:
            p += ry2 + px
        else:
            y -= 1
            py -= two_rx2
            p += ry2 + px - py

    # Region 2: slope magnitude 1 or more, step in y
    p = ry2 * (x * x + x) + ry2 // 4 + rx2 * (y - 1) * (y - 1) - rx2 * ry2
    while y >= 0:
        _plot_quadrants(points, cx, cy, x, y)
        y -= 1
        py -= two_rx2
        if p > 0:
            p += rx2 - py
        else:
            x += 1
            px += two_ry2
            p += rx2 - py + px

    return dedup_points(points)
