"""Rectangle primitives shared by cells and grids."""

from __future__ import annotations

from typing import TypeAlias

from gridcells.grid import GridLike, value_of
from gridcells.models import Cell, Point

RectLike: TypeAlias = Cell | GridLike


def contains(rect: RectLike, point: Point | Cell) -> bool:
    """Return whether a point is inside the rectangle, edges included."""
    x = value_of(rect, "x")
    y = value_of(rect, "y")
    return (
        x <= point.x <= x + value_of(rect, "width")
        and y <= point.y <= y + value_of(rect, "height")
    )


def cells_intersect(a: Cell, b: Cell) -> bool:
    """Return whether two rectangles overlap; shared edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def top_left(rect: RectLike) -> Point:
    return Point(value_of(rect, "x"), value_of(rect, "y"))


def top_right(rect: RectLike) -> Point:
    return Point(value_of(rect, "x") + value_of(rect, "width"), value_of(rect, "y"))


def bottom_left(rect: RectLike) -> Point:
    return Point(value_of(rect, "x"), value_of(rect, "y") + value_of(rect, "height"))


def bottom_right(rect: RectLike) -> Point:
    return Point(
        value_of(rect, "x") + value_of(rect, "width"),
        value_of(rect, "y") + value_of(rect, "height"),
    )


def center(rect: RectLike) -> Point:
    """Return the center of a cell or of a grid's outer extent."""
    return Point(
        value_of(rect, "x") + value_of(rect, "width") / 2,
        value_of(rect, "y") + value_of(rect, "height") / 2,
    )
