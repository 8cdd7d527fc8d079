"""Spatial queries: closest cell, hit-testing, ranges and bounds."""

from __future__ import annotations

import math
from collections.abc import Sequence

from gridcells.construction import cell_for_position
from gridcells.errors import EmptySelectionError, InvalidArgumentError
from gridcells.geometry import bottom_right, contains, top_left
from gridcells.grid import GridLike, PositionLike, as_position, is_grid, value_of
from gridcells.mapping import cell_height, cell_index, cell_width, x_for_column, y_for_row
from gridcells.models import Cell, Point, Position


def closest_cell_position(grid: GridLike, point: Point | Cell) -> Position:
    """Return the slot whose center is nearest the point on each axis.

    Columns and rows are resolved independently; ties go to the lower index.
    """
    half_width = cell_width(grid) / 2
    half_height = cell_height(grid) / 2
    column = 0
    row = 0
    min_dx = math.inf
    min_dy = math.inf
    for c in range(grid.columns):
        dist = abs(point.x - (x_for_column(grid, c) + half_width))
        if dist < min_dx:
            min_dx = dist
            column = c
    for r in range(grid.rows):
        dist = abs(point.y - (y_for_row(grid, r) + half_height))
        if dist < min_dy:
            min_dy = dist
            row = r
    return Position(column=column, row=row)


def closest_cell(grid: GridLike, point: Point | Cell, out: Cell | None = None) -> Cell:
    return cell_for_position(grid, closest_cell_position(grid, point), out=out)


def closest_cell_index(grid: GridLike, point: Point | Cell) -> int:
    return cell_index(grid, closest_cell_position(grid, point))


def intersects_cell_position(grid: GridLike, point: Point | Cell) -> Position | None:
    """Return the first slot containing the point, scanning row by row."""
    scratch = Cell()
    for r in range(grid.rows):
        for c in range(grid.columns):
            cell_for_position(grid, c, r, out=scratch)
            if contains(scratch, point):
                return Position(column=c, row=r)
    return None


def _index_in_cells(items: Sequence[Cell], point: Point | Cell) -> int | None:
    for i, item in enumerate(items):
        if contains(item, point):
            return i
    return None


def intersects_cell(
    grid: GridLike | Sequence[Cell], point: Point | Cell
) -> Cell | None:
    """Return the cell containing the point, from a grid or a cell sequence."""
    if is_grid(grid):
        position = intersects_cell_position(grid, point)  # type: ignore[arg-type]
        if position is None:
            return None
        return cell_for_position(grid, position)  # type: ignore[arg-type]
    items = _as_cells(grid)
    index = _index_in_cells(items, point)
    return None if index is None else items[index]


def intersects_cell_index(grid: GridLike | Sequence[Cell], point: Point | Cell) -> int | None:
    """Return the index of the cell containing the point.

    For a grid this is the linear index; for a sequence it is the position
    of the matching cell in that sequence.
    """
    if is_grid(grid):
        position = intersects_cell_position(grid, point)  # type: ignore[arg-type]
        if position is None:
            return None
        return cell_index(grid, position)  # type: ignore[arg-type]
    return _index_in_cells(_as_cells(grid), point)


def _range_limits(a: PositionLike, b: PositionLike) -> tuple[int, int, int, int]:
    start = as_position(a)
    stop = as_position(b)
    return (
        min(start.column, stop.column),
        max(start.column, stop.column),
        min(start.row, stop.row),
        max(start.row, stop.row),
    )


def cells_range(grid: GridLike, start: PositionLike, stop: PositionLike) -> list[Cell]:
    """Return every cell in the rectangle spanned by two corner slots.

    The corners may be given in any order. Cells are ordered by linear index.
    """
    min_c, max_c, min_r, max_r = _range_limits(start, stop)
    selected: list[Cell] = []
    if value_of(grid, "row_major"):
        for r in range(min_r, max_r + 1):
            for c in range(min_c, max_c + 1):
                selected.append(cell_for_position(grid, c, r))
        return selected
    for c in range(min_c, max_c + 1):
        for r in range(min_r, max_r + 1):
            selected.append(cell_for_position(grid, c, r))
    return selected


def is_in_range(position: PositionLike, a: PositionLike, b: PositionLike) -> bool:
    """Return whether a slot lies in the rectangle spanned by two corners."""
    target = as_position(position)
    min_c, max_c, min_r, max_r = _range_limits(a, b)
    return min_c <= target.column <= max_c and min_r <= target.row <= max_r


def num_cells_in_range(a: PositionLike, b: PositionLike) -> int:
    """Return how many slots ``cells_range`` selects for two corners."""
    min_c, max_c, min_r, max_r = _range_limits(a, b)
    return (max_c - min_c + 1) * (max_r - min_r + 1)


def _cell_bounds(items: Sequence[Cell], out: Cell | None) -> Cell:
    if not items:
        raise EmptySelectionError("cannot bound an empty cell collection")
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for item in items:
        tl = top_left(item)
        br = bottom_right(item)
        min_x = min(min_x, tl.x, br.x)
        min_y = min(min_y, tl.y, br.y)
        max_x = max(max_x, tl.x, br.x)
        max_y = max(max_y, tl.y, br.y)
    target = out if out is not None else Cell()
    target.x = min_x
    target.y = min_y
    target.width = max_x - min_x
    target.height = max_y - min_y
    return target


def _grid_bounds(grid: GridLike, out: Cell | None) -> Cell:
    left = value_of(grid, "x")
    right = left + value_of(grid, "width")
    top = value_of(grid, "y")
    bottom = top + value_of(grid, "height")
    if value_of(grid, "outer_padding"):
        left += value_of(grid, "padding_left")
        right -= value_of(grid, "padding_right")
        top += value_of(grid, "padding_top")
        bottom -= value_of(grid, "padding_bottom")
    target = out if out is not None else Cell()
    target.x = left
    target.y = top
    target.width = right - left
    target.height = bottom - top
    return target


def bounds(grid: GridLike | Sequence[Cell], out: Cell | None = None) -> Cell:
    """Return the bounding rectangle of a cell collection or of a grid.

    A grid's bounds are its outer extent, inset by the outer paddings when
    ``outer_padding`` is on. An empty cell collection has no bounds and
    raises EmptySelectionError.
    """
    if is_grid(grid):
        return _grid_bounds(grid, out)  # type: ignore[arg-type]
    return _cell_bounds(_as_cells(grid), out)


def cells_merged(
    grid: GridLike | Sequence[Cell],
    start: PositionLike | None = None,
    stop: PositionLike | None = None,
    out: Cell | None = None,
) -> Cell:
    """Merge cells into one bounding rectangle.

    A sequence is merged as-is and must not be empty; an empty one raises
    EmptySelectionError. A grid merges the cells at ``start`` and ``stop``.
    """
    if not is_grid(grid):
        return _cell_bounds(_as_cells(grid), out)
    if start is None or stop is None:
        raise InvalidArgumentError("merging grid cells requires start and stop positions")
    corners = [
        cell_for_position(grid, as_position(start)),  # type: ignore[arg-type]
        cell_for_position(grid, as_position(stop)),  # type: ignore[arg-type]
    ]
    return _cell_bounds(corners, out)


def _as_cells(value: object) -> Sequence[Cell]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return value  # type: ignore[return-value]
    raise InvalidArgumentError(f"expected a Grid or a sequence of Cells, got {type(value).__name__}")
