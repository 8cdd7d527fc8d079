"""Column/row, pixel and linear-index conversions."""

from __future__ import annotations

from gridcells.config import get_config
from gridcells.errors import InvalidArgumentError
from gridcells.grid import GridLike, is_number, resolve_position, value_of
from gridcells.models import Cell, Point, Position


def cell_width(grid: GridLike) -> float:
    """Return the width of every cell in the grid."""
    pl = value_of(grid, "padding_left")
    pr = value_of(grid, "padding_right")
    total_padding = (pl + pr) * grid.columns
    if not value_of(grid, "outer_padding"):
        total_padding -= pl + pr
    return (value_of(grid, "width") - total_padding) / grid.columns


def cell_height(grid: GridLike) -> float:
    """Return the height of every cell in the grid."""
    pt = value_of(grid, "padding_top")
    pb = value_of(grid, "padding_bottom")
    total_padding = (pt + pb) * grid.rows
    if not value_of(grid, "outer_padding"):
        total_padding -= pt + pb
    return (value_of(grid, "height") - total_padding) / grid.rows


def x_for_column(grid: GridLike, n: float) -> float:
    """Return the left edge of column ``n``.

    ``n`` is not bounds-checked; ``n == columns`` gives the right edge of the
    last column plus its trailing padding.
    """
    pl = value_of(grid, "padding_left")
    pr = value_of(grid, "padding_right")
    x = value_of(grid, "x") + pl + cell_width(grid) * n + (pl + pr) * n
    if not value_of(grid, "outer_padding"):
        x -= pl
    return x


def y_for_row(grid: GridLike, n: float) -> float:
    """Return the top edge of row ``n``."""
    pt = value_of(grid, "padding_top")
    pb = value_of(grid, "padding_bottom")
    y = value_of(grid, "y") + pt + cell_height(grid) * n + (pt + pb) * n
    if not value_of(grid, "outer_padding"):
        y -= pt
    return y


def cell_index(grid: GridLike, column: int | Position | Cell, row: int | None = None) -> int:
    """Return the linear index of a slot.

    Row-major grids number ``columns * row + column``; column-major grids
    number ``rows * column + row``.
    """
    c, r = resolve_position(column, row)
    if value_of(grid, "row_major"):
        return grid.columns * r + c
    return grid.rows * c + r


def cell_position(
    grid: GridLike,
    index: int | Cell | Point,
    *,
    tolerance: float | None = None,
) -> Position:
    """Return the slot for a linear index, or locate a cell by its corner.

    Given a Cell (or Point), each axis is matched against the column/row
    edges; an axis without a match resolves to ``-1``. Matching is exact
    unless a tolerance is given or configured.
    """
    if isinstance(index, (Cell, Point)):
        return _position_for_corner(grid, index, tolerance)
    if not is_number(index):
        raise InvalidArgumentError(f"expected an index or a Cell, got {type(index).__name__}")
    if index == 0:
        return Position(column=0, row=0)
    if value_of(grid, "row_major"):
        row, column = divmod(index, grid.columns)
    else:
        column, row = divmod(index, grid.rows)
    return Position(column=column, row=row)


def _position_for_corner(grid: GridLike, corner: Cell | Point, tolerance: float | None) -> Position:
    if tolerance is None:
        tolerance = get_config().reverse_lookup_tolerance
    if tolerance < 0:
        raise ValueError("tolerance must be >= 0")
    column = -1
    row = -1
    for c in range(grid.columns):
        if abs(x_for_column(grid, c) - corner.x) <= tolerance:
            column = c
            break
    for r in range(grid.rows):
        if abs(y_for_row(grid, r) - corner.y) <= tolerance:
            row = r
            break
    return Position(column=column, row=row)
