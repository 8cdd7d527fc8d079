"""Grid transforms: scaling, shifting cell collections and equality."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace

from gridcells.construction import cell_for_position
from gridcells.errors import InvalidArgumentError
from gridcells.geometry import RectLike
from gridcells.grid import Grid, GridLike, is_finite, is_grid, value_of
from gridcells.mapping import cell_position
from gridcells.models import Cell
from gridcells.ordering import grid_position_key

_LOG = logging.getLogger("gridcells.transforms")

_GRID_FIELDS: tuple[str, ...] = tuple(item.name for item in fields(Grid))
_SCALED_X_FIELDS: tuple[str, ...] = ("x", "padding_left", "padding_right")
_SCALED_Y_FIELDS: tuple[str, ...] = ("y", "padding_top", "padding_bottom")
_GEOMETRY_FIELDS: tuple[str, ...] = ("x", "y", "width", "height")
_LAYOUT_FIELDS: tuple[str, ...] = (
    "columns",
    "rows",
    "padding_left",
    "padding_right",
    "padding_top",
    "padding_bottom",
    "outer_padding",
    "row_major",
)


def scale(grid: GridLike, scale_x: float, scale_y: float, out: Grid | None = None) -> Grid:
    """Return the grid scaled per axis.

    Width and height are always scaled. Origin and paddings are scaled only
    when set on the input; unset fields stay unset in the result.
    """
    if out is None:
        target = Grid(columns=grid.columns, rows=grid.rows)
    else:
        target = out
    for name in _GRID_FIELDS:
        setattr(target, name, getattr(grid, name))
    target.width = value_of(grid, "width") * scale_x
    target.height = value_of(grid, "height") * scale_y
    for names, factor in ((_SCALED_X_FIELDS, scale_x), (_SCALED_Y_FIELDS, scale_y)):
        for name in names:
            value = getattr(grid, name)
            if is_finite(value):
                setattr(target, name, value * factor)
    return target


def equals(a: RectLike, b: RectLike) -> bool:
    """Return whether two cells or grids hold the same fields.

    Grids additionally compare their layout fields. Fields are compared as
    stored, so an unset grid field differs from one set to its default.
    """
    if any(getattr(a, name) != getattr(b, name) for name in _GEOMETRY_FIELDS):
        return False
    if not is_grid(a) or not is_grid(b):
        return True
    return all(getattr(a, name) == getattr(b, name) for name in _LAYOUT_FIELDS)


@dataclass(frozen=True, slots=True)
class ShiftParams:
    """How far to shift a cell collection and what to do at the edges."""

    columns: int = 0
    rows: int = 0
    wrap: bool = False
    sort: bool = True


def shift_cells(
    grid: GridLike,
    cells: list[Cell],
    params: ShiftParams | None = None,
    **overrides: int | bool,
) -> list[Cell]:
    """Move every cell of ``cells`` by a column/row delta, in place.

    Cells that land inside the grid are rewritten at their new slot. Cells
    pushed past an edge land at the wrapped slot: with ``wrap`` the same
    object is rewritten, otherwise it is removed and a new Cell is appended.
    With ``sort`` the list is restored to canonical grid order.
    """
    if params is None:
        params = ShiftParams(**overrides)  # type: ignore[arg-type]
    elif overrides:
        params = replace(params, **overrides)
    columns = grid.columns
    rows = grid.rows

    dropped: set[int] = set()
    added: list[Cell] = []
    moved = 0
    wrapped = 0
    for item in list(cells):
        column, row = _slot_of(grid, item)
        new_column = column + params.columns
        new_row = row + params.rows
        if 0 <= new_column < columns and 0 <= new_row < rows:
            cell_for_position(grid, new_column, new_row, out=item)
            moved += 1
            continue
        new_column %= columns
        new_row %= rows
        if params.wrap:
            cell_for_position(grid, new_column, new_row, out=item)
            wrapped += 1
            continue
        dropped.add(id(item))
        added.append(cell_for_position(grid, new_column, new_row))

    if dropped:
        cells[:] = [item for item in cells if id(item) not in dropped]
    cells.extend(added)
    if params.sort:
        cells.sort(key=grid_position_key)
    _LOG.debug(
        "shift_cells columns=%d rows=%d moved=%d wrapped=%d replaced=%d",
        params.columns,
        params.rows,
        moved,
        wrapped,
        len(added),
    )
    return cells


def _slot_of(grid: GridLike, item: Cell) -> tuple[int, int]:
    if item.column is not None and item.row is not None:
        return item.column, item.row
    position = cell_position(grid, item)
    if position.column < 0 or position.row < 0:
        raise InvalidArgumentError(f"cell at ({item.x}, {item.y}) is not aligned to the grid")
    return position.column, position.row
