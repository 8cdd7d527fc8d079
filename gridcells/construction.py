"""Cell construction and whole-grid enumeration."""

from __future__ import annotations

from collections.abc import Iterator

from gridcells.errors import InvalidArgumentError
from gridcells.grid import GridLike, as_position, is_number, is_position, resolve_position, value_of
from gridcells.mapping import cell_height, cell_position, cell_width, x_for_column, y_for_row
from gridcells.models import Cell, Position


def cell_for_position(
    grid: GridLike,
    column: int | Position | Cell,
    row: int | Cell | None = None,
    out: Cell | None = None,
) -> Cell:
    """Return the rectangle for one grid slot.

    Accepts ``(column, row)`` or a Position. With a Position, a Cell passed
    in the ``row`` slot is taken as the output buffer. When ``out`` is given
    it is overwritten and returned instead of allocating a new Cell.
    """
    if is_position(column) and isinstance(row, Cell):
        if out is not None:
            raise InvalidArgumentError("output cell given twice")
        out = row
        row = None
    c, r = resolve_position(column, row)
    target = out if out is not None else Cell()
    target.x = x_for_column(grid, c)
    target.y = y_for_row(grid, r)
    target.width = cell_width(grid)
    target.height = cell_height(grid)
    target.column = c
    target.row = r
    return target


def cell_for_index(grid: GridLike, index: int, out: Cell | None = None) -> Cell:
    """Return the rectangle for the slot at a linear index."""
    return cell_for_position(grid, cell_position(grid, index), out=out)


def cell(grid: GridLike, index: int | Position | Cell, out: Cell | None = None) -> Cell:
    """Return the rectangle for a slot given by index or Position."""
    if is_position(index):
        return cell_for_position(grid, as_position(index), out=out)
    if is_number(index):
        return cell_for_index(grid, index, out=out)  # type: ignore[arg-type]
    raise InvalidArgumentError(f"expected an index or a Position, got {type(index).__name__}")


def iter_positions(grid: GridLike) -> Iterator[tuple[int, int]]:
    """Yield ``(column, row)`` for every slot in linear-index order."""
    if value_of(grid, "row_major"):
        for r in range(grid.rows):
            for c in range(grid.columns):
                yield c, r
        return
    for c in range(grid.columns):
        for r in range(grid.rows):
            yield c, r


def cells(grid: GridLike, out: list[Cell] | None = None) -> list[Cell]:
    """Return one Cell per slot, ordered by linear index.

    A reused ``out`` list is truncated first so that cells left over from a
    larger grid do not survive.
    """
    result = out if out is not None else []
    del result[grid.columns * grid.rows :]
    for i, (c, r) in enumerate(iter_positions(grid)):
        item = cell_for_position(grid, c, r)
        if i < len(result):
            result[i] = item
        else:
            result.append(item)
    return result
