"""Canonical grid ordering for cell collections."""

from __future__ import annotations

from gridcells.models import Cell, Position


def sort_by_grid_position(a: Position | Cell, b: Position | Cell) -> int:
    """Compare two slots by row, then column."""
    if a.row < b.row or (a.row == b.row and a.column < b.column):
        return -1
    if a.row > b.row or (a.row == b.row and a.column > b.column):
        return 1
    return 0


def grid_position_key(item: Position | Cell) -> tuple[int, int]:
    """Sort key equivalent to ``sort_by_grid_position``."""
    return item.row, item.column
