from __future__ import annotations

from functools import cmp_to_key

from gridcells.models import Cell, Position
from gridcells.ordering import grid_position_key, sort_by_grid_position


def test_sort_by_grid_position_orders_row_first() -> None:
    assert sort_by_grid_position(Position(3, 0), Position(0, 1)) == -1
    assert sort_by_grid_position(Position(0, 1), Position(3, 0)) == 1
    assert sort_by_grid_position(Position(1, 2), Position(2, 2)) == -1
    assert sort_by_grid_position(Position(2, 2), Position(1, 2)) == 1
    assert sort_by_grid_position(Position(2, 2), Cell(column=2, row=2)) == 0


def test_comparator_and_key_agree() -> None:
    items = [Position(2, 1), Position(0, 2), Position(1, 0), Position(0, 1), Position(2, 0)]
    by_comparator = sorted(items, key=cmp_to_key(sort_by_grid_position))
    by_key = sorted(items, key=grid_position_key)
    assert by_comparator == by_key
    assert by_key == [Position(1, 0), Position(2, 0), Position(0, 1), Position(2, 1), Position(0, 2)]
