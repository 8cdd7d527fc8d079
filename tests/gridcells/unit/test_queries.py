from __future__ import annotations

import pytest

from gridcells.construction import cells
from gridcells.errors import EmptySelectionError, InvalidArgumentError
from gridcells.geometry import (
    bottom_left,
    bottom_right,
    cells_intersect,
    center,
    contains,
    top_left,
    top_right,
)
from gridcells.grid import Grid
from gridcells.mapping import cell_index
from gridcells.models import Cell, Point, Position
from gridcells.queries import (
    bounds,
    cells_merged,
    cells_range,
    closest_cell,
    closest_cell_index,
    closest_cell_position,
    intersects_cell,
    intersects_cell_index,
    intersects_cell_position,
    is_in_range,
    num_cells_in_range,
)


def test_closest_cell_position() -> None:
    grid = Grid(columns=11, rows=5)
    assert closest_cell_position(grid, Point(0, 0)) == Position(column=0, row=0)
    assert closest_cell_position(grid, Point(0.5, 0.5)) == Position(column=5, row=2)
    assert closest_cell_position(grid, Point(2, 2)) == Position(
        column=grid.columns - 1, row=grid.rows - 1
    )


def test_closest_cell_prefers_lower_index_on_ties() -> None:
    grid = Grid(columns=2, rows=2, width=2, height=2)
    assert closest_cell_position(grid, Point(1, 1)) == Position(column=0, row=0)


def test_closest_cell_and_index() -> None:
    grid = Grid(columns=4, rows=4, width=40, height=40)
    found = closest_cell(grid, Point(-100, 25))
    assert (found.column, found.row, found.x, found.y) == (0, 2, 0, 20)
    assert closest_cell_index(grid, Point(-100, 25)) == 8
    assert closest_cell_index(Grid(columns=4, rows=4, row_major=False), Point(0, 0.6)) == 2


def test_contains_is_inclusive_and_intersection_is_strict() -> None:
    a = Cell(x=0, y=0, width=10, height=10)
    b = Cell(x=10, y=0, width=10, height=10)
    edge = Point(10, 5)
    assert not cells_intersect(a, b)
    assert contains(a, edge)
    assert contains(b, edge)
    assert cells_intersect(a, Cell(x=9.5, y=9.5, width=1, height=1))
    assert not contains(a, Point(10.01, 5))


def test_contains_on_grid_uses_defaults() -> None:
    grid = Grid(columns=3, rows=3)
    assert contains(grid, Point(1, 1))
    assert not contains(grid, Point(1.5, 0.5))


def test_intersects_cell_position() -> None:
    grid = Grid(columns=11, rows=5)
    assert intersects_cell_position(grid, Point(0, 0)) == Position(column=0, row=0)
    assert intersects_cell_position(grid, Point(0.5, 0.5)) == Position(column=5, row=2)
    assert intersects_cell_position(grid, Point(2, 2)) is None


def test_intersects_cell_position_at_shared_corner_picks_lowest_slot() -> None:
    grid = Grid(columns=4, rows=4, width=4, height=4)
    assert intersects_cell_position(grid, Point(2, 2)) == Position(column=1, row=1)


def test_intersects_cell_and_index_on_grid() -> None:
    grid = Grid(columns=11, rows=5)
    hit = intersects_cell(grid, Point(0.5, 0.5))
    assert hit is not None
    assert (hit.column, hit.row) == (5, 2)
    assert intersects_cell_index(grid, Point(0.5, 0.5)) == cell_index(grid, 5, 2)
    assert intersects_cell(grid, Point(-1, 0)) is None
    assert intersects_cell_index(grid, Point(-1, 0)) is None


def test_intersects_cell_on_cell_sequence() -> None:
    grid = Grid(columns=11, rows=5)
    generated = cells(grid)
    assert intersects_cell_index(generated, Point(0.5, 0.5)) == 27
    assert intersects_cell(generated, Point(0.5, 0.5)) is generated[27]
    assert intersects_cell(generated, Point(3, 3)) is None
    assert intersects_cell_index([], Point(0, 0)) is None


def test_intersects_cell_rejects_unknown_shape() -> None:
    with pytest.raises(InvalidArgumentError):
        intersects_cell("grid", Point(0, 0))  # type: ignore[arg-type]


def test_cells_range_normalizes_corners() -> None:
    grid = Grid(columns=4, rows=4)
    forward = cells_range(grid, Position(0, 0), Position(2, 2))
    backward = cells_range(grid, Position(2, 2), Position(0, 0))
    crossed = cells_range(grid, Position(2, 0), Position(0, 2))
    assert len(forward) == 9
    assert forward == backward == crossed


@pytest.mark.parametrize("row_major", [True, False])
def test_cells_range_order_follows_major(row_major: bool) -> None:
    grid = Grid(columns=4, rows=4, row_major=row_major)
    selected = [item.position for item in cells_range(grid, Position(1, 1), Position(2, 2))]
    if row_major:
        assert selected == [Position(1, 1), Position(2, 1), Position(1, 2), Position(2, 2)]
    else:
        assert selected == [Position(1, 1), Position(1, 2), Position(2, 1), Position(2, 2)]


@pytest.mark.parametrize(
    ("a", "b"),
    [
        (Position(0, 0), Position(0, 0)),
        (Position(0, 0), Position(3, 4)),
        (Position(3, 4), Position(0, 0)),
        (Position(5, 1), Position(2, 3)),
        (Position(1, 6), Position(1, 0)),
    ],
)
def test_cells_range_length_matches_count(a: Position, b: Position) -> None:
    grid = Grid(columns=8, rows=8)
    assert len(cells_range(grid, a, b)) == num_cells_in_range(a, b)


def test_is_in_range_is_inclusive_and_order_free() -> None:
    a = Position(3, 1)
    b = Position(1, 4)
    assert is_in_range(Position(1, 1), a, b)
    assert is_in_range(Position(3, 4), a, b)
    assert is_in_range(Cell(column=2, row=2), a, b)
    assert not is_in_range(Position(0, 2), a, b)
    assert not is_in_range(Position(2, 5), a, b)


def test_cells_range_requires_positions() -> None:
    with pytest.raises(InvalidArgumentError):
        cells_range(Grid(columns=2, rows=2), 0, 1)  # type: ignore[arg-type]


def test_bounds_of_cells_and_grid_reuse_output() -> None:
    grid = Grid(columns=4, rows=4)
    buffer = Cell()
    selected = cells_range(grid, Position(0, 0), Position(2, 2))
    result = bounds(selected, buffer)
    assert result is buffer
    assert (result.x, result.y, result.width, result.height) == (0, 0, 0.75, 0.75)

    result = bounds(grid, buffer)
    assert result is buffer
    assert (result.x, result.y, result.width, result.height) == (0, 0, 1, 1)


def test_bounds_of_grid_respects_outer_padding() -> None:
    layout = {
        "columns": 2,
        "rows": 2,
        "x": 10,
        "y": 20,
        "width": 100,
        "height": 50,
        "padding_left": 5,
        "padding_right": 5,
        "padding_top": 2,
        "padding_bottom": 3,
    }
    padded = bounds(Grid(**layout))
    assert (padded.x, padded.y, padded.width, padded.height) == (15, 22, 90, 45)
    interior = bounds(Grid(**layout, outer_padding=False))
    assert (interior.x, interior.y, interior.width, interior.height) == (10, 20, 100, 50)


def test_bounds_handles_negative_coordinates() -> None:
    result = bounds([Cell(x=-5, y=-5, width=2, height=2), Cell(x=-1, y=-8, width=1, height=1)])
    assert (result.x, result.y, result.width, result.height) == (-5, -8, 5, 5)


def test_bounds_of_empty_collection_fails() -> None:
    with pytest.raises(EmptySelectionError):
        bounds([])
    with pytest.raises(EmptySelectionError):
        cells_merged(())


def test_cells_merged_for_grid_corners_and_sequence() -> None:
    grid = Grid(columns=4, rows=4)
    merged = cells_merged(grid, Position(1, 1), Position(2, 3))
    assert (merged.x, merged.y, merged.width, merged.height) == (0.25, 0.25, 0.5, 0.75)
    assert cells_merged(cells_range(grid, Position(1, 1), Position(2, 3))) == merged
    with pytest.raises(InvalidArgumentError):
        cells_merged(grid, Position(1, 1))


def test_corner_helpers_on_cells_and_grids() -> None:
    item = Cell(x=2, y=3, width=4, height=6)
    assert top_left(item) == Point(2, 3)
    assert top_right(item) == Point(6, 3)
    assert bottom_left(item) == Point(2, 9)
    assert bottom_right(item) == Point(6, 9)
    assert center(item) == Point(4, 6)
    grid = Grid(columns=3, rows=3, x=10)
    assert top_left(grid) == Point(10, 0)
    assert bottom_right(grid) == Point(11, 1)
    assert center(grid) == Point(10.5, 0.5)
