"""Grid-bound view over the layout functions."""

from __future__ import annotations

from dataclasses import dataclass

from gridcells import construction, mapping, queries, transforms
from gridcells.geometry import RectLike, contains
from gridcells.grid import CompleteGrid, GridLike, PositionLike, normalize
from gridcells.models import Cell, Point, Position


@dataclass(frozen=True, slots=True)
class GridView:
    """Layout and hit-testing helpers with the grid already applied."""

    grid: GridLike

    @property
    def normalized(self) -> CompleteGrid:
        return normalize(self.grid)  # type: ignore[return-value]

    @property
    def cell_size(self) -> tuple[float, float]:
        """Return ``(width, height)`` shared by every cell."""
        return mapping.cell_width(self.grid), mapping.cell_height(self.grid)

    def cell_width(self) -> float:
        return mapping.cell_width(self.grid)

    def cell_height(self) -> float:
        return mapping.cell_height(self.grid)

    def x_for_column(self, n: float) -> float:
        return mapping.x_for_column(self.grid, n)

    def y_for_row(self, n: float) -> float:
        return mapping.y_for_row(self.grid, n)

    def cell_index(self, column: int | PositionLike, row: int | None = None) -> int:
        return mapping.cell_index(self.grid, column, row)

    def cell_position(self, index: int | Cell | Point, *, tolerance: float | None = None) -> Position:
        return mapping.cell_position(self.grid, index, tolerance=tolerance)

    def cell_for_position(
        self, column: int | PositionLike, row: int | Cell | None = None, out: Cell | None = None
    ) -> Cell:
        return construction.cell_for_position(self.grid, column, row, out)

    def cell_for_index(self, index: int, out: Cell | None = None) -> Cell:
        return construction.cell_for_index(self.grid, index, out)

    def cell(self, index: int | PositionLike, out: Cell | None = None) -> Cell:
        return construction.cell(self.grid, index, out)

    def cells(self, out: list[Cell] | None = None) -> list[Cell]:
        return construction.cells(self.grid, out)

    def closest_cell_position(self, point: Point | Cell) -> Position:
        return queries.closest_cell_position(self.grid, point)

    def closest_cell(self, point: Point | Cell, out: Cell | None = None) -> Cell:
        return queries.closest_cell(self.grid, point, out)

    def closest_cell_index(self, point: Point | Cell) -> int:
        return queries.closest_cell_index(self.grid, point)

    def contains(self, point: Point | Cell) -> bool:
        """Return whether the point lies within the grid's outer extent."""
        return contains(self.grid, point)

    def intersects_cell_position(self, point: Point | Cell) -> Position | None:
        return queries.intersects_cell_position(self.grid, point)

    def intersects_cell(self, point: Point | Cell) -> Cell | None:
        return queries.intersects_cell(self.grid, point)

    def intersects_cell_index(self, point: Point | Cell) -> int | None:
        return queries.intersects_cell_index(self.grid, point)

    def cells_range(self, start: PositionLike, stop: PositionLike) -> list[Cell]:
        return queries.cells_range(self.grid, start, stop)

    def cells_merged(self, start: PositionLike, stop: PositionLike, out: Cell | None = None) -> Cell:
        return queries.cells_merged(self.grid, start, stop, out)

    def bounds(self, out: Cell | None = None) -> Cell:
        return queries.bounds(self.grid, out)

    def scale(self, scale_x: float, scale_y: float) -> GridView:
        return GridView(transforms.scale(self.grid, scale_x, scale_y))

    def shift_cells(
        self, cells: list[Cell], params: transforms.ShiftParams | None = None, **overrides: int | bool
    ) -> list[Cell]:
        return transforms.shift_cells(self.grid, cells, params, **overrides)

    def equals(self, other: RectLike | GridView) -> bool:
        target = other.grid if isinstance(other, GridView) else other
        return transforms.equals(self.grid, target)
