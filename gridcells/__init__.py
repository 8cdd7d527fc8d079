"""Geometry and layout helpers for uniform 2D grids."""

from gridcells.construction import cell, cell_for_index, cell_for_position, cells, iter_positions
from gridcells.errors import EmptySelectionError, GridError, GridSpecError, InvalidArgumentError
from gridcells.geometry import (
    bottom_left,
    bottom_right,
    cells_intersect,
    center,
    contains,
    top_left,
    top_right,
)
from gridcells.grid import (
    GRID_DEFAULTS,
    CompleteGrid,
    Grid,
    is_grid,
    is_position,
    normalize,
    value_of,
)
from gridcells.mapping import (
    cell_height,
    cell_index,
    cell_position,
    cell_width,
    x_for_column,
    y_for_row,
)
from gridcells.models import Cell, Point, Position
from gridcells.ordering import grid_position_key, sort_by_grid_position
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
from gridcells.transforms import ShiftParams, equals, scale, shift_cells
from gridcells.view import GridView

__all__ = [
    "Cell",
    "CompleteGrid",
    "EmptySelectionError",
    "GRID_DEFAULTS",
    "Grid",
    "GridError",
    "GridSpecError",
    "GridView",
    "InvalidArgumentError",
    "Point",
    "Position",
    "ShiftParams",
    "bottom_left",
    "bottom_right",
    "bounds",
    "cell",
    "cell_for_index",
    "cell_for_position",
    "cell_height",
    "cell_index",
    "cell_position",
    "cell_width",
    "cells",
    "cells_intersect",
    "cells_merged",
    "cells_range",
    "center",
    "closest_cell",
    "closest_cell_index",
    "closest_cell_position",
    "contains",
    "equals",
    "grid_position_key",
    "intersects_cell",
    "intersects_cell_index",
    "intersects_cell_position",
    "is_grid",
    "is_in_range",
    "is_position",
    "iter_positions",
    "normalize",
    "num_cells_in_range",
    "scale",
    "shift_cells",
    "sort_by_grid_position",
    "top_left",
    "top_right",
    "value_of",
    "x_for_column",
    "y_for_row",
]
