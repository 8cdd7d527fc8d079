"""Numpy exports of grid geometry for renderers."""

from __future__ import annotations

import numpy as np

from gridcells.grid import GridLike, value_of
from gridcells.mapping import cell_height, cell_width, x_for_column, y_for_row


def column_origins(grid: GridLike) -> np.ndarray:
    """Return the left edge of every column."""
    return np.array([x_for_column(grid, c) for c in range(grid.columns)], dtype=np.float64)


def row_origins(grid: GridLike) -> np.ndarray:
    """Return the top edge of every row."""
    return np.array([y_for_row(grid, r) for r in range(grid.rows)], dtype=np.float64)


def slot_indices(grid: GridLike) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(columns, rows)`` index arrays in linear-index order."""
    columns = np.arange(grid.columns)
    rows = np.arange(grid.rows)
    if value_of(grid, "row_major"):
        return np.tile(columns, grid.rows), np.repeat(rows, grid.columns)
    return np.repeat(columns, grid.rows), np.tile(rows, grid.columns)


def cell_rects(grid: GridLike) -> np.ndarray:
    """Return an ``(n, 4)`` array of ``x, y, width, height`` in ``cells()`` order."""
    column_idx, row_idx = slot_indices(grid)
    rects = np.empty((column_idx.size, 4), dtype=np.float64)
    rects[:, 0] = column_origins(grid)[column_idx]
    rects[:, 1] = row_origins(grid)[row_idx]
    rects[:, 2] = cell_width(grid)
    rects[:, 3] = cell_height(grid)
    return rects


def cell_centers(grid: GridLike) -> np.ndarray:
    """Return an ``(n, 2)`` array of cell centers in ``cells()`` order."""
    rects = cell_rects(grid)
    return rects[:, :2] + rects[:, 2:] / 2.0


def cell_outline_positions(grid: GridLike, *, z: float = 0.0) -> np.ndarray:
    """Build line-segment vertices outlining every cell.

    Each cell contributes four segments (eight vertices): top, right, bottom
    and left edges.
    """
    rects = cell_rects(grid)
    x0 = rects[:, 0]
    y0 = rects[:, 1]
    x1 = x0 + rects[:, 2]
    y1 = y0 + rects[:, 3]
    xs = np.stack([x0, x1, x1, x1, x1, x0, x0, x0], axis=1)
    ys = np.stack([y0, y0, y0, y1, y1, y1, y1, y0], axis=1)
    zs = np.full_like(xs, z)
    return np.stack([xs, ys, zs], axis=2).reshape(-1, 3).astype(np.float32)
