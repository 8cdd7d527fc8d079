"""Value records shared by every grid operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Location in continuous 2D space."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based column/row coordinate inside a grid."""

    column: int
    row: int


@dataclass(slots=True)
class Cell:
    """Axis-aligned rectangle, optionally tagged with its grid slot.

    Cells are mutable so callers can hand one to a query as an output buffer
    and reuse it across calls. A buffer belongs to the call it is passed to
    until that call returns.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    column: int | None = None
    row: int | None = None

    @property
    def position(self) -> Position | None:
        """Return the grid slot this cell was built for, if known."""
        if self.column is None or self.row is None:
            return None
        return Position(column=self.column, row=self.row)
