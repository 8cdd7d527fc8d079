"""Grid specification records, defaults and argument-shape guards."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from numbers import Integral, Real
from typing import TypeAlias

from gridcells.errors import GridSpecError, InvalidArgumentError, log_rejected
from gridcells.models import Cell, Position

_LOG = logging.getLogger("gridcells.grid")

_NUMERIC_FIELDS: tuple[str, ...] = (
    "x",
    "y",
    "width",
    "height",
    "padding_left",
    "padding_right",
    "padding_top",
    "padding_bottom",
)
_FLAG_FIELDS: tuple[str, ...] = ("outer_padding", "row_major")

# Only columns/rows are required; NaN marks them as having no default.
GRID_DEFAULTS: Mapping[str, float | bool] = {
    "columns": math.nan,
    "rows": math.nan,
    "x": 0,
    "y": 0,
    "width": 1,
    "height": 1,
    "padding_left": 0,
    "padding_right": 0,
    "padding_top": 0,
    "padding_bottom": 0,
    "outer_padding": True,
    "row_major": True,
}

_CAMEL_ALIASES: Mapping[str, str] = {
    "paddingLeft": "padding_left",
    "paddingRight": "padding_right",
    "paddingTop": "padding_top",
    "paddingBottom": "padding_bottom",
    "outerPadding": "outer_padding",
    "rowMajor": "row_major",
}
_SNAKE_TO_CAMEL: Mapping[str, str] = {snake: camel for camel, snake in _CAMEL_ALIASES.items()}


@dataclass(slots=True)
class Grid:
    """Uniform grid layout specification.

    ``None`` marks a field as unset; unset fields resolve to ``GRID_DEFAULTS``
    whenever geometry is computed. Queries never mutate a Grid they are given.
    """

    columns: int
    rows: int
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    padding_left: float | None = None
    padding_right: float | None = None
    padding_top: float | None = None
    padding_bottom: float | None = None
    outer_padding: bool | None = None
    row_major: bool | None = None

    def __post_init__(self) -> None:
        validate_grid(self)

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> Grid:
        """Build a grid from snake_case or camelCase keys."""
        known = {item.name for item in fields(cls)}
        kwargs: dict[str, object] = {}
        for key, value in values.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                log_rejected(_LOG, "grid_spec_unknown_field", field=key)
                raise GridSpecError(f"unknown grid field: {key!r}")
            kwargs[name] = value
        for required in ("columns", "rows"):
            if required not in kwargs:
                log_rejected(_LOG, "grid_spec_missing_field", field=required)
                raise GridSpecError(f"grid requires {required!r}")
        return cls(**kwargs)  # type: ignore[arg-type]

    def to_mapping(self) -> dict[str, object]:
        """Return the set fields keyed by their camelCase names."""
        payload: dict[str, object] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            payload[_SNAKE_TO_CAMEL.get(item.name, item.name)] = value
        return payload


@dataclass(frozen=True, slots=True)
class CompleteGrid:
    """Grid with every field resolved."""

    columns: int
    rows: int
    x: float
    y: float
    width: float
    height: float
    padding_left: float
    padding_right: float
    padding_top: float
    padding_bottom: float
    outer_padding: bool
    row_major: bool


GridLike: TypeAlias = Grid | CompleteGrid
PositionLike: TypeAlias = Position | Cell


def is_number(value: object) -> bool:
    """Return whether a value is a real number (booleans excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_finite(value: object) -> bool:
    """Return whether a value is a finite real number."""
    return is_number(value) and math.isfinite(value)  # type: ignore[arg-type]


def is_grid(value: object) -> bool:
    """Return whether a value is a grid specification."""
    return isinstance(value, (Grid, CompleteGrid))


def is_position(value: object) -> bool:
    """Return whether a value identifies a grid slot.

    Cells built by this package carry their column/row and qualify too.
    """
    if isinstance(value, Position):
        return True
    return isinstance(value, Cell) and value.column is not None and value.row is not None


def as_position(value: object) -> Position:
    """Return a Position for a Position-shaped argument."""
    if isinstance(value, Position):
        return value
    if is_position(value):
        return Position(column=value.column, row=value.row)  # type: ignore[union-attr]
    raise InvalidArgumentError(f"expected a Position, got {type(value).__name__}")


def resolve_position(column_or_position: object, row: object = None) -> tuple[int, int]:
    """Resolve the ``(column, row)`` / ``(Position,)`` argument overloads."""
    if is_position(column_or_position):
        if row is not None:
            raise InvalidArgumentError("row must be omitted when a Position is given")
        position = as_position(column_or_position)
        return position.column, position.row
    if is_number(column_or_position) and is_number(row):
        return column_or_position, row  # type: ignore[return-value]
    raise InvalidArgumentError(
        "expected (column, row) numbers or a Position, "
        f"got ({type(column_or_position).__name__}, {type(row).__name__})"
    )


def validate_grid(grid: object) -> None:
    """Raise GridSpecError unless the grid describes a usable layout."""
    for name in ("columns", "rows"):
        value = getattr(grid, name, None)
        if not isinstance(value, Integral) or isinstance(value, bool):
            log_rejected(_LOG, "grid_spec_invalid_count", field=name, value=value)
            raise GridSpecError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            log_rejected(_LOG, "grid_spec_invalid_count", field=name, value=value)
            raise GridSpecError(f"{name} must be > 0, got {value!r}")
    for name in _NUMERIC_FIELDS:
        value = getattr(grid, name, None)
        if value is None:
            continue
        if not is_finite(value):
            log_rejected(_LOG, "grid_spec_invalid_number", field=name, value=value)
            raise GridSpecError(f"{name} must be a finite number, got {value!r}")
    for name in _FLAG_FIELDS:
        value = getattr(grid, name, None)
        if value is not None and not isinstance(value, bool):
            log_rejected(_LOG, "grid_spec_invalid_flag", field=name, value=value)
            raise GridSpecError(f"{name} must be a bool, got {value!r}")


def value_of(obj: object, name: str) -> float | bool:
    """Return the resolved value of one grid/cell property.

    Booleans and finite numbers count as set; anything else, including
    ``None`` and NaN, falls back to the default table.
    """
    value = getattr(obj, name, None)
    if isinstance(value, bool) or is_finite(value):
        return value  # type: ignore[return-value]
    return GRID_DEFAULTS[name]


def normalize(grid: GridLike, out: Grid | None = None) -> GridLike:
    """Return the grid with every field resolved.

    Defaults only fill unset fields. When ``out`` is given it is filled in
    place and returned instead of allocating a CompleteGrid.
    """
    validate_grid(grid)
    resolved = {name: value_of(grid, name) for name in GRID_DEFAULTS}
    if out is None:
        return CompleteGrid(**resolved)  # type: ignore[arg-type]
    for name, value in resolved.items():
        setattr(out, name, value)
    return out
