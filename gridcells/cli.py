"""Command-line access to grid layout queries."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from typing import Any, TextIO

from gridcells.construction import cell, cell_for_position, cells
from gridcells.errors import GridError
from gridcells.grid import Grid
from gridcells.logging import get_logger, setup_logging
from gridcells.models import Cell, Point, Position
from gridcells.queries import bounds, closest_cell

_LOG = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridcells",
        description="Uniform grid layout queries.",
        allow_abbrev=False,
    )
    grid = parser.add_argument_group("grid")
    grid.add_argument("--columns", type=int, required=True, help="Number of columns.")
    grid.add_argument("--rows", type=int, required=True, help="Number of rows.")
    grid.add_argument("--x", type=float, default=None, help="Grid origin x.")
    grid.add_argument("--y", type=float, default=None, help="Grid origin y.")
    grid.add_argument("--width", type=float, default=None, help="Grid width.")
    grid.add_argument("--height", type=float, default=None, help="Grid height.")
    grid.add_argument("--padding-left", type=float, default=None)
    grid.add_argument("--padding-right", type=float, default=None)
    grid.add_argument("--padding-top", type=float, default=None)
    grid.add_argument("--padding-bottom", type=float, default=None)
    grid.add_argument(
        "--no-outer-padding",
        action="store_true",
        help="Only pad between cells, not around the grid edge.",
    )
    grid.add_argument(
        "--column-major",
        action="store_true",
        help="Number and enumerate cells column by column.",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    cells_cmd = commands.add_parser("cells", help="Print every cell.")
    cells_cmd.add_argument(
        "--format",
        choices=("jsonl", "json"),
        default="jsonl",
        help="One JSON object per line, or a single JSON array.",
    )
    cell_cmd = commands.add_parser("cell", help="Print one cell.")
    cell_cmd.add_argument("--index", type=int, default=None, help="Linear cell index.")
    cell_cmd.add_argument("--column", type=int, default=None)
    cell_cmd.add_argument("--row", type=int, default=None)
    closest_cmd = commands.add_parser("closest", help="Print the cell closest to a point.")
    closest_cmd.add_argument("--px", type=float, required=True, help="Point x.")
    closest_cmd.add_argument("--py", type=float, required=True, help="Point y.")
    commands.add_parser("bounds", help="Print the grid's outer bounds.")
    return parser


def grid_from_args(args: argparse.Namespace) -> Grid:
    """Build a Grid from parsed command-line options."""
    return Grid(
        columns=args.columns,
        rows=args.rows,
        x=args.x,
        y=args.y,
        width=args.width,
        height=args.height,
        padding_left=args.padding_left,
        padding_right=args.padding_right,
        padding_top=args.padding_top,
        padding_bottom=args.padding_bottom,
        outer_padding=False if args.no_outer_padding else None,
        row_major=False if args.column_major else None,
    )


def _cell_payload(item: Cell) -> dict[str, Any]:
    return {key: value for key, value in asdict(item).items() if value is not None}


def run(args: argparse.Namespace, stream: TextIO) -> int:
    grid = grid_from_args(args)
    _LOG.debug("cli_command command=%s grid=%s", args.command, grid.to_mapping())
    if args.command == "cells":
        payloads = [_cell_payload(item) for item in cells(grid)]
        if args.format == "json":
            stream.write(json.dumps(payloads) + "\n")
        else:
            for payload in payloads:
                stream.write(json.dumps(payload) + "\n")
        return 0
    if args.command == "cell":
        if args.index is not None:
            result = cell(grid, args.index)
        elif args.column is not None and args.row is not None:
            result = cell_for_position(grid, Position(column=args.column, row=args.row))
        else:
            raise GridError("cell requires --index or both --column and --row")
        stream.write(json.dumps(_cell_payload(result)) + "\n")
        return 0
    if args.command == "closest":
        result = closest_cell(grid, Point(args.px, args.py))
        stream.write(json.dumps(_cell_payload(result)) + "\n")
        return 0
    stream.write(json.dumps(_cell_payload(bounds(grid))) + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        return run(args, sys.stdout)
    except GridError as exc:
        _LOG.debug("cli_rejected command=%s", args.command, exc_info=True)
        print(f"gridcells: error: {exc}", file=sys.stderr)
        return 2
