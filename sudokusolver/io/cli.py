"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from ..logging_utils import set_level
from ..solver import solve_grid
from . import parser
from .display import format_board


def _collect(inputs: List[str]) -> List[parser.Puzzle]:
    puzzles: List[parser.Puzzle] = []
    for i, item in enumerate(inputs, start=1):
        path = Path(item)
        if path.is_file():
            puzzles.extend(parser.load_puzzles(path))
        else:
            puzzles.append(parser.Puzzle(name=f"grid-{i}", grid=item))
    return puzzles


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Sudoku solver (propagation and search)")
    ap.add_argument(
        "inputs",
        nargs="+",
        help="81-character grid strings, or puzzle files (.yaml or one grid per line)",
    )
    ap.add_argument("--unique", action="store_true", help="Report puzzles with more than one solution")
    ap.add_argument("--candidates", action="store_true", help="Show the board after initial propagation")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG logging")
    args = ap.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG if args.verbose > 1 else logging.INFO)

    try:
        puzzles = _collect(args.inputs)
        for puz in puzzles:
            parser.grid_values(puz.grid)
    except parser.GridParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    failures = 0
    for puz in puzzles:
        unique = args.unique or bool(puz.options.get("unique", False))
        print(f"== {puz.name} ==")
        if args.candidates:
            board = parser.parse_grid(puz.grid)
            if board is not None:
                print(format_board(board))
                print()

        result = solve_grid(puz.grid, unique=unique)
        if result.status == "no-solution":
            failures += 1
            print(f"no solution: {result.message}")
            continue

        print(format_board(result.board))
        print(
            f"{result.message} ({result.duration_ms} ms, "
            f"{result.stats.nodes} node(s), {result.stats.branches} branch(es))"
        )
        if result.status == "multiple":
            failures += 1
        if puz.solution and puz.solution != result.grid:
            failures += 1
            print(f"mismatch: expected {puz.solution}")
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
