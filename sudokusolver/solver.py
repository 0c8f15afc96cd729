"""End-to-end solving of a single grid string."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from .config import UNIQUENESS_LIMIT
from .core.board import Board
from .core.constraints import is_solution
from .core.csp import SearchStats, iter_solutions
from .io.parser import parse_grid
from .logging_utils import get_logger

logger = get_logger("solver")


@dataclass
class SolveResult:
    status: str
    solution: Optional[Dict[str, int]]
    duration_ms: int
    solutions_found: int = 0
    message: str = ""
    grid: str = ""
    board: Optional[Board] = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def solved(self) -> bool:
        return self.status == "solved"


def solve_grid(grid: str, unique: bool = False) -> SolveResult:
    """Parse ``grid`` and search for a solution.

    With ``unique`` the search continues past the first solution to tell
    whether another one exists. :class:`~sudokusolver.io.parser.GridParseError`
    propagates for malformed input.
    """
    start = time.time()
    logger.info("solve start: %s", grid)
    board = parse_grid(grid)
    stats = SearchStats()

    limit = UNIQUENESS_LIMIT if unique else 1
    solutions = []
    for solved in iter_solutions(board, stats):
        if not is_solution(solved):
            raise RuntimeError(f"search returned an invalid grid: {solved.to_string()}")
        solutions.append(solved)
        if len(solutions) >= limit:
            break

    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        "solve end in %d ms; %d node(s), %d branch(es), %d solution(s)",
        duration_ms, stats.nodes, stats.branches, len(solutions),
    )

    if not solutions:
        message = (
            "Contradiction in givens." if board is None else "No solution found."
        )
        return SolveResult(
            status="no-solution",
            solution=None,
            duration_ms=duration_ms,
            message=message,
            stats=stats,
        )
    first = solutions[0]
    if len(solutions) > 1:
        return SolveResult(
            status="multiple",
            solution=first.solution(),
            duration_ms=duration_ms,
            solutions_found=len(solutions),
            message="Multiple solutions exist.",
            grid=first.to_string(),
            board=first,
            stats=stats,
        )
    return SolveResult(
        status="solved",
        solution=first.solution(),
        duration_ms=duration_ms,
        solutions_found=1,
        message="Solved successfully.",
        grid=first.to_string(),
        board=first,
        stats=stats,
    )
