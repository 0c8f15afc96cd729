"""Depth-first backtracking search with constraint propagation."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional

from ..logging_utils import get_logger
from .board import Board
from .model import Cell, cell_name
from .propagation import assign

logger = get_logger("search")


@dataclass
class SearchStats:
    """Counters filled in while searching."""
    nodes: int = 0
    branches: int = 0
    contradictions: int = 0


def select_branch_cell(board: Board) -> Optional[Cell]:
    """Open cell with the fewest candidates; the first in row-major order wins ties.

    Returns ``None`` when no cell is open.
    """
    best: Optional[Cell] = None
    best_count = 10
    for cell in board.open_cells():
        count = board.count(cell)
        if count < best_count:
            best, best_count = cell, count
            if count == 2:
                break
    return best


def iter_solutions(
    board: Optional[Board], stats: Optional[SearchStats] = None
) -> Iterator[Board]:
    """Yield every solved board reachable from ``board``.

    Candidate digits are tried in ascending order on an independent copy of
    the board, so ``board`` itself is never modified.
    """
    if stats is None:
        stats = SearchStats()
    stats.nodes += 1
    if board is None or board.has_contradiction():
        stats.contradictions += 1
        return
    if board.is_complete():
        yield board
        return

    cell = select_branch_cell(board)
    for digit in board.digits(cell):
        stats.branches += 1
        logger.debug("Guess: %s = %d", cell_name(cell), digit)
        child = assign(board.copy(), cell, digit)
        if child is None:
            stats.contradictions += 1
            logger.debug("Backtrack: %s != %d", cell_name(cell), digit)
            continue
        yield from iter_solutions(child, stats)


def search(
    board: Optional[Board], stats: Optional[SearchStats] = None
) -> Optional[Board]:
    """Return the first solved board found, or ``None`` if there is none."""
    return next(iter_solutions(board, stats), None)


def count_solutions(
    board: Optional[Board], limit: int, stats: Optional[SearchStats] = None
) -> int:
    """Count solutions of ``board``, stopping once ``limit`` are found."""
    return sum(1 for _ in islice(iter_solutions(board, stats), limit))
