"""Checks of the unit rule on assigned cells."""

from __future__ import annotations

from typing import List, Tuple

from .board import Board
from .model import Digit
from .topology import Unit


def unit_conflicts(board: Board) -> List[Tuple[Unit, Digit]]:
    """Return (unit, digit) pairs where ``digit`` is assigned more than once."""
    conflicts = []
    for unit in board.topology.units:
        seen = set()
        for cell in unit:
            value = board.value(cell)
            if not value:
                continue
            if value in seen:
                conflicts.append((unit, value))
            seen.add(value)
    return conflicts


def is_solution(board: Board) -> bool:
    """True when every cell is assigned and no unit repeats a digit."""
    return board.is_complete() and not unit_conflicts(board)
