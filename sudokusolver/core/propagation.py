"""Constraint propagation over a :class:`Board`.

``assign`` and ``eliminate`` call each other until the board reaches a fixed
point. Both mutate the board they are given and return it, or return ``None``
when the board turns out to have no valid completion (a contradiction).
Contradictions are expected during search and are never raised.
"""

from __future__ import annotations

from typing import Optional

from .board import Board
from .model import Cell, Digit, digit_bit, mask_digits, single_digit


def assign(board: Board, cell: Cell, digit: Digit) -> Optional[Board]:
    """Force ``cell`` to ``digit`` by eliminating every other candidate."""
    others = board.candidates[cell] & ~digit_bit(digit)
    for other in mask_digits(others):
        if eliminate(board, cell, other) is None:
            return None
    return board


def eliminate(board: Board, cell: Cell, digit: Digit) -> Optional[Board]:
    """Remove ``digit`` from ``cell`` and propagate the consequences.

    1. A cell left with a single candidate removes that candidate from all of
       its peers.
    2. A unit left with a single place for ``digit`` gets ``digit`` assigned
       there.
    """
    candidates = board.candidates
    bit = digit_bit(digit)
    if not candidates[cell] & bit:
        return board

    candidates[cell] &= ~bit
    remaining = candidates[cell]
    if not remaining:
        return None

    last = single_digit(remaining)
    if last:
        for peer in board.topology.cell_peers[cell]:
            if eliminate(board, peer, last) is None:
                return None

    for unit in board.topology.cell_units[cell]:
        places = [c for c in unit if candidates[c] & bit]
        if not places:
            return None
        if len(places) == 1 and assign(board, places[0], digit) is None:
            return None
    return board
