"""Console rendering of boards."""

from __future__ import annotations

from ..core.board import Board
from ..core.model import COLS, ROWS


def format_board(board: Board) -> str:
    """Render ``board`` as a 9x9 grid of candidate strings.

    Open cells show all of their remaining digits, so partially solved boards
    render as well. The board is not modified.
    """
    values = board.candidate_strings()
    width = 1 + max(len(v) for v in values.values())
    rule = "+".join(["-" * (width * 3)] * 3)

    lines = []
    for r in ROWS:
        line = ""
        for c in COLS:
            line += values[r + c].center(width)
            if c in "36":
                line += "|"
        lines.append(line)
        if r in "CF":
            lines.append(rule)
    return "\n".join(lines)
