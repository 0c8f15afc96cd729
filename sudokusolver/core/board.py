from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .model import (
    ALL_DIGITS,
    CELL_NAMES,
    Cell,
    Digit,
    Mask,
    mask_count,
    mask_digits,
    single_digit,
)
from .topology import Topology


@dataclass
class Board:
    """Candidate digits of every cell, one 9-bit mask per cell index.

    Boards are mutated in place by propagation; take a :meth:`copy` before
    trying anything that may have to be undone.
    """
    topology: Topology
    candidates: List[Mask]

    @classmethod
    def full(cls, topology: Topology) -> "Board":
        """Board where every digit is still possible in every cell."""
        return cls(topology, [ALL_DIGITS] * len(topology.cells))

    def copy(self) -> "Board":
        return Board(self.topology, list(self.candidates))

    def digits(self, cell: Cell) -> List[Digit]:
        return mask_digits(self.candidates[cell])

    def count(self, cell: Cell) -> int:
        return mask_count(self.candidates[cell])

    def value(self, cell: Cell) -> Digit:
        """Assigned digit of ``cell``, or 0 while it is still open."""
        return single_digit(self.candidates[cell])

    def open_cells(self) -> List[Cell]:
        return [c for c, mask in enumerate(self.candidates) if mask_count(mask) > 1]

    def has_contradiction(self) -> bool:
        return not all(self.candidates)

    def is_complete(self) -> bool:
        """True when every cell holds exactly one candidate."""
        return all(single_digit(mask) for mask in self.candidates)

    def solution(self) -> Dict[str, Digit]:
        if not self.is_complete():
            raise ValueError("board is not fully assigned")
        return {CELL_NAMES[c]: single_digit(m) for c, m in enumerate(self.candidates)}

    def candidate_strings(self) -> Dict[str, str]:
        return {
            CELL_NAMES[c]: "".join(str(d) for d in mask_digits(m))
            for c, m in enumerate(self.candidates)
        }

    def to_string(self) -> str:
        """81-character grid with ``.`` for cells that are not assigned."""
        return "".join(str(single_digit(m) or ".") for m in self.candidates)
