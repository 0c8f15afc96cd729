"""Static structure of the 9x9 grid: units and peers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, List, Sequence, Tuple

from .model import CELL_COUNT, Cell, cell_index

Unit = Tuple[Cell, ...]


@dataclass(frozen=True)
class Topology:
    """Units of the grid and, per cell, the units and peers it belongs to.

    ``cell_peers`` is kept sorted so propagation visits peers in a stable
    order.
    """
    units: Tuple[Unit, ...]
    cell_units: Tuple[Tuple[Unit, ...], ...]
    cell_peers: Tuple[Tuple[Cell, ...], ...]

    @property
    def cells(self) -> range:
        return range(len(self.cell_units))

    def units_of(self, cell: Cell) -> Tuple[Unit, ...]:
        return self.cell_units[cell]

    def peers_of(self, cell: Cell) -> FrozenSet[Cell]:
        return frozenset(self.cell_peers[cell])


def _cross(rows: Sequence[int], cols: Sequence[int]) -> Unit:
    return tuple(cell_index(r, c) for r in rows for c in cols)


def build_topology() -> Topology:
    """Compute the 27 units of a standard grid and the peers of every cell."""
    digits = range(9)
    bands = (range(0, 3), range(3, 6), range(6, 9))

    units: List[Unit] = []
    units.extend(_cross(digits, (c,)) for c in digits)
    units.extend(_cross((r,), digits) for r in digits)
    units.extend(_cross(rs, cs) for rs in bands for cs in bands)

    cell_units = tuple(
        tuple(u for u in units if cell in u) for cell in range(CELL_COUNT)
    )
    cell_peers = tuple(
        tuple(sorted(set().union(*cell_units[cell]) - {cell}))
        for cell in range(CELL_COUNT)
    )
    return Topology(units=tuple(units), cell_units=cell_units, cell_peers=cell_peers)


@lru_cache(maxsize=None)
def default_topology() -> Topology:
    return build_topology()
