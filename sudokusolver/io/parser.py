from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..config import EMPTY_CHARS
from ..core.board import Board
from ..core.model import CELL_COUNT, CELL_NAMES, COLS
from ..core.propagation import assign
from ..core.topology import Topology, default_topology

GRID_CHARS = COLS + EMPTY_CHARS


class GridParseError(ValueError):
    """Raised for a grid string that is not 81 characters from ``1-9.0``."""


@dataclass
class Puzzle:
    name: str
    grid: str
    solution: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)


def grid_values(grid: str) -> Dict[str, str]:
    """Map every cell name to its character in ``grid``.

    Raises :class:`GridParseError` when the grid is malformed.
    """
    if not isinstance(grid, str):
        raise GridParseError(f"grid must be a string, got {type(grid).__name__}")
    if len(grid) != CELL_COUNT:
        raise GridParseError(f"grid must have {CELL_COUNT} characters, got {len(grid)}")
    for pos, ch in enumerate(grid):
        if ch not in GRID_CHARS:
            raise GridParseError(
                f"invalid character {ch!r} at position {pos} ({CELL_NAMES[pos]})"
            )
    return dict(zip(CELL_NAMES, grid))


def parse_grid(grid: str, topology: Optional[Topology] = None) -> Optional[Board]:
    """Build a propagated board from ``grid``.

    Every cell starts with all nine candidates and each given digit is placed
    with :func:`assign`. Returns ``None`` if the givens contradict each other.
    """
    values = grid_values(grid)
    board = Board.full(topology or default_topology())
    for cell, ch in enumerate(values.values()):
        if ch in EMPTY_CHARS:
            continue
        if assign(board, cell, int(ch)) is None:
            return None
    return board


def _clean(text: Any) -> str:
    return "".join(str(text).split())


def _yaml_puzzles(path: Path, text: str) -> List[Puzzle]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GridParseError(f"{path}: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, dict):
        raise GridParseError(f"{path}: expected a mapping with a 'puzzles' list")

    options = data.get("options") or {}
    entries = data.get("puzzles") or []
    if not isinstance(options, dict):
        raise GridParseError(f"{path}: 'options' must be a mapping")
    if not isinstance(entries, list):
        raise GridParseError(f"{path}: 'puzzles' must be a list")

    puzzles: List[Puzzle] = []
    for i, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise GridParseError(f"{path.stem}-{i}: puzzle entry must be a mapping")
        name = str(entry.get("name", f"{path.stem}-{i}"))
        if "grid" not in entry:
            raise GridParseError(f"{name}: missing 'grid'")
        solution = entry.get("solution")
        puzzles.append(
            Puzzle(
                name=name,
                grid=_clean(entry["grid"]),
                solution=_clean(solution) if solution else None,
                options=dict(options),
            )
        )
    return puzzles


def load_puzzles(path: str | Path) -> List[Puzzle]:
    """Load puzzles from a YAML collection or a text file with one grid per line.

    YAML files hold a ``puzzles`` list of ``{name, grid, solution}`` mappings
    and an optional ``options`` mapping shared by every puzzle. A file that
    cannot be read as puzzles raises :class:`GridParseError`.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    puzzles: List[Puzzle] = []
    if path.suffix.lower() in (".yaml", ".yml"):
        puzzles = _yaml_puzzles(path, text)
    else:
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            puzzles.append(Puzzle(name=f"{path.name}:{lineno}", grid=line))

    for puzzle in puzzles:
        try:
            grid_values(puzzle.grid)
        except GridParseError as exc:
            raise GridParseError(f"{puzzle.name}: {exc}") from exc
    return puzzles
