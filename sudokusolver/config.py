"""Settings shared across the sudokusolver package."""

from __future__ import annotations

import os

# Logger level used when no handler has been configured yet.
LOG_LEVEL: str = os.environ.get("SUDOKU_LOG_LEVEL", "WARNING").upper()

# Solutions to look for when checking that a puzzle is unique.
UNIQUENESS_LIMIT: int = 2

# Characters that mark an empty cell in a grid string.
EMPTY_CHARS: str = ".0"
