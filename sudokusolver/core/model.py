from __future__ import annotations

from typing import List, Tuple

Cell = int
Digit = int
Mask = int

ROWS = "ABCDEFGHI"
COLS = "123456789"
DIGITS: Tuple[Digit, ...] = tuple(range(1, 10))

CELL_COUNT = 81

# Bit d-1 set means digit d is still a candidate.
ALL_DIGITS: Mask = (1 << 9) - 1


def cell_index(row: int, col: int) -> Cell:
    """Row-major index of the cell at (row, col), both 0-based."""
    return row * 9 + col


def cell_coords(cell: Cell) -> Tuple[int, int]:
    return divmod(cell, 9)


def cell_name(cell: Cell) -> str:
    """Human-readable name such as ``"A1"`` (row letter, column digit)."""
    row, col = divmod(cell, 9)
    return ROWS[row] + COLS[col]


CELL_NAMES: Tuple[str, ...] = tuple(cell_name(c) for c in range(CELL_COUNT))


def digit_bit(digit: Digit) -> Mask:
    return 1 << (digit - 1)


def mask_digits(mask: Mask) -> List[Digit]:
    """Digits present in ``mask``, ascending."""
    return [d for d in DIGITS if mask & (1 << (d - 1))]


def mask_count(mask: Mask) -> int:
    return bin(mask).count("1")


def single_digit(mask: Mask) -> Digit:
    """Return the digit of a one-candidate mask, or 0 for any other mask."""
    if mask and not mask & (mask - 1):
        return mask.bit_length()
    return 0
