"""Square type alias and coordinate helpers.

Board layout (two-digit row/file encoding):
    11, 12, ..., 18   row 1 (Black's back row, drawn at the top)
    21, 22, ..., 28   row 2
    ...
    81, 82, ..., 88   row 8 (White's back row, drawn at the bottom)

Units digits 0 and 9 act as gutters: stepping off either edge of a row lands on
an invalid value, so ray arithmetic never wraps onto the next row.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

Square: TypeAlias = int  # 11–88


def row_of(sq: Square) -> int:
    """Row 1–8 (tens digit)."""
    return sq // 10


def file_of(sq: Square) -> int:
    """File 1–8 (units digit)."""
    return sq % 10


def make_square(row: int, file: int) -> Square:
    """Create square from row (1–8) and file (1–8)."""
    return row * 10 + file


def is_valid_square(sq: int) -> bool:
    """Check whether integer names one of the 64 board squares."""
    return 1 <= sq // 10 <= 8 and 1 <= sq % 10 <= 8


def on_board(squares: Iterable[int]) -> tuple[Square, ...]:
    """Keep only valid squares, preserving order."""
    return tuple(sq for sq in squares if is_valid_square(sq))


ALL_SQUARES: tuple[Square, ...] = tuple(
    make_square(row, file) for row in range(1, 9) for file in range(1, 9)
)
