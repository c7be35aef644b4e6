"""Square type alias and coordinate helpers.

Board layout (row, column), both 0-based:
    row 0 is White's back rank, row 7 is Black's back rank.
    column 0 is the file of the rooks that start on the queen's side
    of this layout (the king starts on column 3, the queen on column 4).
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, column)

BOARD_SIZE = 8


def is_inside(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Compact display name, e.g. ``(0, 3)`` → ``'r0c3'``."""
    row, col = sq
    return f"r{row}c{col}"


def all_squares() -> list[Square]:
    """Every square in row-major order."""
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


def is_light_square(sq: Square) -> bool:
    row, col = sq
    return (row + col) % 2 == 1
