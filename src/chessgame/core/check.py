"""King safety: attack detection on real and hypothetical boards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgame.core.enums import Color
from chessgame.core.movement import is_valid_move

if TYPE_CHECKING:
    from chessgame.core.board import Board
    from chessgame.core.move import Move


def king_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked?

    A board without that king counts as check: the king has already been
    captured, which must never look like a safe position.
    """
    king_sq = board.find_king(color)
    if king_sq is None:
        return True
    for sq, piece in board.pieces(color.opposite):
        if is_valid_move(piece, sq, king_sq, board):
            return True
    return False


def would_king_be_in_check(hypothetical_board: Board, color: Color) -> bool:
    """:func:`king_in_check` on a snapshot built for a not-yet-committed move."""
    return king_in_check(hypothetical_board, color)


def simulate_move(board: Board, move: Move) -> Board:
    """Copy of *board* with *move* applied; *board* itself is left untouched."""
    simulation = board.clone()
    simulation.make_move(move)
    return simulation
