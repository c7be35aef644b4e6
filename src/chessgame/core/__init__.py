"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessgame.core import Board, Color, Rules

    board = Board.initial()
    for move in Rules.legal_moves(board, Color.WHITE):
        print(move)
"""

from chessgame.core.board import Board
from chessgame.core.check import king_in_check, simulate_move, would_king_be_in_check
from chessgame.core.enums import (
    PROMOTION_TYPES,
    Color,
    GameOutcome,
    MoveFlag,
    PieceType,
)
from chessgame.core.move import Move
from chessgame.core.movement import is_valid_move, pseudo_legal_destinations
from chessgame.core.piece import Piece
from chessgame.core.rules import Rules
from chessgame.core.snapshot import SnapshotError, board_from_snapshot, board_to_snapshot
from chessgame.core.types import BOARD_SIZE, Square, is_inside, square_name

__all__ = [
    # Enums / flags
    "Color",
    "GameOutcome",
    "MoveFlag",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_inside",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Rules",
    # Legality / safety
    "is_valid_move",
    "king_in_check",
    "pseudo_legal_destinations",
    "simulate_move",
    "would_king_be_in_check",
    # Persisted layout
    "SnapshotError",
    "board_from_snapshot",
    "board_to_snapshot",
]
