"""High-level chess rules: legal moves, checkmate, stalemate, draw detection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessgame.core.check import king_in_check, simulate_move, would_king_be_in_check
from chessgame.core.enums import Color, GameOutcome, MoveFlag, PieceType
from chessgame.core.move import Move
from chessgame.core.movement import is_valid_move, pawn_direction, promotion_row
from chessgame.core.types import Square, all_squares

if TYPE_CHECKING:
    from chessgame.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    ``en_passant`` is the square a pawn may capture onto this turn only,
    or ``None``.  It lives in the game session, not on the board.
    """

    # ── Single moves ─────────────────────────────────────────────────────

    @staticmethod
    def classify(
        board: Board,
        origin: Square,
        destination: Square,
        en_passant: Square | None = None,
    ) -> Move | None:
        """Pseudo-legal :class:`Move` from *origin* to *destination*, or ``None``."""
        piece = board[origin]
        if piece is None:
            return None

        if is_valid_move(piece, origin, destination, board):
            flag = MoveFlag.NORMAL
            if piece.piece_type == PieceType.PAWN:
                if abs(destination[0] - origin[0]) == 2:
                    flag = MoveFlag.DOUBLE_PAWN
                elif destination[0] == promotion_row(piece.color):
                    flag = MoveFlag.PROMOTION
            elif (
                piece.piece_type == PieceType.KING
                and abs(destination[1] - origin[1]) == 2
            ):
                flag = MoveFlag.CASTLE
            return Move(origin, destination, flag)

        if (
            piece.piece_type == PieceType.PAWN
            and en_passant is not None
            and destination == en_passant
            and Rules._is_en_passant_capture(board, origin, destination)
        ):
            return Move(origin, destination, MoveFlag.EN_PASSANT)
        return None

    @staticmethod
    def _is_en_passant_capture(board: Board, origin: Square, destination: Square) -> bool:
        piece = board[origin]
        assert piece is not None
        if destination[0] - origin[0] != pawn_direction(piece.color):
            return False
        if abs(destination[1] - origin[1]) != 1 or board[destination] is not None:
            return False
        victim = board[origin[0], destination[1]]
        return (
            victim is not None
            and victim.piece_type == PieceType.PAWN
            and victim.color != piece.color
        )

    @staticmethod
    def exposes_king(board: Board, move: Move) -> bool:
        """Would playing *move* leave (or put) the mover's king under attack?

        Castling additionally may not start from check nor pass over an
        attacked square.
        """
        piece = board[move.origin]
        assert piece is not None
        color = piece.color

        if move.is_castle:
            if king_in_check(board, color):
                return True
            transit = (move.origin[0], (move.origin[1] + move.destination[1]) // 2)
            if would_king_be_in_check(
                simulate_move(board, Move(move.origin, transit)), color
            ):
                return True

        return would_king_be_in_check(simulate_move(board, move), color)

    # ── Enumeration ──────────────────────────────────────────────────────

    @staticmethod
    def legal_moves_from(
        board: Board, origin: Square, en_passant: Square | None = None
    ) -> list[Move]:
        """Legal moves of the piece on *origin*."""
        return list(Rules._iter_legal_from(board, origin, en_passant))

    @staticmethod
    def legal_moves(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> list[Move]:
        """All legal moves for *color*."""
        return list(Rules._iter_legal(board, color, en_passant))

    @staticmethod
    def has_any_legal_move(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        """Stops at the first move that keeps *color*'s king safe."""
        return next(Rules._iter_legal(board, color, en_passant), None) is not None

    @staticmethod
    def _iter_legal(
        board: Board, color: Color, en_passant: Square | None
    ) -> Iterator[Move]:
        for origin, _ in list(board.pieces(color)):
            yield from Rules._iter_legal_from(board, origin, en_passant)

    @staticmethod
    def _iter_legal_from(
        board: Board, origin: Square, en_passant: Square | None
    ) -> Iterator[Move]:
        for destination in all_squares():
            move = Rules.classify(board, origin, destination, en_passant)
            if move is not None and not Rules.exposes_king(board, move):
                yield move

    # ── Termination ──────────────────────────────────────────────────────

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return king_in_check(board, color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        if not king_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color, en_passant)

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        if king_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color, en_passant)

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (one bishop per side).

        Other drawn configurations (e.g. K+N vs K+N) are not recognised.
        """
        pieces = [piece for _, piece in board.pieces()]
        total = len(pieces)

        # K vs K
        if total == 2:
            return True

        # K+minor vs K
        if total == 3:
            return any(
                p.piece_type in (PieceType.BISHOP, PieceType.KNIGHT) for p in pieces
            )

        # K+B vs K+B
        if total == 4:
            bishops = [p for p in pieces if p.piece_type == PieceType.BISHOP]
            return len(bishops) == 2 and bishops[0].color != bishops[1].color

        return False

    @staticmethod
    def game_outcome(
        board: Board, side_to_move: Color, en_passant: Square | None = None
    ) -> GameOutcome:
        """Outcome with *side_to_move* about to play."""
        if not Rules.has_any_legal_move(board, side_to_move, en_passant):
            if king_in_check(board, side_to_move):
                return GameOutcome.CHECKMATE
            return GameOutcome.STALEMATE

        if Rules.is_insufficient_material(board):
            return GameOutcome.INSUFFICIENT_MATERIAL

        return GameOutcome.ONGOING
