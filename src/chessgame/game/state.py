"""Game session state — board, turn, en passant target, phase, outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from chessgame.core.board import Board
from chessgame.core.check import king_in_check
from chessgame.core.enums import PROMOTION_TYPES, Color, GameOutcome, MoveFlag, PieceType
from chessgame.core.movement import castling_rook_squares
from chessgame.core.piece import Piece
from chessgame.core.rules import Rules
from chessgame.core.snapshot import board_to_snapshot
from chessgame.game.interfaces import GamePhase, MoveStatus, SideEffects

if TYPE_CHECKING:
    from chessgame.core.move import Move
    from chessgame.core.types import Square


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    side_effects: SideEffects


@dataclass
class GameState:
    """Everything that changes while a game is played.

    This is a pure data/logic class with no threading and no UI.  The board is
    the single source of truth; the outcome is recomputed after every
    committed move rather than tracked incrementally.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    en_passant: Square | None = None
    phase: GamePhase = GamePhase.AWAITING_MOVE
    outcome: GameOutcome = GameOutcome.ONGOING
    pending_promotion: Square | None = None
    move_history: list[MoveRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, optionally from a given position."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.en_passant = None
        self.pending_promotion = None
        self.move_history.clear()
        self._evaluate_outcome()

    # ── Validation ───────────────────────────────────────────────────────

    def check_move(
        self, origin: Square, destination: Square
    ) -> tuple[MoveStatus, Move | None]:
        """Classify a proposed move without touching the board."""
        if self.phase != GamePhase.AWAITING_MOVE:
            return MoveStatus.REJECTED_ILLEGAL, None

        piece = self.board[origin]
        if piece is None or piece.color != self.side_to_move:
            return MoveStatus.REJECTED_ILLEGAL, None

        move = Rules.classify(self.board, origin, destination, self.en_passant)
        if move is None:
            return MoveStatus.REJECTED_ILLEGAL, None
        if Rules.exposes_king(self.board, move):
            return MoveStatus.REJECTED_EXPOSES_KING, move
        return MoveStatus.ACCEPTED, move

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> SideEffects:
        """Commit a validated move and return what else it changed.

        Caller is responsible for legality check.  A pawn reaching the last
        rank without ``move.promotion`` leaves the turn open until
        :meth:`promote` is called.
        """
        piece = self.board[move.origin]
        if piece is None:
            raise ValueError(f"No piece on {move.origin}")

        captured_square: Square | None = None
        if move.flag == MoveFlag.EN_PASSANT:
            captured_square = (move.origin[0], move.destination[1])
        elif self.board[move.destination] is not None:
            captured_square = move.destination

        rook_from: Square | None = None
        rook_to: Square | None = None
        if move.flag == MoveFlag.CASTLE:
            rook_from, rook_to = castling_rook_squares(move.origin, move.destination)

        captured = self.board.make_move(move)

        # En passant target for the opponent
        self.en_passant = None
        if move.flag == MoveFlag.DOUBLE_PAWN:
            self.en_passant = (
                (move.origin[0] + move.destination[0]) // 2,
                move.origin[1],
            )

        promotion_required = move.flag == MoveFlag.PROMOTION and move.promotion is None
        effects = SideEffects(
            captured=captured,
            captured_square=captured_square if captured is not None else None,
            rook_from=rook_from,
            rook_to=rook_to,
            promotion_required=promotion_required,
            promotion_color=piece.color if promotion_required else None,
            promotion_square=move.destination if promotion_required else None,
        )
        self.move_history.append(MoveRecord(move=move, piece=piece, side_effects=effects))

        if promotion_required:
            self.pending_promotion = move.destination
            self.phase = GamePhase.AWAITING_PROMOTION
        else:
            self._finish_turn()
        return effects

    def promote(self, kind: PieceType = PieceType.QUEEN) -> Piece:
        """Replace the pawn waiting on the last rank and hand over the turn."""
        if self.pending_promotion is None:
            raise ValueError("No promotion is pending")
        if kind not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {kind.name}")

        square = self.pending_promotion
        pawn = self.board[square]
        assert pawn is not None
        promoted = Piece(pawn.color, kind)
        self.board[square] = promoted
        self.pending_promotion = None
        self._finish_turn()
        return promoted

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def checkmated(self) -> Color | None:
        """Color that has been checkmated, if any."""
        if self.outcome == GameOutcome.CHECKMATE:
            return self.side_to_move
        return None

    def in_check(self, color: Color) -> bool:
        return king_in_check(self.board, color)

    def check_flags(self) -> dict[Color, bool]:
        """King-in-check flag per color, for highlighting."""
        return {color: self.in_check(color) for color in Color}

    def legal_destinations(self, origin: Square) -> list[Square]:
        """Squares the side to move may reach from *origin* right now."""
        if self.phase != GamePhase.AWAITING_MOVE:
            return []
        piece = self.board[origin]
        if piece is None or piece.color != self.side_to_move:
            return []
        return [
            move.destination
            for move in Rules.legal_moves_from(self.board, origin, self.en_passant)
        ]

    def snapshot(self) -> dict[str, Any]:
        """Persisted layout of the current board and side to move."""
        return board_to_snapshot(self.board, self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite
        self._evaluate_outcome()

    def _evaluate_outcome(self) -> None:
        self.outcome = Rules.game_outcome(
            self.board, self.side_to_move, self.en_passant
        )
        if self.outcome.is_terminal:
            self.phase = GamePhase.GAME_OVER
        else:
            self.phase = GamePhase.AWAITING_MOVE
