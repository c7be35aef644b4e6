"""GameController — the entry point the UI and persistence talk to.

Validates proposed moves, commits them to the :class:`GameState`, and
notifies listeners through simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from chessgame.core.enums import PROMOTION_TYPES, Color, GameOutcome, MoveFlag, PieceType
from chessgame.core.snapshot import SnapshotError, board_from_snapshot
from chessgame.game.interfaces import IGameController, MoveResult, MoveStatus, SideEffects
from chessgame.game.state import GameState

if TYPE_CHECKING:
    from chessgame.core.board import Board
    from chessgame.core.move import Move
    from chessgame.core.types import Square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[["Move", SideEffects, GameState], None]
PromotionCallback = Callable[[Color, "Square"], None]  # color, pawn square
GameOverCallback = Callable[[GameOutcome, "Color | None"], None]  # outcome, loser
ResetCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns one game session and is its only writer.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Every call runs to completion, including the
    end-of-game scan after a committed move.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def outcome(self) -> GameOutcome:
        return self._state.outcome

    def check_flags(self) -> dict[Color, bool]:
        return self._state.check_flags()

    def legal_destinations(self, origin: Square) -> list[Square]:
        return self._state.legal_destinations(origin)

    # ── IGameController impl ─────────────────────────────────────────────

    def propose_move(
        self,
        origin: Square,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> MoveResult:
        status, move = self._state.check_move(origin, destination)
        if status == MoveStatus.REJECTED_EXPOSES_KING:
            assert move is not None
            _LOGGER.debug("Rejected %s: king would be attacked", move)
            return MoveResult.exposes_king(move)
        if move is None:
            _LOGGER.debug("Rejected illegal move %s -> %s", origin, destination)
            return MoveResult.illegal()

        if promotion is not None and move.flag == MoveFlag.PROMOTION:
            if promotion not in PROMOTION_TYPES:
                return MoveResult.illegal()
            move = replace(move, promotion=promotion)

        color = self._state.side_to_move
        effects = self._state.apply_move(move)
        _LOGGER.info("%s played %s", color.label, move)

        self._emit_move(move, effects)
        if effects.promotion_required:
            assert effects.promotion_square is not None
            self._emit_promotion_required(color, effects.promotion_square)
        elif self._state.is_game_over:
            self._emit_game_over()

        return MoveResult(MoveStatus.ACCEPTED, move, effects)

    def choose_promotion(self, kind: PieceType = PieceType.QUEEN) -> None:
        promoted = self._state.promote(kind)
        _LOGGER.info("%s pawn promoted to %s", promoted.color.label, kind.label)
        if self._state.is_game_over:
            self._emit_game_over()

    def restart(self) -> None:
        self._state.setup()
        _LOGGER.info("Game restarted")
        self._emit_reset()

    def snapshot(self) -> dict[str, Any]:
        return self._state.snapshot()

    def load_snapshot(self, data: Any) -> bool:
        try:
            board, turn = board_from_snapshot(data)
        except SnapshotError as exc:
            _LOGGER.warning("Saved game ignored: %s", exc)
            return False

        self._state.setup(board, turn)
        _LOGGER.info("Loaded saved game, %s to move", turn.label)
        self._emit_reset()
        if self._state.is_game_over:
            self._emit_game_over()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, effects: SideEffects) -> None:
        for cb in self.events.on_move:
            cb(move, effects, self._state)

    def _emit_promotion_required(self, color: Color, square: Square) -> None:
        for cb in self.events.on_promotion_required:
            cb(color, square)

    def _emit_game_over(self) -> None:
        outcome = self._state.outcome
        loser = self._state.checkmated
        _LOGGER.info("Game over: %s", outcome.name.lower())
        for cb in self.events.on_game_over:
            cb(outcome, loser)

    def _emit_reset(self) -> None:
        for cb in self.events.on_reset:
            cb(self._state)
