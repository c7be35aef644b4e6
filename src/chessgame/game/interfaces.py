"""Result types and the abstract controller interface for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Any

from chessgame.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chessgame.core.move import Move
    from chessgame.core.piece import Piece
    from chessgame.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()  # pawn on the last rank, kind not chosen yet
    GAME_OVER = auto()


class MoveStatus(IntEnum):
    """How a proposed move was handled."""

    ACCEPTED = auto()
    REJECTED_ILLEGAL = auto()
    REJECTED_EXPOSES_KING = auto()


# ── Move results ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SideEffects:
    """Everything a committed move did besides moving the piece itself."""

    captured: Piece | None = None
    captured_square: Square | None = None
    rook_from: Square | None = None
    rook_to: Square | None = None
    promotion_required: bool = False
    promotion_color: Color | None = None
    promotion_square: Square | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castle(self) -> bool:
        return self.rook_from is not None


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Answer to :meth:`IGameController.propose_move`."""

    status: MoveStatus
    move: Move | None = None
    side_effects: SideEffects | None = None

    @property
    def accepted(self) -> bool:
        return self.status == MoveStatus.ACCEPTED

    @classmethod
    def illegal(cls) -> MoveResult:
        return cls(MoveStatus.REJECTED_ILLEGAL)

    @classmethod
    def exposes_king(cls, move: Move) -> MoveResult:
        return cls(MoveStatus.REJECTED_EXPOSES_KING, move)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface between the rules engine and its UI / persistence collaborators."""

    @abstractmethod
    def propose_move(
        self,
        origin: Square,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> MoveResult:
        """Validate and, when legal, commit a move for the side to move."""

    @abstractmethod
    def choose_promotion(self, kind: PieceType = PieceType.QUEEN) -> None:
        """Replace the pawn waiting on the last rank with *kind*."""

    @abstractmethod
    def restart(self) -> None:
        """Reset to the starting position with White to move."""

    @abstractmethod
    def snapshot(self) -> dict[str, Any]:
        """Persisted layout of the current board and turn."""

    @abstractmethod
    def load_snapshot(self, data: Any) -> bool:
        """Replace the game with persisted state. Returns True if it was applied."""
