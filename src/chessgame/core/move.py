"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgame.core.enums import MoveFlag, PieceType
from chessgame.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    ``promotion`` is only set once the promoted kind is known; a pawn
    reaching the last rank without it leaves the promotion pending.
    """

    origin: Square
    destination: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @property
    def is_castle(self) -> bool:
        return self.flag == MoveFlag.CASTLE

    @property
    def is_en_passant(self) -> bool:
        return self.flag == MoveFlag.EN_PASSANT

    def __str__(self) -> str:
        base = f"{square_name(self.origin)}-{square_name(self.destination)}"
        if self.promotion is not None:
            base += f"={self.promotion.label}"
        return base
