"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessgame.core.enums import Color, PieceType

# Board-diagram letter per kind; uppercase marks a white piece.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_KINDS_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# (white glyph, black glyph)
_GLYPHS: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}

# Only rooks and kings track movement (castling eligibility).
_TRACKS_MOVEMENT = frozenset({PieceType.ROOK, PieceType.KING})


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable occupant of a board cell.

    ``has_moved`` lives in the value itself so that copying a board never
    shares mutable state between the live game and a simulation.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved (rooks and kings only)."""
        if self.piece_type not in _TRACKS_MOVEMENT or self.has_moved:
            return self
        return replace(self, has_moved=True)

    # ── Text forms ───────────────────────────────────────────────────────

    def __str__(self) -> str:
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a diagram letter, e.g. ``'N'`` is a white knight."""
        kind = _KINDS_BY_LETTER.get(char.lower())
        if kind is None or len(char) != 1:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _GLYPHS[self.piece_type][self.color]
