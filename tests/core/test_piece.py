"""Tests for the Piece value object."""

import pytest

from chessgame.core.enums import Color, PieceType
from chessgame.core.piece import Piece


class TestPiece:
    def test_str_is_fen_letter(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"

    def test_moved_flags_rooks_and_kings(self) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK)
        assert rook.moved().has_moved
        assert not rook.has_moved  # receiver unchanged
        assert Piece(Color.BLACK, PieceType.KING).moved().has_moved

    def test_moved_is_noop_for_other_kinds(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        assert pawn.moved() is pawn

    def test_has_moved_is_part_of_equality(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING) != Piece(
            Color.WHITE, PieceType.KING, has_moved=True
        )

    def test_labels(self) -> None:
        assert PieceType.BISHOP.label == "Bishop"
        assert Color.BLACK.label == "Black"
        assert Color.WHITE.opposite == Color.BLACK
