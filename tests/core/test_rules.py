"""Tests for Rules: legal moves, checkmate, stalemate, insufficient material."""

import pytest

from chessgame.core.board import Board
from chessgame.core.enums import Color, GameOutcome, MoveFlag, PieceType
from chessgame.core.move import Move
from chessgame.core.piece import Piece
from chessgame.core.rules import Rules

# Black king cornered by queen and king, black to move.
STALEMATE = """
.......k
........
.....KQ.
........
........
........
........
........
"""

_CASTLING = """
k.......
........
........
........
........
........
........
R..K...R
"""


def _play(board: Board, moves) -> Board:
    for origin, destination in moves:
        board.make_move(Move(origin, destination))
    return board


def _board_with(*placed: tuple[tuple[int, int], str]) -> Board:
    board = Board()
    for sq, char in placed:
        board[sq] = Piece.from_char(char)
    return board


class TestLegalMoves:
    def test_initial_position_has_twenty_moves(self) -> None:
        board = Board.initial()
        assert len(Rules.legal_moves(board, Color.WHITE)) == 20
        assert len(Rules.legal_moves(board, Color.BLACK)) == 20

    def test_double_step_flag(self) -> None:
        move = Rules.classify(Board.initial(), (1, 4), (3, 4))
        assert move == Move((1, 4), (3, 4), MoveFlag.DOUBLE_PAWN)

    def test_classify_rejects_illegal_geometry(self) -> None:
        assert Rules.classify(Board.initial(), (0, 0), (3, 0)) is None

    def test_classify_empty_origin(self) -> None:
        assert Rules.classify(Board.initial(), (4, 4), (5, 4)) is None

    def test_pinned_piece_moves_along_pin_only(self) -> None:
        board = _board_with(((0, 3), "K"), ((1, 3), "R"), ((7, 3), "r"), ((7, 7), "k"))
        destinations = {m.destination for m in Rules.legal_moves_from(board, (1, 3))}
        assert destinations == {(2, 3), (3, 3), (4, 3), (5, 3), (6, 3), (7, 3)}

    def test_must_answer_check(self) -> None:
        board = _board_with(((0, 3), "K"), ((1, 0), "P"), ((7, 3), "r"), ((7, 7), "k"))
        for move in Rules.legal_moves(board, Color.WHITE):
            assert board[move.origin] == Piece(Color.WHITE, PieceType.KING)

    def test_promotion_flag(self) -> None:
        board = _board_with(((6, 0), "P"), ((0, 3), "K"), ((4, 7), "k"))
        move = Rules.classify(board, (6, 0), (7, 0))
        assert move is not None
        assert move.flag == MoveFlag.PROMOTION
        assert move.promotion is None

    def test_missing_king_has_no_legal_moves(self) -> None:
        board = Board.initial()
        board[0, 3] = None
        assert Rules.legal_moves(board, Color.WHITE) == []


class TestEnPassant:
    def _position(self) -> Board:
        board = _board_with(((4, 4), "P"), ((6, 3), "p"), ((0, 3), "K"), ((7, 7), "k"))
        board.make_move(Move((6, 3), (4, 3), MoveFlag.DOUBLE_PAWN))
        return board

    def test_capture_onto_target(self) -> None:
        board = self._position()
        move = Rules.classify(board, (4, 4), (5, 3), en_passant=(5, 3))
        assert move == Move((4, 4), (5, 3), MoveFlag.EN_PASSANT)

    def test_without_target_rejected(self) -> None:
        assert Rules.classify(self._position(), (4, 4), (5, 3)) is None

    def test_enumerated(self) -> None:
        board = self._position()
        moves = Rules.legal_moves_from(board, (4, 4), en_passant=(5, 3))
        assert Move((4, 4), (5, 3), MoveFlag.EN_PASSANT) in moves

    def test_removes_passed_pawn(self) -> None:
        board = self._position()
        move = Rules.classify(board, (4, 4), (5, 3), en_passant=(5, 3))
        assert move is not None
        captured = board.make_move(move)
        assert captured == Piece(Color.BLACK, PieceType.PAWN)
        assert board[4, 3] is None


class TestCastling:
    def test_castle_flag_and_legality(self) -> None:
        board = Board.from_diagram(_CASTLING)
        move = Rules.classify(board, (0, 3), (0, 5))
        assert move == Move((0, 3), (0, 5), MoveFlag.CASTLE)
        assert not Rules.exposes_king(board, move)

    def test_both_sides_enumerated(self) -> None:
        board = Board.from_diagram(_CASTLING)
        castles = {
            m.destination
            for m in Rules.legal_moves_from(board, (0, 3))
            if m.flag == MoveFlag.CASTLE
        }
        assert castles == {(0, 1), (0, 5)}

    def test_not_out_of_check(self) -> None:
        board = Board.from_diagram(_CASTLING)
        board[5, 3] = Piece(Color.BLACK, PieceType.ROOK)
        move = Rules.classify(board, (0, 3), (0, 5))
        assert move is not None
        assert Rules.exposes_king(board, move)

    def test_not_through_attacked_square(self) -> None:
        board = Board.from_diagram(_CASTLING)
        board[5, 4] = Piece(Color.BLACK, PieceType.ROOK)
        move = Rules.classify(board, (0, 3), (0, 5))
        assert move is not None
        assert Rules.exposes_king(board, move)
        # the other side is unaffected
        other = Rules.classify(board, (0, 3), (0, 1))
        assert other is not None
        assert not Rules.exposes_king(board, other)

    def test_not_onto_attacked_square(self) -> None:
        board = Board.from_diagram(_CASTLING)
        board[5, 5] = Piece(Color.BLACK, PieceType.ROOK)
        move = Rules.classify(board, (0, 3), (0, 5))
        assert move is not None
        assert Rules.exposes_king(board, move)


class TestCheckmate:
    def test_fools_mate(self, fools_mate) -> None:
        board = _play(Board.initial(), fools_mate)
        assert Rules.is_in_check(board, Color.WHITE)
        assert Rules.is_checkmate(board, Color.WHITE)
        assert not Rules.is_stalemate(board, Color.WHITE)
        assert Rules.game_outcome(board, Color.WHITE) == GameOutcome.CHECKMATE

    def test_not_mate_one_move_earlier(self, fools_mate) -> None:
        board = _play(Board.initial(), fools_mate[:3])
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.game_outcome(board, Color.BLACK) == GameOutcome.ONGOING

    def test_check_with_escape_is_not_mate(self) -> None:
        board = _board_with(((0, 3), "K"), ((7, 3), "r"), ((7, 7), "k"))
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)

    def test_initial_position_not_mate(self) -> None:
        assert not Rules.is_checkmate(Board.initial(), Color.WHITE)


class TestStalemate:
    def test_queen_stalemate(self) -> None:
        board = Board.from_diagram(STALEMATE)
        assert not Rules.is_in_check(board, Color.BLACK)
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.game_outcome(board, Color.BLACK) == GameOutcome.STALEMATE

    def test_same_position_white_to_move(self) -> None:
        board = Board.from_diagram(STALEMATE)
        assert not Rules.is_stalemate(board, Color.WHITE)

    def test_initial_position(self) -> None:
        assert not Rules.is_stalemate(Board.initial(), Color.WHITE)


class TestInsufficientMaterial:
    @pytest.mark.parametrize(
        "extra",
        [
            [],
            [((3, 3), "B")],
            [((3, 3), "n")],
            [((3, 3), "B"), ((4, 4), "b")],
            [((3, 3), "b"), ((3, 4), "B")],
        ],
    )
    def test_drawn(self, extra) -> None:
        board = _board_with(((0, 0), "K"), ((7, 7), "k"), *extra)
        assert Rules.is_insufficient_material(board)

    @pytest.mark.parametrize(
        "extra",
        [
            [((3, 3), "Q")],
            [((3, 3), "r")],
            [((3, 3), "P")],
            [((3, 3), "B"), ((4, 4), "B")],
            [((3, 3), "N"), ((4, 4), "n")],
            [((3, 3), "B"), ((4, 4), "N"), ((5, 5), "b")],
        ],
    )
    def test_enough(self, extra) -> None:
        board = _board_with(((0, 0), "K"), ((7, 7), "k"), *extra)
        assert not Rules.is_insufficient_material(board)

    def test_outcome(self) -> None:
        board = _board_with(((0, 0), "K"), ((7, 7), "k"), ((3, 3), "N"))
        assert Rules.game_outcome(board, Color.WHITE) == GameOutcome.INSUFFICIENT_MATERIAL

    def test_initial_position(self) -> None:
        assert not Rules.is_insufficient_material(Board.initial())
