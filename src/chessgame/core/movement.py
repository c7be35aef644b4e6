"""Pseudo-legal move geometry for every piece kind.

Each rule answers "may this piece travel from *origin* to *destination*
on this board" looking only at geometry, blocking pieces and the
own-piece capture prohibition.  Whether the move leaves the mover's king
attacked is decided separately (see :mod:`chessgame.core.check`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessgame.core.enums import Color, PieceType
from chessgame.core.types import Square, all_squares, is_inside

if TYPE_CHECKING:
    from chessgame.core.board import Board
    from chessgame.core.piece import Piece

MoveRule = Callable[["Piece", Square, Square, "Board"], bool]

_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
_LAST_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


def pawn_direction(color: Color) -> int:
    return _PAWN_DIRECTION[color]


def promotion_row(color: Color) -> int:
    """Farthest row for *color*'s pawns."""
    return _LAST_ROW[color]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _can_land(piece: Piece, destination: Square, board: Board) -> bool:
    target = board[destination]
    return target is None or target.color != piece.color


def _path_clear(origin: Square, destination: Square, board: Board) -> bool:
    """All cells strictly between two aligned squares are empty."""
    step_r = _sign(destination[0] - origin[0])
    step_c = _sign(destination[1] - origin[1])
    row, col = origin[0] + step_r, origin[1] + step_c
    while (row, col) != destination:
        if board[row, col] is not None:
            return False
        row += step_r
        col += step_c
    return True


# ── Per-kind rules ───────────────────────────────────────────────────────────


def _pawn_rule(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    direction = _PAWN_DIRECTION[piece.color]
    dr = destination[0] - origin[0]
    dc = destination[1] - origin[1]

    if dc == 0:
        if dr == direction:
            return board[destination] is None
        if dr == 2 * direction and origin[0] == _PAWN_START_ROW[piece.color]:
            between = (origin[0] + direction, origin[1])
            return board[between] is None and board[destination] is None
        return False

    # Diagonal steps are captures only; en passant is layered on by Rules.
    if abs(dc) == 1 and dr == direction:
        target = board[destination]
        return target is not None and target.color != piece.color
    return False


def _rook_rule(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    if origin[0] != destination[0] and origin[1] != destination[1]:
        return False
    return _path_clear(origin, destination, board) and _can_land(
        piece, destination, board
    )


def _knight_rule(
    piece: Piece, origin: Square, destination: Square, board: Board
) -> bool:
    dr = abs(destination[0] - origin[0])
    dc = abs(destination[1] - origin[1])
    if (dr, dc) not in ((2, 1), (1, 2)):
        return False
    return _can_land(piece, destination, board)


def _bishop_rule(
    piece: Piece, origin: Square, destination: Square, board: Board
) -> bool:
    if abs(destination[0] - origin[0]) != abs(destination[1] - origin[1]):
        return False
    return _path_clear(origin, destination, board) and _can_land(
        piece, destination, board
    )


def _queen_rule(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    return _rook_rule(piece, origin, destination, board) or _bishop_rule(
        piece, origin, destination, board
    )


def _king_rule(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    dr = abs(destination[0] - origin[0])
    dc = abs(destination[1] - origin[1])

    if dr <= 1 and dc <= 1:
        return _can_land(piece, destination, board)

    if dr == 0 and dc == 2:
        return _castling_geometry(piece, origin, destination, board)
    return False


def _castling_geometry(
    piece: Piece, origin: Square, destination: Square, board: Board
) -> bool:
    """Unmoved king, unmoved rook in the corner, empty cells between them.

    Attacked squares are not considered here.
    """
    if piece.has_moved:
        return False
    rook_sq, _ = castling_rook_squares(origin, destination)
    rook = board[rook_sq]
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != piece.color
        or rook.has_moved
    ):
        return False

    # The king has to land strictly between its square and the rook.
    low, high = sorted((origin[1], rook_sq[1]))
    if not low < destination[1] < high:
        return False
    return _path_clear(origin, rook_sq, board)


def castling_rook_squares(origin: Square, destination: Square) -> tuple[Square, Square]:
    """(rook origin, rook destination) for a castling king move.

    The rook comes from the corner on the side the king travels to and
    lands on the square the king passed over.
    """
    row = origin[0]
    if destination[1] > origin[1]:
        return (row, 7), (row, destination[1] - 1)
    return (row, 0), (row, destination[1] + 1)


_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: _pawn_rule,
    PieceType.KNIGHT: _knight_rule,
    PieceType.BISHOP: _bishop_rule,
    PieceType.ROOK: _rook_rule,
    PieceType.QUEEN: _queen_rule,
    PieceType.KING: _king_rule,
}


# ── Public API ───────────────────────────────────────────────────────────────


def is_valid_move(
    piece: Piece, origin: Square, destination: Square, board: Board
) -> bool:
    """Pseudo-legality of moving *piece* from *origin* to *destination*.

    Pure: the board is never modified.  Destinations outside the board are
    always rejected, before any kind-specific rule runs.
    """
    if not is_inside(*destination):
        return False
    if origin == destination:
        return False
    return _RULES[piece.piece_type](piece, origin, destination, board)


def pseudo_legal_destinations(board: Board, origin: Square) -> list[Square]:
    """Every square the piece on *origin* may reach, ignoring king safety."""
    piece = board[origin]
    if piece is None:
        return []
    return [sq for sq in all_squares() if is_valid_move(piece, origin, sq, board)]
