"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessgame.core.enums import Color, MoveFlag, PieceType
from chessgame.core.move import Move
from chessgame.core.movement import castling_rook_squares
from chessgame.core.piece import Piece
from chessgame.core.types import BOARD_SIZE, Square
from chessgame.core.types import is_inside as _is_inside

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional :class:`Piece` occupants.

    Cells are addressed as ``board[row, col]``.  Pieces are immutable values,
    so :meth:`clone` only copies the grid rows.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        if not _is_inside(row, col):
            return None
        return self._cells[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        if not _is_inside(row, col):
            raise IndexError(f"Square outside the board: {sq!r}")
        self._cells[row][col] = piece

    @staticmethod
    def is_inside(row: int, col: int) -> bool:
        return _is_inside(row, col)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied cells in row-major order, optionally only *color*'s."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._cells[row][col]
                if piece is None:
                    continue
                if color is None or piece.color == color:
                    yield (row, col), piece

    def piece_count(self) -> int:
        return sum(1 for _ in self.pieces())

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def clone(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    def make_move(self, move: Move) -> Piece | None:
        """Apply *move* in place and return the captured piece, if any.

        Covers en passant capture, rook relocation for castling, the
        ``has_moved`` flags and promotion when ``move.promotion`` is set.
        Legality is the caller's responsibility.
        """
        piece = self[move.origin]
        if piece is None:
            raise ValueError(f"No piece on {move.origin}")

        capture_sq = move.destination
        if move.flag == MoveFlag.EN_PASSANT:
            capture_sq = (move.origin[0], move.destination[1])
        captured = self[capture_sq]
        if captured is not None:
            self[capture_sq] = None

        self[move.origin] = None
        placed = piece.moved()
        if move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        self[move.destination] = placed

        if move.flag == MoveFlag.CASTLE:
            rook_from, rook_to = castling_rook_squares(move.origin, move.destination)
            rook = self[rook_from]
            if rook is not None:
                self[rook_from] = None
                self[rook_to] = rook.moved()

        return captured

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def setup_default_position(self) -> None:
        """Reset to the starting arrangement (king on column 3, queen on 4)."""
        self.clear()
        for col in range(BOARD_SIZE):
            self._cells[1][col] = Piece(Color.WHITE, PieceType.PAWN)
            self._cells[BOARD_SIZE - 2][col] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            self._cells[0][col] = Piece(Color.WHITE, pt)
            self._cells[BOARD_SIZE - 1][col] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.setup_default_position()
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight lines of FEN letters and dots.

        The first line is row 7 and the last line row 0, matching ``repr``.
        Uppercase letters are white pieces, lowercase black, ``.`` is empty.
        """
        lines = [line.strip() for line in diagram.strip().splitlines()]
        lines = [line.replace(" ", "") for line in lines if line]
        if len(lines) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in lines):
            raise ValueError("Diagram must have 8 rows of 8 cells")

        b = cls()
        for i, line in enumerate(lines):
            row = BOARD_SIZE - 1 - i
            for col, char in enumerate(line):
                if char != ".":
                    b._cells[row][col] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = [str(p) if p else "." for p in self._cells[row]]
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
