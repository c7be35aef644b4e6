"""Persisted-state layout: board + side to move as plain data.

Layout::

    {
        "Turn": "White",
        "Pieces": [
            {"Row": 0, "Column": 0, "Type": "Rook", "Color": "White",
             "HasMoved": false},
            ...
        ]
    }

Pieces are listed in row-major order.  ``HasMoved`` is optional on load.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from chessgame.core.board import Board
from chessgame.core.enums import Color, PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import is_inside

_TYPES_BY_NAME: dict[str, PieceType] = {pt.label: pt for pt in PieceType}
_COLORS_BY_NAME: dict[str, Color] = {c.label: c for c in Color}


class SnapshotError(ValueError):
    """Persisted state cannot be turned back into a board."""


def board_to_snapshot(board: Board, turn: Color) -> dict[str, Any]:
    """Serialise *board* and the side to move."""
    return {
        "Turn": turn.label,
        "Pieces": [
            {
                "Row": row,
                "Column": col,
                "Type": piece.piece_type.label,
                "Color": piece.color.label,
                "HasMoved": piece.has_moved,
            }
            for (row, col), piece in board.pieces()
        ],
    }


def board_from_snapshot(data: Mapping[str, Any]) -> tuple[Board, Color]:
    """Rebuild a board and the side to move.

    The whole snapshot is validated before anything is returned.

    Raises:
        SnapshotError: on any unknown name, bad coordinate or missing field.
    """
    if not isinstance(data, Mapping):
        raise SnapshotError("Snapshot must be a mapping")

    turn = _parse_color(data.get("Turn"), "Turn")

    entries = data.get("Pieces")
    if not isinstance(entries, list):
        raise SnapshotError("Snapshot has no 'Pieces' list")

    board = Board()
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise SnapshotError(f"Piece #{index} is not a mapping")
        row = _parse_coordinate(entry.get("Row"), f"piece #{index} row")
        col = _parse_coordinate(entry.get("Column"), f"piece #{index} column")
        if not is_inside(row, col):
            raise SnapshotError(f"Piece #{index} is off the board: ({row}, {col})")
        if board[row, col] is not None:
            raise SnapshotError(f"Two pieces on ({row}, {col})")

        type_name = entry.get("Type")
        piece_type = _TYPES_BY_NAME.get(type_name) if isinstance(type_name, str) else None
        if piece_type is None:
            raise SnapshotError(f"Unknown piece type: {type_name!r}")
        color = _parse_color(entry.get("Color"), f"piece #{index} color")

        has_moved = entry.get("HasMoved", False)
        if not isinstance(has_moved, bool):
            raise SnapshotError(f"Piece #{index} HasMoved must be a boolean")

        piece = Piece(color, piece_type)
        if has_moved:
            piece = piece.moved()
        board[row, col] = piece

    return board, turn


def _parse_color(value: object, what: str) -> Color:
    color = _COLORS_BY_NAME.get(value) if isinstance(value, str) else None
    if color is None:
        raise SnapshotError(f"Unknown color for {what}: {value!r}")
    return color


def _parse_coordinate(value: object, what: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if not isinstance(value, int) or isinstance(value, bool):
        raise SnapshotError(f"Invalid {what}: {value!r}")
    return value
