"""BoardWidget — paints the board and turns clicks into move proposals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QWidget

from chessgame.core.types import BOARD_SIZE, Square, is_inside, is_light_square
from chessgame.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chessgame.game.controller import GameController


class BoardWidget(QWidget):
    """Draws the live board of a :class:`GameController`.

    White sits at the bottom: row 7 is drawn on top.  The first click
    selects a piece of the side to move, the second one proposes the move.

    Signals:
        move_requested(object, object): origin and destination squares.
    """

    move_requested = pyqtSignal(object, object)

    def __init__(
        self,
        controller: GameController,
        tile_size: int = 80,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._tile = tile_size
        self._show_legal_moves = True
        self._interactive = True

        # Interaction state
        self._selected: Square | None = None
        self._legal_targets: list[Square] = []

        self.setFixedSize(tile_size * BOARD_SIZE, tile_size * BOARD_SIZE)

    # ── Public API ───────────────────────────────────────────────────────

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self.update()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        self.update()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece selection."""
        self._interactive = interactive
        if not interactive:
            self.clear_selection()

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def legal_targets(self) -> list[Square]:
        return list(self._legal_targets)

    def clear_selection(self) -> None:
        self._selected = None
        self._legal_targets = []
        self.update()

    # ── Geometry ─────────────────────────────────────────────────────────

    def square_at(self, point: QPointF) -> Square | None:
        """Board square under a widget-local point, or ``None`` if outside."""
        col = int(point.x() // self._tile)
        screen_row = int(point.y() // self._tile)
        row = BOARD_SIZE - 1 - screen_row
        if point.x() < 0 or point.y() < 0 or not is_inside(row, col):
            return None
        return row, col

    def square_rect(self, sq: Square) -> QRectF:
        row, col = sq
        screen_row = BOARD_SIZE - 1 - row
        return QRectF(
            col * self._tile, screen_row * self._tile, self._tile, self._tile
        )

    # ── Interaction ──────────────────────────────────────────────────────

    def handle_click(self, sq: Square) -> None:
        if not self._interactive:
            return

        piece = self._controller.board[sq]
        own_piece = piece is not None and piece.color == self._controller.side_to_move

        if self._selected is None or (own_piece and sq != self._selected):
            if own_piece:
                self._selected = sq
                self._legal_targets = self._controller.legal_destinations(sq)
                self.update()
            return

        origin = self._selected
        self.clear_selection()
        if sq != origin:
            self.move_requested.emit(origin, sq)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        sq = self.square_at(event.position())
        if sq is not None:
            self.handle_click(sq)

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            self._paint_squares(painter)
            self._paint_highlights(painter)
            self._paint_pieces(painter)
        finally:
            painter.end()

    def _paint_squares(self, painter: QPainter) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                color = (
                    self._theme.light_square
                    if is_light_square((row, col))
                    else self._theme.dark_square
                )
                painter.fillRect(self.square_rect((row, col)), color)

    def _paint_highlights(self, painter: QPainter) -> None:
        board = self._controller.board
        for color, in_check in self._controller.check_flags().items():
            king_sq = board.find_king(color)
            if in_check and king_sq is not None:
                painter.fillRect(self.square_rect(king_sq), self._theme.highlight_check)

        if self._selected is not None:
            pen = QPen(self._theme.highlight_from, 4)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(self.square_rect(self._selected).adjusted(2, 2, -2, -2))

        if self._show_legal_moves:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(self._theme.highlight_to)
            radius = self._tile * 0.15
            for sq in self._legal_targets:
                painter.drawEllipse(self.square_rect(sq).center(), radius, radius)

    def _paint_pieces(self, painter: QPainter) -> None:
        font = QFont()
        font.setPixelSize(int(self._tile * 0.75))
        painter.setFont(font)
        painter.setPen(self._theme.piece)
        for sq, piece in self._controller.board.pieces():
            painter.drawText(
                self.square_rect(sq), Qt.AlignmentFlag.AlignCenter, piece.symbol
            )
