"""Tests for BoardWidget geometry and click handling."""

from PyQt6.QtCore import QPointF, QRectF

from chessgame.core.board import Board
from chessgame.core.enums import Color
from chessgame.game.controller import GameController
from chessgame.game.state import GameState
from chessgame.ui.board.board_widget import BoardWidget
from chessgame.ui.styles.theme import BoardTheme


def _widget(controller: GameController | None = None) -> BoardWidget:
    return BoardWidget(controller or GameController(), tile_size=80)


class TestGeometry:
    def test_size(self, qapp) -> None:
        widget = _widget()
        assert widget.width() == 640
        assert widget.height() == 640

    def test_white_at_bottom(self, qapp) -> None:
        widget = _widget()
        assert widget.square_at(QPointF(5, 5)) == (7, 0)
        assert widget.square_at(QPointF(639, 639)) == (0, 7)
        assert widget.square_at(QPointF(250, 570)) == (0, 3)

    def test_outside(self, qapp) -> None:
        widget = _widget()
        assert widget.square_at(QPointF(-1, 5)) is None
        assert widget.square_at(QPointF(700, 10)) is None
        assert widget.square_at(QPointF(10, 640)) is None

    def test_square_rect(self, qapp) -> None:
        widget = _widget()
        assert widget.square_rect((0, 0)) == QRectF(0, 560, 80, 80)
        assert widget.square_rect((7, 7)) == QRectF(560, 0, 80, 80)


class TestClicks:
    def test_select_own_piece(self, qapp) -> None:
        widget = _widget()
        widget.handle_click((1, 4))
        assert widget.selected_square == (1, 4)
        assert widget.legal_targets == [(2, 4), (3, 4)]

    def test_opponent_piece_not_selected(self, qapp) -> None:
        widget = _widget()
        widget.handle_click((6, 4))
        assert widget.selected_square is None

    def test_empty_square_not_selected(self, qapp) -> None:
        widget = _widget()
        widget.handle_click((4, 4))
        assert widget.selected_square is None

    def test_second_click_requests_move(self, qapp) -> None:
        widget = _widget()
        requested = []
        widget.move_requested.connect(lambda o, d: requested.append((o, d)))
        widget.handle_click((1, 4))
        widget.handle_click((3, 4))
        assert requested == [((1, 4), (3, 4))]
        assert widget.selected_square is None

    def test_second_click_on_other_own_piece_reselects(self, qapp) -> None:
        widget = _widget()
        requested = []
        widget.move_requested.connect(lambda o, d: requested.append((o, d)))
        widget.handle_click((1, 4))
        widget.handle_click((0, 1))
        assert widget.selected_square == (0, 1)
        assert widget.legal_targets == [(2, 0), (2, 2)]
        assert requested == []

    def test_same_square_deselects(self, qapp) -> None:
        widget = _widget()
        requested = []
        widget.move_requested.connect(lambda o, d: requested.append((o, d)))
        widget.handle_click((1, 4))
        widget.handle_click((1, 4))
        assert widget.selected_square is None
        assert requested == []

    def test_illegal_target_still_requested(self, qapp) -> None:
        widget = _widget()
        requested = []
        widget.move_requested.connect(lambda o, d: requested.append((o, d)))
        widget.handle_click((1, 4))
        widget.handle_click((5, 4))
        assert requested == [((1, 4), (5, 4))]

    def test_not_interactive(self, qapp) -> None:
        widget = _widget()
        widget.handle_click((1, 4))
        widget.set_interactive(False)
        assert widget.selected_square is None
        widget.handle_click((1, 4))
        assert widget.selected_square is None


class TestPainting:
    def test_grab_initial(self, qapp) -> None:
        widget = _widget()
        widget.handle_click((1, 4))
        assert not widget.grab().isNull()

    def test_grab_with_king_in_check(self, qapp) -> None:
        state = GameState()
        state.setup(
            Board.from_diagram(
                """
                ...r...k
                ........
                ........
                ........
                ........
                ........
                ........
                ...K....
                """
            ),
            Color.WHITE,
        )
        widget = _widget(GameController(state))
        widget.set_show_legal_moves(False)
        assert not widget.grab().isNull()


class TestTheme:
    def test_by_name(self, qapp) -> None:
        assert BoardTheme.by_name("Green") == BoardTheme.green()
        assert BoardTheme.by_name("Classic") == BoardTheme.default()

    def test_unknown_name_falls_back(self, qapp) -> None:
        assert BoardTheme.by_name("Neon") == BoardTheme.default()
