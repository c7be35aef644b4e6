"""MainWindow — board, status line and the Restart / Save / Exit buttons."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessgame.core.enums import Color, GameOutcome
from chessgame.core.types import Square
from chessgame.game.controller import GameController
from chessgame.game.interfaces import GamePhase, MoveStatus
from chessgame.game.persistence import load_game, save_game
from chessgame.game.state import GameState
from chessgame.ui.board.board_widget import BoardWidget
from chessgame.ui.dialogs.promotion_dialog import PromotionDialog
from chessgame.ui.settings import AppSettings
from chessgame.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chess Game")

        self._settings = settings if settings is not None else AppSettings()
        self._controller = controller if controller is not None else GameController()
        self._exit_confirmed = False

        self._setup_ui()
        self._connect_game_events()
        self._apply_settings()

        if self._settings.load_on_start:
            load_game(self._controller, self._settings.save_path)
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_widget = BoardWidget(self._controller, self._settings.tile_size)
        self._board_widget.move_requested.connect(self._on_move_requested)
        root.addWidget(self._board_widget)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        root.addWidget(self._status_label)

        buttons = QHBoxLayout()
        self._restart_button = QPushButton("Restart")
        self._restart_button.clicked.connect(self._on_restart)
        buttons.addWidget(self._restart_button)

        self._save_button = QPushButton("Save")
        self._save_button.clicked.connect(self._on_save)
        buttons.addWidget(self._save_button)

        self._exit_button = QPushButton("Exit")
        self._exit_button.clicked.connect(self.close)
        buttons.addWidget(self._exit_button)
        buttons.addStretch()
        root.addLayout(buttons)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_game_over.append(self._on_game_over)
        events.on_reset.append(self._on_reset)

    def _apply_settings(self) -> None:
        s = self._settings
        self._board_widget.set_theme(BoardTheme.by_name(s.board_theme))
        self._board_widget.set_show_legal_moves(s.show_legal_moves)

    # ── Game actions ─────────────────────────────────────────────────────

    def _on_move_requested(self, origin: Square, destination: Square) -> None:
        result = self._controller.propose_move(origin, destination)
        if result.status == MoveStatus.REJECTED_EXPOSES_KING:
            self._status_label.setText("That move would leave your king in check")
            return
        if not result.accepted:
            return

        effects = result.side_effects
        if effects is not None and effects.promotion_required:
            assert effects.promotion_color is not None
            kind = PromotionDialog.ask(effects.promotion_color, self)
            self._controller.choose_promotion(kind)
        self._refresh()

    def _on_restart(self) -> None:
        self._controller.restart()

    def _on_save(self) -> None:
        try:
            path = save_game(self._controller, self._settings.save_path)
        except OSError as exc:
            _LOGGER.error("Saving failed: %s", exc)
            self._show_message("Save", f"Could not save the game:\n{exc}")
            return
        self._show_message("Save", f"Game saved to {path}")

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_game_over(self, outcome: GameOutcome, loser: Color | None) -> None:
        self._refresh()
        self._show_message("Game over", self._outcome_text(outcome, loser))

    def _on_reset(self, _state: GameState) -> None:
        self._board_widget.clear_selection()
        self._refresh()

    # ── Status ───────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        state = self._controller.state
        self._board_widget.set_interactive(state.phase == GamePhase.AWAITING_MOVE)
        self._board_widget.update()
        self._status_label.setText(self.status_text())

    def status_text(self) -> str:
        state = self._controller.state
        if state.is_game_over:
            return self._outcome_text(state.outcome, state.checkmated)
        text = f"{state.side_to_move.label} to move"
        if state.in_check(state.side_to_move):
            text += ", check!"
        return text

    @staticmethod
    def _outcome_text(outcome: GameOutcome, loser: Color | None) -> str:
        if outcome == GameOutcome.CHECKMATE and loser is not None:
            return f"{loser.label} is checkmated!"
        if outcome == GameOutcome.STALEMATE:
            return "Stalemate!"
        if outcome == GameOutcome.INSUFFICIENT_MATERIAL:
            return "Draw: insufficient material"
        return ""

    # ── Dialog hooks ─────────────────────────────────────────────────────

    def _show_message(self, title: str, text: str) -> None:
        QMessageBox.information(self, title, text)

    def _ask_save_before_exit(self) -> bool:
        answer = QMessageBox.question(
            self,
            "Exit",
            "Save before exit?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    # ── Window lifecycle ─────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent) -> None:
        if self._settings.ask_save_on_exit and not self._exit_confirmed:
            self._exit_confirmed = True
            if self._ask_save_before_exit():
                self._on_save()
        super().closeEvent(event)
