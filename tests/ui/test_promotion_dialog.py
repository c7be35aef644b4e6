"""Tests for PromotionDialog."""

from PyQt6.QtWidgets import QDialog

from chessgame.core.enums import PROMOTION_TYPES, Color, PieceType
from chessgame.ui.dialogs.promotion_dialog import PromotionDialog


class TestPromotionDialog:
    def test_offers_four_kinds(self, qapp) -> None:
        dlg = PromotionDialog(Color.BLACK)
        assert set(dlg._buttons) == set(PROMOTION_TYPES)
        assert "♛" in dlg._buttons[PieceType.QUEEN].text()

    def test_queen_preselected(self, qapp) -> None:
        assert PromotionDialog(Color.WHITE).selected == PieceType.QUEEN

    def test_click_selects_and_accepts(self, qapp) -> None:
        dlg = PromotionDialog(Color.WHITE)
        dlg._buttons[PieceType.ROOK].click()
        assert dlg.selected == PieceType.ROOK
        assert dlg.result() == QDialog.DialogCode.Accepted

    def test_ask_cancelled_gives_queen(self, qapp, monkeypatch) -> None:
        monkeypatch.setattr(
            PromotionDialog, "exec", lambda self: QDialog.DialogCode.Rejected
        )
        assert PromotionDialog.ask(Color.WHITE) == PieceType.QUEEN

    def test_ask_accepted(self, qapp, monkeypatch) -> None:
        def fake_exec(self) -> QDialog.DialogCode:
            self._choose(PieceType.KNIGHT)
            return QDialog.DialogCode.Accepted

        monkeypatch.setattr(PromotionDialog, "exec", fake_exec)
        assert PromotionDialog.ask(Color.WHITE) == PieceType.KNIGHT
