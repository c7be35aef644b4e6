"""Visual theme constants and QSS styles."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece outline
    highlight_to: QColor  # legal move dots
    highlight_check: QColor  # king in check
    piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 255),
            highlight_to=QColor(0, 0, 0, 60),
            highlight_check=QColor(255, 0, 0, 140),
            piece=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 210),
            dark_square=QColor(118, 150, 86),
            highlight_from=QColor(255, 255, 255),
            highlight_to=QColor(0, 0, 0, 60),
            highlight_check=QColor(255, 0, 0, 140),
            piece=QColor(20, 20, 20),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme registered under *name*; unknown names fall back to Classic."""
        factories = {"Classic": cls.default, "Green": cls.green}
        return factories.get(name, cls.default)()


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #2b2b2b;
    color: #e0e0e0;
}
QPushButton {
    background-color: #3c3f41;
    border: 1px solid #555555;
    border-radius: 4px;
    padding: 4px 12px;
}
QPushButton:hover {
    background-color: #4b4f52;
}
QLabel#statusLabel {
    font-size: 14px;
    padding: 4px;
}
"""
