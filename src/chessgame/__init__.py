"""chessgame — a two-player chess rules engine with a PyQt6 front-end."""

__version__ = "0.1.0"
