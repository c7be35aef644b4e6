"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def default_save_path() -> Path:
    return Path.home() / ".chessgame" / "save.json"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Persistence
    save_path: Path = field(default_factory=default_save_path)
    load_on_start: bool = True
    ask_save_on_exit: bool = True

    # Board
    board_theme: str = "Classic"
    tile_size: int = 80  # px per square
    show_legal_moves: bool = True
