"""Save-file helpers: the board and side to move as JSON on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

_LOGGER = logging.getLogger(__name__)


class SnapshotHost(Protocol):
    """Subset of the controller API required to save and restore a game."""

    def snapshot(self) -> dict: ...

    def load_snapshot(self, data: object) -> bool: ...


def save_game(host: SnapshotHost, file_path: Path) -> Path:
    """Write the current game to *file_path* and return the path written."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(host.snapshot(), indent=2)

    # The previous save survives a failed write.
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(file_path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    _LOGGER.info("Game saved to %s", file_path)
    return file_path


def load_game(host: SnapshotHost, file_path: Path) -> bool:
    """Restore a game from *file_path*.

    Returns ``False`` and leaves the current game untouched when the file
    is missing, unreadable, not JSON, or describes an invalid position.
    """
    if not file_path.is_file():
        return False

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as exc:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and
        # over-long integer literals.
        _LOGGER.warning("Cannot read saved game %s: %s", file_path, exc)
        return False

    return host.load_snapshot(data)
