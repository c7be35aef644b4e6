"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Headless Linux runners have no display server; Qt needs the offscreen plugin.
_HEADLESS = sys.platform.startswith("linux") and not (
    os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
)
if _HEADLESS:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

Square = tuple[int, int]


@pytest.fixture
def fools_mate() -> list[tuple[Square, Square]]:
    """Shortest checkmate in this board layout; White is mated on move four."""
    return [
        ((1, 2), (2, 2)),
        ((6, 3), (4, 3)),
        ((1, 1), (3, 1)),
        ((7, 4), (3, 0)),
    ]


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication for the whole session (Qt allows only one)."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close top-level widgets left behind by a test under ``tests/ui``."""
    if "ui" not in Path(str(request.node.fspath)).parts:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
