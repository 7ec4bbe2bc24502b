"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from chessgrid.core.board import Board
from chessgrid.core.notation import board_from_placement
from chessgrid.game.state import GameState

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


def _make_state(placement: str | None = None, seed: int = 0) -> GameState:
    """Game with a pinned turn, on the starting board or *placement*."""
    board = board_from_placement(placement) if placement is not None else Board.initial()
    return GameState(rng=random.Random(seed), board=board)


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory for games built from a placement string with a pinned turn."""
    return _make_state


@pytest.fixture
def state() -> GameState:
    return _make_state()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
