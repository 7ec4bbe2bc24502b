"""MainWindow — top-level window holding the board and a status bar."""

from __future__ import annotations

import random

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from chessgrid.core.position import Position
from chessgrid.game.state import GameState
from chessgrid.ui.board.board_view import BoardView
from chessgrid.ui.settings import AppSettings
from chessgrid.ui.styles.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window for chessgrid."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chessgrid")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._settings = settings if settings is not None else AppSettings()
        self._state = GameState(rng=random.Random(self._settings.seed))

        self._board_view = BoardView(self._state, self)
        self.setCentralWidget(self._board_view)

        self._turn_label = QLabel()
        self._last_move_label = QLabel()
        status = QStatusBar(self)
        status.addWidget(self._turn_label)
        status.addPermanentWidget(self._last_move_label)
        self.setStatusBar(status)

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self.menuBar().addMenu("Game").addAction(self._act_new_game)

        self._board_view.move_made.connect(self._on_move_made)
        self._apply_settings()
        self._refresh_status()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def new_game(self) -> None:
        """Start over from the initial placement with a fresh random turn."""
        self._state = GameState(rng=random.Random(self._settings.seed))
        self._board_view.set_state(self._state)
        self._last_move_label.clear()
        self._refresh_status()

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    @property
    def last_move_text(self) -> str:
        return self._last_move_label.text()

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(self._settings.board_theme))
        scene.set_show_legal_moves(self._settings.show_legal_moves)

    def _on_move_made(self, origin: Position, dest: Position) -> None:
        self._last_move_label.setText(f"{origin} → {dest}")
        self._refresh_status()

    def _refresh_status(self) -> None:
        self._turn_label.setText(f"Turn: {self._state.whose_turn()!s}")
