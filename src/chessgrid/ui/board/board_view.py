"""BoardView — keeps the board scene fitted to the widget."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chessgrid.game.state import GameState
from chessgrid.ui.board.board_scene import BoardScene

_MIN_SIDE = 320


class BoardView(QGraphicsView):
    """Shows one :class:`BoardScene`, scaled with its aspect ratio kept.

    Signals:
        move_made(Position, Position): Re-emitted from the scene.
    """

    move_made = pyqtSignal(object, object)

    def __init__(self, state: GameState, parent: QWidget | None = None) -> None:
        scene = BoardScene(state)
        super().__init__(scene, parent)
        self._scene = scene

        off = Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        self.setHorizontalScrollBarPolicy(off)
        self.setVerticalScrollBarPolicy(off)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(_MIN_SIDE, _MIN_SIDE)

        scene.move_made.connect(self.move_made)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def set_state(self, state: GameState) -> None:
        """Swap in another game and refit."""
        self._scene.set_state(state)
        self._fit()

    def _fit(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit()

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit()
