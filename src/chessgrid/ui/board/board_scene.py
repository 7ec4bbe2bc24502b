"""BoardScene — QGraphicsScene that draws the grid and lets the user move."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgrid.core.board import BOARD_SIZE
from chessgrid.core.enums import Color
from chessgrid.core.errors import MoveError
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.game.state import GameState
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the grid, pieces and the current selection.

    The selected square and its highlighted destinations are kept here, not
    in the game state.

    Signals:
        move_made(Position, Position): Emitted after a move was applied.
    """

    move_made = pyqtSignal(object, object)

    TILE = 80  # px per square

    def __init__(self, state: GameState, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state = state
        self._show_legal_moves = True

        # Interaction state
        self._selected: Position | None = None
        self._destinations: list[Position] = []

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Position | None:
        return self._selected

    @property
    def destinations(self) -> list[Position]:
        return list(self._destinations)

    def set_state(self, state: GameState) -> None:
        """Display another game (full redraw of pieces)."""
        self._state = state
        self._clear_selection()
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide destination highlights."""
        self._show_legal_moves = visible
        if self._selected is not None:
            self._select_square(self._selected)

    def click_square(self, pos: Position) -> None:
        """Handle a click on *pos*: move to a highlighted square or (re)select."""
        if self._selected is not None and pos in self._destinations:
            origin = self._selected
            self._clear_selection()
            try:
                self._state.apply_move(origin, pos)
            except MoveError as exc:
                _LOGGER.warning("Move rejected: %s", exc)
                return
            self._sync_pieces()
            self.move_made.emit(origin, pos)
            return

        self._select_square(pos)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.TILE
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                is_light = (row + col) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[Position(row, col)] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the board snapshot."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(int(t * 0.75))
        for row, cells in enumerate(self._state.board_snapshot()):
            for col, piece in enumerate(cells):
                if piece is None:
                    continue
                item = QGraphicsSimpleTextItem(piece.symbol)
                item.setFont(font)
                item.setBrush(QBrush(self._piece_color(piece)))
                bounds = item.boundingRect()
                item.setPos(
                    col * t + (t - bounds.width()) / 2,
                    row * t + (t - bounds.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[Position(row, col)] = item

    def _piece_color(self, piece: Piece) -> QColor:
        if piece.color == Color.WHITE:
            return self._theme.white_piece
        return self._theme.black_piece

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        pos = self._scene_to_position(event.scenePos())
        if pos is None:
            self._clear_selection()
        else:
            self.click_square(pos)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, pos: Position) -> None:
        self._clear_selection()
        try:
            destinations = self._state.moves_at(pos)
        except MoveError as exc:
            _LOGGER.debug("Nothing to select: %s", exc)
            return

        self._selected = pos
        self._destinations = destinations
        self._highlight_items.append(
            self._make_highlight(pos, self._theme.highlight_from)
        )
        if self._show_legal_moves:
            for dest in destinations:
                self._highlight_items.append(
                    self._make_highlight(dest, self._theme.highlight_to)
                )

    def _clear_selection(self) -> None:
        self._selected = None
        self._destinations = []
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _scene_to_position(self, point: QPointF) -> Position | None:
        """Scene point → board position, ``None`` off the grid."""
        t = self.TILE
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Position(row, col)

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(pos.col * t, pos.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
