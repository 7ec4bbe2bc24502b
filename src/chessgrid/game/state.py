"""Game state — board ownership, turn bookkeeping and move application."""

from __future__ import annotations

import logging
import random

from chessgrid.core.board import Board, Snapshot
from chessgrid.core.enums import Color
from chessgrid.core.errors import EmptyCellError, IllegalDestinationError
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.position import Position

_LOGGER = logging.getLogger(__name__)


class GameState:
    """One game session: the board plus whose turn it is.

    The initial turn is drawn from *rng* so tests can pin it with a seeded
    ``random.Random``. ``apply_move`` neither checks nor advances the turn.

    This is a pure data/logic class — no threading, no UI.
    """

    __slots__ = ("board", "turn")

    def __init__(
        self,
        rng: random.Random | None = None,
        board: Board | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.board = board if board is not None else Board.initial()
        self.turn: Color = rng.choice((Color.WHITE, Color.BLACK))
        _LOGGER.debug("New game, %s to move", self.turn)

    # ── Queries ──────────────────────────────────────────────────────────

    def whose_turn(self) -> Color:
        return self.turn

    def board_snapshot(self) -> Snapshot:
        return self.board.snapshot()

    def moves_at(self, pos: Position) -> list[Position]:
        """Pseudo-legal destinations for the piece on *pos*.

        Raises :class:`OutOfBoundsError` or :class:`EmptyCellError` when there
        is nothing to move.
        """
        piece = self.board.cell(pos)
        if piece is None:
            raise EmptyCellError(pos)
        return MoveGenerator(self.board).moves_for(pos, piece.piece_type)

    # ── Commands ─────────────────────────────────────────────────────────

    def apply_move(self, origin: Position, dest: Position) -> None:
        """Relocate the piece on *origin* to *dest*, capturing any occupant.

        The board is untouched when a :class:`MoveError` is raised.
        """
        if dest not in self.moves_at(origin):
            raise IllegalDestinationError(origin, dest)

        piece = self.board.cell(origin)
        assert piece is not None
        captured = self.board.cell(dest)

        self.board.place(dest, piece)
        self.board.clear(origin)
        piece.mark_moved()

        if captured is not None:
            _LOGGER.debug("Captured %s on %s", captured, dest)
        _LOGGER.debug("Moved %s %s %s -> %s", piece.color, piece.piece_type, origin, dest)

    def advance_turn(self) -> Color:
        """Hand the turn to the other side. Not called by :meth:`apply_move`."""
        self.turn = self.turn.opposite
        return self.turn
