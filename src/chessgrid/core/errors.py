"""Move errors raised by the board, the generator and the game state."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessgrid.core.enums import PieceType
    from chessgrid.core.position import Position


class MoveError(ValueError):
    """Base class for every recoverable failure of a move query or command."""


class OutOfBoundsError(MoveError, IndexError):
    """A coordinate lies outside the 8x8 grid."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"Position {position} is outside the board")
        self.position = position


class EmptyCellError(MoveError):
    """A query targets a square with no piece on it."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"No piece at {position}")
        self.position = position


class WrongKindError(MoveError):
    """A kind-specific routine was invoked on a piece of another kind."""

    def __init__(self, position: Position, expected: PieceType) -> None:
        super().__init__(f"the given position was not a {expected!s}: {position}")
        self.position = position
        self.expected = expected


class IllegalDestinationError(MoveError):
    """The requested target is not among the generated destinations."""

    def __init__(self, origin: Position, destination: Position) -> None:
        super().__init__(f"Illegal destination {destination} for piece at {origin}")
        self.origin = origin
        self.destination = destination
