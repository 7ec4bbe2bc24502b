"""Core domain layer — board, pieces and move generation, no Qt involved.

Quick start::

    from chessgrid.core import Board, MoveGenerator, PieceType, Position

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.moves_for(Position(7, 1), PieceType.KNIGHT))
"""

from chessgrid.core.board import BACK_RANK, BOARD_SIZE, Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import (
    EmptyCellError,
    IllegalDestinationError,
    MoveError,
    OutOfBoundsError,
    WrongKindError,
)
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "EmptyCellError",
    "IllegalDestinationError",
    "MoveError",
    "OutOfBoundsError",
    "WrongKindError",
    # Domain objects
    "BACK_RANK",
    "BOARD_SIZE",
    "Board",
    "MoveGenerator",
    "Piece",
    "Position",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
