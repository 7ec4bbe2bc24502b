"""Text placement notation for boards.

Eight ``/``-separated rows, row 0 first, using FEN piece letters (uppercase =
white) and digits for runs of empty cells::

    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR

Moved flags are not encoded; parsed pieces are unmoved.
"""

from __future__ import annotations

from chessgrid.core.board import BOARD_SIZE, Board
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

# ASCII only; str.isdigit also accepts superscripts and other scripts.
_DIGITS = "0123456789"


def board_from_placement(text: str) -> Board:
    """Parse a placement string into a :class:`Board`."""
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 rows): {text!r}")

    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch in _DIGITS:
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {text!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {text!r}")
                try:
                    piece = Piece.from_char(ch)
                except ValueError:
                    raise ValueError(
                        f"Invalid piece character {ch!r}: {text!r}"
                    ) from None
                board.place(Position(row, col), piece)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {text!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement row width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialize *board* to a placement string."""
    rows: list[str] = []
    for cells in board.snapshot():
        parts: list[str] = []
        empty = 0
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(str(piece))
        if empty:
            parts.append(str(empty))
        rows.append("".join(parts))
    return "/".join(rows)
