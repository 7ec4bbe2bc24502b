"""Position — a (row, col) coordinate on the grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable grid coordinate.

    Row 0 is the black home rank, row 7 the white one. The coordinate is not
    range-checked here; use :meth:`Board.is_in_bounds` before dereferencing.
    """

    row: int
    col: int

    def offset(self, drow: int, dcol: int) -> Position:
        """Coordinate shifted by (*drow*, *dcol*); may fall off the board."""
        return Position(self.row + drow, self.col + dcol)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
