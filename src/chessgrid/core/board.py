"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import OutOfBoundsError
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position

BOARD_SIZE = 8

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

Snapshot = tuple[tuple[Piece | None, ...], ...]


class Board:
    """Mutable grid of optional occupants, indexed ``[row][col]``.

    The board answers occupancy questions only; it never decides whether a
    move is legal.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_in_bounds(pos: Position) -> bool:
        return 0 <= pos.row < BOARD_SIZE and 0 <= pos.col < BOARD_SIZE

    def cell(self, pos: Position) -> Piece | None:
        """Occupant of *pos*, or ``None`` if the cell is empty."""
        if not self.is_in_bounds(pos):
            raise OutOfBoundsError(pos)
        return self._cells[pos.row][pos.col]

    def __getitem__(self, pos: Position) -> Piece | None:
        return self.cell(pos)

    def is_empty(self, pos: Position) -> bool:
        return self.cell(pos) is None

    def is_enemy(self, mover: Color, pos: Position) -> bool:
        """Whether *pos* holds a piece of the side opposing *mover*."""
        piece = self.cell(pos)
        return piece is not None and piece.color != mover

    def is_capturable(self, mover: Color, pos: Position) -> bool:
        """Whether *mover* may capture the occupant of *pos*.

        Kings are never capturable.
        """
        piece = self.cell(pos)
        return (
            piece is not None
            and piece.color != mover
            and piece.piece_type != PieceType.KING
        )

    # -- Mutation -------------------------------------------------------------

    def place(self, pos: Position, piece: Piece) -> None:
        """Put *piece* on *pos*, replacing any occupant."""
        if not self.is_in_bounds(pos):
            raise OutOfBoundsError(pos)
        self._cells[pos.row][pos.col] = piece

    def clear(self, pos: Position) -> None:
        if not self.is_in_bounds(pos):
            raise OutOfBoundsError(pos)
        self._cells[pos.row][pos.col] = None

    # -- Views / copying ------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Read-only rows view for rendering."""
        return tuple(tuple(row) for row in self._cells)

    def occupied(self) -> list[tuple[Position, Piece]]:
        """All ``(position, piece)`` pairs, row-major."""
        return [
            (Position(r, c), piece)
            for r, row in enumerate(self._cells)
            for c, piece in enumerate(row)
            if piece is not None
        ]

    def copy(self) -> Board:
        """Deep copy: every piece is duplicated so no cell is aliased."""
        b = Board()
        b._cells = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._cells
        ]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting placement: black on rows 0-1, white on rows 6-7."""
        b = cls()
        for col, pt in enumerate(BACK_RANK):
            b._cells[0][col] = Piece(Color.BLACK, pt)
            b._cells[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            b._cells[6][col] = Piece(Color.WHITE, PieceType.PAWN)
            b._cells[7][col] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._cells):
            rows.append(f"{r} {' '.join(str(p) if p else '.' for p in row)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
