"""Pseudo-legal destination generation, one routine per piece kind."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from chessgrid.core.board import BOARD_SIZE, Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import EmptyCellError, OutOfBoundsError, WrongKindError
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position

# (drow, dcol)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Left first, then right.
_SIDES: tuple[int, int] = (-1, 1)


def _unique(positions: Iterable[Position]) -> list[Position]:
    seen: set[Position] = set()
    result: list[Position] = []
    for pos in positions:
        if pos not in seen:
            seen.add(pos)
            result.append(pos)
    return result


class MoveGenerator:
    """Enumerates destinations for the piece standing on a square.

    Moves are pseudo-legal: king safety is never considered. Sliding pieces
    scan every square of each ray up to the board edge and do not stop at the
    first piece in the way. The generator only reads the board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def moves_for(self, pos: Position, piece_type: PieceType) -> list[Position]:
        """Destinations for the *piece_type* routine applied at *pos*."""
        match piece_type:
            case PieceType.PAWN:
                return self.pawn_moves(pos)
            case PieceType.KNIGHT:
                return self.knight_moves(pos)
            case PieceType.BISHOP:
                return self.bishop_moves(pos)
            case PieceType.ROOK:
                return self.rook_moves(pos)
            case PieceType.QUEEN:
                return self.queen_moves(pos)
            case PieceType.KING:
                return self.king_moves(pos)
        raise ValueError(f"Unknown piece type: {piece_type!r}")

    def pawn_moves(self, pos: Position) -> list[Position]:
        pawn = self._expect(pos, PieceType.PAWN)
        board = self._board
        forward = pawn.color.forward
        moves: list[Position] = []

        one_step = pos.offset(forward, 0)
        if self._probe(board.is_empty, one_step):
            moves.append(one_step)

        # The intermediate square is not checked.
        two_step = pos.offset(2 * forward, 0)
        if not pawn.has_moved and self._probe(board.is_empty, two_step):
            moves.append(two_step)

        for side in _SIDES:
            target = pos.offset(forward, side)
            if self._probe(lambda p: board.is_capturable(pawn.color, p), target):
                moves.append(target)

        moves.extend(self._adjacent_enemy_diagonals(pos, pawn.color))
        return _unique(moves)

    def pawn_en_passant(self, pos: Position) -> list[Position]:
        """Diagonal-forward squares beside a same-row enemy of any kind.

        A static adjacency check: no record of a previous double step is
        consulted.
        """
        pawn = self._expect(pos, PieceType.PAWN)
        return self._adjacent_enemy_diagonals(pos, pawn.color)

    def knight_moves(self, pos: Position) -> list[Position]:
        knight = self._expect(pos, PieceType.KNIGHT)
        return self._gen_steps(pos, knight.color, KNIGHT_OFFSETS)

    def bishop_moves(self, pos: Position) -> list[Position]:
        bishop = self._expect(pos, PieceType.BISHOP)
        return self._gen_rays(pos, bishop.color, BISHOP_DIRS)

    def rook_moves(self, pos: Position) -> list[Position]:
        rook = self._expect(pos, PieceType.ROOK)
        moves = self._gen_rays(pos, rook.color, ROOK_DIRS)
        moves.extend(self._adjacent_enemy_diagonals(pos, rook.color))
        return _unique(moves)

    def rook_castling(self, pos: Position) -> list[Position]:
        """Same-row adjacency heuristic, forward relative to the rook's color.

        No king is involved and no rook path is checked.
        """
        rook = self._expect(pos, PieceType.ROOK)
        return self._adjacent_enemy_diagonals(pos, rook.color)

    def queen_moves(self, pos: Position) -> list[Position]:
        queen = self._expect(pos, PieceType.QUEEN)
        return self._gen_rays(pos, queen.color, QUEEN_DIRS)

    def king_moves(self, pos: Position) -> list[Position]:
        king = self._expect(pos, PieceType.KING)
        return self._gen_steps(pos, king.color, KING_OFFSETS)

    # -- Helpers (private) --------------------------------------------------

    def _expect(self, pos: Position, piece_type: PieceType) -> Piece:
        piece = self._board.cell(pos)
        if piece is None:
            raise EmptyCellError(pos)
        if piece.piece_type != piece_type:
            raise WrongKindError(pos, piece_type)
        return piece

    @staticmethod
    def _probe(predicate: Callable[[Position], bool], pos: Position) -> bool:
        """Evaluate a board predicate, treating off-board squares as ``False``."""
        try:
            return predicate(pos)
        except OutOfBoundsError:
            return False

    def _is_open(self, color: Color, pos: Position) -> bool:
        """Empty or capturable (enemy, non-King)."""
        board = self._board
        return self._probe(
            lambda p: board.is_empty(p) or board.is_capturable(color, p), pos
        )

    def _gen_steps(
        self,
        pos: Position,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Position]:
        moves: list[Position] = []
        for drow, dcol in offsets:
            target = pos.offset(drow, dcol)
            if self._is_open(color, target):
                moves.append(target)
        return moves

    def _gen_rays(
        self,
        pos: Position,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Position]:
        moves: list[Position] = []
        for drow, dcol in directions:
            for dist in range(1, BOARD_SIZE):
                target = pos.offset(drow * dist, dcol * dist)
                if not self._board.is_in_bounds(target):
                    break
                # Every square is tested on its own; blockers do not end the ray.
                if self._is_open(color, target):
                    moves.append(target)
        return moves

    def _adjacent_enemy_diagonals(self, pos: Position, color: Color) -> list[Position]:
        board = self._board
        forward = color.forward
        moves: list[Position] = []
        for side in _SIDES:
            neighbour = pos.offset(0, side)
            target = pos.offset(forward, side)
            # Any enemy neighbour counts, King included; the target must be open.
            if self._probe(
                lambda p: board.is_enemy(color, p), neighbour
            ) and self._is_open(color, target):
                moves.append(target)
        return moves
