"""Tests for GameState."""

import random
from collections.abc import Callable

import pytest

from chessgrid.core.board import BACK_RANK, Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import (
    EmptyCellError,
    IllegalDestinationError,
    MoveError,
    OutOfBoundsError,
)
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.game.state import GameState

P = Position
MakeState = Callable[..., GameState]


class _FixedChoice(random.Random):
    def __init__(self, index: int) -> None:
        super().__init__(0)
        self._index = index

    def choice(self, seq):  # type: ignore[override]
        return seq[self._index]


class TestGameStateSetup:
    def test_fresh_board_layout(self) -> None:
        snap = GameState().board_snapshot()
        assert [p.piece_type for p in snap[0]] == list(BACK_RANK)
        assert [p.piece_type for p in snap[7]] == list(BACK_RANK)
        assert all(p.color == Color.BLACK for p in snap[0] + snap[1])
        assert all(p.color == Color.WHITE for p in snap[6] + snap[7])
        assert all(p == Piece(Color.BLACK, PieceType.PAWN) for p in snap[1])
        assert all(p == Piece(Color.WHITE, PieceType.PAWN) for p in snap[6])
        empty = [cell for row in snap[2:6] for cell in row]
        assert len(empty) == 32
        assert all(cell is None for cell in empty)

    def test_turn_is_drawn_from_rng(self) -> None:
        assert GameState(rng=_FixedChoice(0)).whose_turn() == Color.WHITE
        assert GameState(rng=_FixedChoice(1)).whose_turn() == Color.BLACK

    def test_seeded_turn_is_reproducible(self) -> None:
        turns = {GameState(rng=random.Random(42)).turn for _ in range(5)}
        assert len(turns) == 1

    def test_both_colors_are_possible(self) -> None:
        rng = random.Random(7)
        turns = {GameState(rng=rng).turn for _ in range(64)}
        assert turns == {Color.WHITE, Color.BLACK}

    def test_custom_board(self) -> None:
        board = Board()
        state = GameState(board=board)
        assert state.board is board

    def test_advance_turn(self) -> None:
        state = GameState(rng=_FixedChoice(0))
        assert state.advance_turn() == Color.BLACK
        assert state.whose_turn() == Color.BLACK
        assert state.advance_turn() == Color.WHITE


class TestMovesAt:
    def test_empty_square(self, state: GameState) -> None:
        with pytest.raises(EmptyCellError):
            state.moves_at(P(4, 4))

    @pytest.mark.parametrize("pos", [P(-1, 0), P(0, 8), P(8, 8)])
    def test_out_of_bounds(self, state: GameState, pos: Position) -> None:
        with pytest.raises(OutOfBoundsError):
            state.moves_at(pos)

    def test_lone_knight_in_corner(self, make_state: MakeState) -> None:
        state = make_state("N7/8/8/8/8/8/8/8")
        assert set(state.moves_at(P(0, 0))) == {P(2, 1), P(1, 2)}

    def test_pawn_double_step_only_once(self, state: GameState) -> None:
        moves = state.moves_at(P(6, 3))
        assert P(5, 3) in moves
        assert P(4, 3) in moves

        state.apply_move(P(6, 3), P(5, 3))
        assert state.moves_at(P(5, 3)) == [P(4, 3)]

    def test_dispatches_on_occupant_kind(self, state: GameState) -> None:
        assert state.moves_at(P(7, 6)) == [P(5, 5), P(5, 7)]


class TestApplyMove:
    def test_relocates_and_marks_moved(self, state: GameState) -> None:
        piece = state.board[P(6, 4)]
        state.apply_move(P(6, 4), P(4, 4))

        snap = state.board_snapshot()
        assert snap[4][4] is piece
        assert snap[6][4] is None
        assert piece is not None and piece.has_moved

    def test_illegal_destination_leaves_board_unchanged(self, state: GameState) -> None:
        before = state.board.copy()
        with pytest.raises(IllegalDestinationError) as info:
            state.apply_move(P(6, 4), P(3, 4))
        assert info.value.origin == P(6, 4)
        assert info.value.destination == P(3, 4)
        assert state.board == before

    def test_failed_attempts_are_idempotent(self, state: GameState) -> None:
        before = state.board.copy()
        for origin, dest in [
            (P(6, 4), P(6, 4)),
            (P(4, 4), P(3, 4)),
            (P(9, 0), P(0, 0)),
            (P(7, 4), P(6, 4)),
        ]:
            with pytest.raises(MoveError):
                state.apply_move(origin, dest)
        assert state.board == before

    def test_empty_origin(self, state: GameState) -> None:
        with pytest.raises(EmptyCellError):
            state.apply_move(P(4, 4), P(3, 4))

    def test_capture_replaces_occupant(self, make_state: MakeState) -> None:
        state = make_state("8/8/8/3p4/8/8/8/3R4")
        rook = state.board[P(7, 3)]
        state.apply_move(P(7, 3), P(3, 3))
        assert state.board[P(3, 3)] is rook
        assert state.board.is_empty(P(7, 3))
        assert len(state.board.occupied()) == 1

    def test_adjacency_move_cannot_take_the_king(self, make_state: MakeState) -> None:
        state = make_state("8/8/8/5k2/4Pp2/8/8/8")
        before = state.board.copy()
        with pytest.raises(IllegalDestinationError):
            state.apply_move(P(4, 4), P(3, 5))
        assert state.board == before

    def test_turn_is_neither_checked_nor_advanced(self) -> None:
        state = GameState(rng=_FixedChoice(0))
        assert state.whose_turn() == Color.WHITE
        state.apply_move(P(1, 4), P(3, 4))  # black moves on white's turn
        state.apply_move(P(6, 4), P(4, 4))
        assert state.whose_turn() == Color.WHITE

    def test_moved_flag_stays_set(self, state: GameState) -> None:
        state.apply_move(P(7, 1), P(5, 2))
        state.apply_move(P(5, 2), P(7, 1))
        knight = state.board[P(7, 1)]
        assert knight is not None and knight.has_moved
