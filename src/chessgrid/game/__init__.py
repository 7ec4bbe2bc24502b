"""Game management layer — owns the board and exposes the move API.

Quick start::

    from chessgrid.core import Position
    from chessgrid.game import GameState

    state = GameState()
    state.apply_move(Position(6, 4), Position(4, 4))
"""

from chessgrid.game.state import GameState

__all__ = [
    "GameState",
]
