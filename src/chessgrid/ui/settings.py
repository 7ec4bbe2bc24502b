"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True

    # Game
    seed: int | None = None  # pins the randomly drawn first turn

    # Diagnostics
    log_level: str = "WARNING"
