"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # candidate destinations
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark overlay
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Preset by settings name; unknown names fall back to the default."""
        presets = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return presets.get(name, cls.default)()
