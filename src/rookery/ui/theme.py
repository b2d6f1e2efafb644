"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    legal_dot: QColor  # empty legal target
    legal_capture: QColor  # occupied legal target
    highlight_check: QColor  # king in check
    help_veil: QColor  # wash over the board while help is shown
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(245, 224, 139, 128),  # pale yellow
            legal_dot=QColor(128, 128, 128),
            legal_capture=QColor(255, 0, 0, 128),
            highlight_check=QColor(255, 0, 0),
            help_veil=QColor(255, 255, 255, 128),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        """Plain black and white squares."""
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(0, 0, 0),
            highlight_selected=QColor(245, 224, 139, 128),
            legal_dot=QColor(128, 128, 128),
            legal_capture=QColor(255, 0, 0, 128),
            highlight_check=QColor(255, 0, 0),
            help_veil=QColor(255, 255, 255, 128),
            white_piece=QColor(198, 192, 167),
            black_piece=QColor(47, 47, 47),
        )


THEMES: dict[str, BoardTheme] = {
    "Default": BoardTheme.default(),
    "Classic": BoardTheme.classic(),
}
