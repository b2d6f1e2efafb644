"""Application settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from rookery.ui.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ROOKERY_LOG_LEVEL"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Default"
    show_legal_moves: bool = True
    tile_size: int = 80  # px per square

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        """Defaults, with the log level overridable from the environment."""
        settings = cls()
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            settings.log_level = level.upper()
        return settings

    def theme(self) -> BoardTheme:
        theme = THEMES.get(self.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using default", self.board_theme)
            return BoardTheme.default()
        return theme
