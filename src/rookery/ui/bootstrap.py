"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from rookery.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    """Route library loggers to stderr at the configured level."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("Rookery")
    app.setStyle("Fusion")


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from rookery.ui.main_window import MainWindow

    settings = AppSettings.from_env()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Window shown; starting event loop")

    return app.exec()
