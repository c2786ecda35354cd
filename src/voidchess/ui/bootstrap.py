"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "VOIDCHESS_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> int:
    """Configure root logging from *level* or ``$VOIDCHESS_LOG_LEVEL``.

    Unknown level names fall back to ``WARNING``. Returns the numeric level.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or _DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)
    logging.getLogger("voidchess").setLevel(numeric)
    return numeric


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from voidchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Voidchess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from voidchess.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.info("Voidchess started")

    return app.exec()
