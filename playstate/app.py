"""Application entry point and setup for playstate."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from playstate import config
from playstate.core.levels import LevelCatalogue
from playstate.core.persistence import PersistenceStore
from playstate.core.session import SessionController
from playstate.ui.audio import AudioMixer
from playstate.ui.game_clock import QtGameClock
from playstate.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Build the session, wire it to the Qt shell, and start the event loop."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("playstate")
    app.setApplicationDisplayName("playstate")

    catalogue = LevelCatalogue()
    store = PersistenceStore()
    audio = AudioMixer(app)
    clock = QtGameClock(parent=app)

    window = MainWindow(catalogue=catalogue, clock=clock)
    controller = SessionController(
        store=store,
        presentation=window,
        audio=audio,
        scenes=window,
        clock=clock,
        catalogue=catalogue,
    )
    window.bind(controller)
    controller.on_init()

    window.show()
    sys.exit(app.exec())
