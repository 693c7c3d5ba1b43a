"""Application entry point and setup for the Keydrill typing trainer."""

import logging
import sys

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from keydrill.core.settings import load_settings
from keydrill.core.vocabulary import Vocabulary
from keydrill.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Initialize the application, load resources, and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Keydrill")
    app.setApplicationDisplayName("Keydrill")

    app_font = QFont()
    app_font.setPointSize(11)
    app.setFont(app_font)

    settings = load_settings()
    vocabulary = Vocabulary.load()
    logging.info(
        "Loaded settings: %ss countdown, %d reaction hits, %d paragraph words",
        settings.game_duration,
        settings.reaction_target,
        settings.paragraph_words,
    )

    window = MainWindow(vocabulary=vocabulary, settings=settings)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(960, geometry.width()), min(720, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
