"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from word_lookup.gui.main_window import MainWindow
from word_lookup.gui.utils import GUIConfigManager


def main():
    """Launch the Word Lookup GUI application."""
    config = GUIConfigManager.load_config()

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Word Lookup")
    app.setOrganizationName(config.settings_organization)

    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
