"""
Application Initialization
==========================
Builds the configuration, the main window and starts the Qt event loop.
"""
import logging
import sys

from PySide6.QtCore import QSettings

from linecanvas.application import create_app
from linecanvas.config import load_config
from linecanvas.logging_config import setup_logging_from_settings
from linecanvas.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # QSettings needs the organization/application names set by create_app()
    app = create_app()
    settings = QSettings()

    # Set logging/level=DEBUG to trace every line operation
    setup_logging_from_settings(settings)

    config = load_config(settings)
    logger.info(f"Starting with {config}")

    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
