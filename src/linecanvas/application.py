from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

from linecanvas import __version__

ORG_ID = "linecanvas"
APP_ID = "linecanvas"

VISIBLE_APP_NAME = "Line Canvas"


def create_app() -> QApplication:
    """
    Create and configure the QApplication instance.

    Also fixes where `QSettings()` reads from: an INI file under the
    "linecanvas" organization, shared by the config and logging setup.
    Reuses an existing instance, so tests can call it more than once.
    """
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QCoreApplication.setApplicationVersion(__version__)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
