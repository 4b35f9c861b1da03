from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import os
from typing import Optional, Sequence

from ghanfoot.config import ORG_ID, APP_ID, VISIBLE_APP_NAME


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv) if argv is not None else [])

    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
