"""
Application Initialization
==========================
Builds the host application, runs the startup stages (which generate the
point cloud) and opens the main window.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from pointfield.logging_config import setup_logging
from pointfield.app.application import Application
from pointfield.app.plugin import PointGenerationPlugin
from pointfield.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_application() -> Application:
    app = Application()
    app.add_plugin(PointGenerationPlugin())
    app.run_startup()
    return app


def main() -> None:
    setup_logging(level=logging.INFO)

    qt_app = QApplication(sys.argv)
    qt_app.setApplicationName("pointfield")

    try:
        app = build_application()
    except ValueError as e:
        logger.error(f"Startup failed: {e}")
        raise

    window = MainWindow(app)
    window.show()

    sys.exit(qt_app.exec())


if __name__ == "__main__":
    main()
