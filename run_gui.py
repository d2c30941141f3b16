# run_gui.py
"""
Launch the Poetry Camera window.
Run with: python3 run_gui.py
"""

import os
os.environ.setdefault('QT_MAC_WANTS_LAYER', '1')

import sys
from pathlib import Path
import logging

# Allow running from a source checkout without installing
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from poetry_camera import __version__
from poetry_camera.config import DEFAULT_CONFIG as CFG

CONSOLE_LOG_LEVEL = logging.WARNING
logging.basicConfig(
    level=CFG.LOG_LEVEL,
    format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
)

# Console stays quiet; per-module files under CFG.LOG_DIR get everything
for handler in logging.root.handlers:
    if isinstance(handler, logging.StreamHandler):
        handler.setLevel(CONSOLE_LOG_LEVEL)


# High DPI policy must be set before QApplication
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

QApplication.setHighDpiScaleFactorRoundingPolicy(
    Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
)

from poetry_camera.gui.main_window import MainWindow
from poetry_camera.utils.log import reconfigure_loggers, setup_logger

log = setup_logger("run_gui")


def main() -> int:
    try:
        app = QApplication(sys.argv)
        app.setApplicationName("Poetry Camera")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("Poetry Camera")

        # Exceptions raised inside Qt slots land here instead of aborting
        sys.excepthook = handle_exception

        reconfigure_loggers(CFG.LOG_DIR)
        log.info(
            f"Poetry Camera {__version__} starting "
            f"(hold {CFG.LONG_PRESS_MS} ms to delete, {CFG.UNDO_WINDOW_S}s undo)"
        )

        window = MainWindow()
        window.show()
        return app.exec()

    except Exception as e:
        logging.critical(f"Poetry Camera failed to start: {e}", exc_info=True)
        return 1


def handle_exception(exc_type, exc_value, exc_traceback):
    """Log uncaught exceptions; Ctrl+C keeps its default behaviour."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


if __name__ == "__main__":
    sys.exit(main())
