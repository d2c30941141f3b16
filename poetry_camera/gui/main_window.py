# poetry_camera/gui/main_window.py
"""
Main application window - UI orchestration only.
State and deletion logic delegated to models and core.

Layout:
1. Phone-sized card (fixed 360x640) hosting a stacked widget
2. Screens: Camera (default), History, Settings
3. Status bar - deletions, undo countdown, errors
"""

from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStackedWidget

from .controllers import NavigationController
from .gui_helpers import StatusManager
from .models import AppState, Screen, SettingsModel
from .screens import CameraScreen, HistoryScreen, SettingsScreen

from ..config import DEFAULT_CONFIG as CFG
from ..core import ItemStore, Scheduler
from ..utils.log import setup_logger, clear_logger_configuration

log = setup_logger("gui.main_window")


class MainWindow(QMainWindow):
    """Main application window with clean separation of concerns."""

    def __init__(self,
                 store: Optional[ItemStore] = None,
                 scheduler: Optional[Scheduler] = None):
        """
        Args:
            store: Shots shown in History (default: CFG.INITIAL_SHOT_COUNT placeholders)
            scheduler: Timer provider override for the history screen
        """
        super().__init__()
        self.setWindowTitle("Poetry Camera")
        self.setFixedSize(CFG.WINDOW_WIDTH, CFG.WINDOW_HEIGHT)

        self.state = AppState()
        self.settings = SettingsModel()
        self.store = store if store is not None else ItemStore.with_placeholder_shots(CFG.INITIAL_SHOT_COUNT)
        self.status_manager = StatusManager(self)

        self._setup_ui(scheduler)
        self._connect_signals()
        self.status_manager.show_ready()

    def _setup_ui(self, scheduler: Optional[Scheduler]):
        """Build the stacked screens."""
        self.stack = QStackedWidget()
        self.stack.setStyleSheet("background-color: #FFFFFF;")
        self.setCentralWidget(self.stack)

        self.camera_screen = CameraScreen(flash_on=self.state.flash_on)
        self.history_screen = HistoryScreen(self.store, scheduler=scheduler)
        self.settings_screen = SettingsScreen(self.settings)

        self.navigation = NavigationController(
            self.stack,
            self.state,
            on_screen_changed=self._on_screen_changed,
        )
        self.navigation.register(Screen.CAMERA, self.camera_screen)
        self.navigation.register(Screen.HISTORY, self.history_screen)
        self.navigation.register(Screen.SETTINGS, self.settings_screen)

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        # Camera
        self.camera_screen.history_clicked.connect(lambda: self._navigate(Screen.HISTORY))
        self.camera_screen.settings_clicked.connect(lambda: self._navigate(Screen.SETTINGS))
        self.camera_screen.flash_toggled.connect(self._toggle_flash)
        self.camera_screen.shutter_clicked.connect(
            lambda: self.status_manager.show_message("Capture is not available in this build")
        )

        # History
        self.history_screen.back_clicked.connect(self.navigation.back)
        self.history_screen.pending_changed.connect(self._on_pending_changed)
        self.history_screen.shot_deleted.connect(
            lambda shot_id: self.status_manager.show_message(f"Shot {shot_id} deleted")
        )

        # Settings
        self.settings_screen.back_clicked.connect(self.navigation.back)
        self.settings_screen.settings_changed.connect(self._on_settings_changed)

    # --- Navigation ---

    def _navigate(self, screen: Screen):
        try:
            self.navigation.navigate(screen)
        except Exception as e:
            log.error(f"Navigation to {screen.value} failed: {e}", exc_info=True)
            self.status_manager.show_error("navigation", str(e))

    def _on_screen_changed(self, screen: Screen):
        log.info(f"Screen: {screen.value}")
        self.status_manager.show_ready()

    # --- Camera ---

    def _toggle_flash(self):
        on = self.state.toggle_flash()
        self.camera_screen.set_flash(on)
        self.status_manager.show_message("Flash on" if on else "Flash off")

    # --- History ---

    def _on_pending_changed(self, snapshot):
        if snapshot is None:
            self.status_manager.show_ready()
        else:
            self.status_manager.show_pending(snapshot.pending_id, snapshot.seconds_remaining)

    # --- Settings ---

    def _on_settings_changed(self, poem_type: str, temperature: float):
        log.debug(f"Settings: {poem_type} @ {temperature:.2f}")

    def closeEvent(self, event):
        """Handle application close - settle pending work and close log files."""
        try:
            self.history_screen.shutdown()
            log.info("Application closed cleanly")
            clear_logger_configuration()
        except Exception as e:
            log.warning(f"Cleanup warning on close: {e}")

        event.accept()
