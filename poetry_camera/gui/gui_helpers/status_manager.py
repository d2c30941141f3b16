# poetry_camera/gui/gui_helpers/status_manager.py
"""
Status bar manager.
Shows short messages for navigation, deletions and errors.
"""

from PySide6.QtWidgets import QMainWindow

MESSAGE_TIMEOUT_MS = 4000


class StatusManager:
    """Manages status bar messages for the main window."""

    def __init__(self, main_window: QMainWindow):
        """
        Args:
            main_window: Parent main window with statusBar()
        """
        self.main_window = main_window

    def show_ready(self):
        """Show ready status."""
        self.main_window.statusBar().showMessage("Ready")

    def show_message(self, message: str, timeout_ms: int = MESSAGE_TIMEOUT_MS):
        """Show a transient message."""
        self.main_window.statusBar().showMessage(message, timeout_ms)

    def show_pending(self, shot_id, seconds_remaining: int):
        """Show undo countdown status."""
        self.main_window.statusBar().showMessage(
            f"Shot {shot_id} deleted - undo within {seconds_remaining}s"
        )

    def show_error(self, action: str, error_message: str):
        """Show error status."""
        self.main_window.statusBar().showMessage(f"Error: {action} failed ({error_message})")

    def current_message(self) -> str:
        return self.main_window.statusBar().currentMessage()
