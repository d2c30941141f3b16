# poetry_camera/gui/screens/__init__.py
"""The three phone-style screens hosted by the main window."""

from .camera_screen import CameraScreen
from .history_screen import HistoryScreen
from .settings_screen import SettingsScreen

__all__ = ["CameraScreen", "HistoryScreen", "SettingsScreen"]
