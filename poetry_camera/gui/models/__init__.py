# poetry_camera/gui/models/__init__.py
"""GUI data models - no Qt dependencies."""

from .app_state import AppState, Screen
from .settings_model import SettingsModel

__all__ = ["AppState", "Screen", "SettingsModel"]
