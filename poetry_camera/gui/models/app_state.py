# poetry_camera/gui/models/app_state.py
"""App-level navigation and camera toggles. No Qt dependencies."""

from __future__ import annotations
from enum import Enum


class Screen(str, Enum):
    CAMERA = "camera"
    HISTORY = "history"
    SETTINGS = "settings"


class AppState:
    """Current screen and flash toggle."""

    def __init__(self):
        self.screen = Screen.CAMERA
        self.flash_on = False

    def navigate(self, screen: Screen) -> bool:
        """Switch screens. Returns False if already there."""
        screen = Screen(screen)
        if screen == self.screen:
            return False
        self.screen = screen
        return True

    def back(self) -> bool:
        return self.navigate(Screen.CAMERA)

    def toggle_flash(self) -> bool:
        self.flash_on = not self.flash_on
        return self.flash_on
