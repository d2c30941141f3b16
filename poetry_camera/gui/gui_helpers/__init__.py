# poetry_camera/gui/gui_helpers/__init__.py
"""
GUI helper modules for the screens.

Separates concerns into focused, testable components:
- widgets: shot tiles, undo banner
- managers: status bar messages
"""

from .shot_item_widget import ShotItemWidget
from .undo_banner import UndoBanner, CountdownRingButton
from .status_manager import StatusManager

__all__ = [
    "ShotItemWidget",
    "UndoBanner",
    "CountdownRingButton",
    "StatusManager",
]
