# poetry_camera/gui/controllers/__init__.py
"""
GUI controller modules.

- ui_builder: Widget creation and styling
- navigation_controller: Screen switching with fade transitions
"""

from .ui_builder import UIBuilder
from .navigation_controller import NavigationController

__all__ = [
    "UIBuilder",
    "NavigationController",
]
