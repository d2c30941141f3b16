# poetry_camera/gui/controllers/navigation_controller.py
"""
Screen navigation controller.
Keeps AppState and the stacked widget in sync and fades screens in.
"""

from typing import Callable, Dict, Optional

from PySide6.QtCore import QPropertyAnimation, QEasingCurve
from PySide6.QtWidgets import QStackedWidget, QWidget, QGraphicsOpacityEffect

from ..models import AppState, Screen
from ...config import DEFAULT_CONFIG as CFG
from ...utils.log import setup_logger

log = setup_logger("gui.navigation_controller")


class NavigationController:
    """
    Switches between registered screens.

    Screens may implement on_enter() / on_leave(); they are called when the
    screen becomes current / stops being current.
    """

    def __init__(self,
                 stack: QStackedWidget,
                 state: AppState,
                 on_screen_changed: Optional[Callable] = None,
                 transition_ms: Optional[int] = None):
        """
        Args:
            stack: Stacked widget hosting the screens
            state: Shared app state
            on_screen_changed: Callback(screen) after every switch
            transition_ms: Fade-in duration (default: CFG.TRANSITION_MS)
        """
        self.stack = stack
        self.state = state
        self.on_screen_changed = on_screen_changed
        self.transition_ms = CFG.TRANSITION_MS if transition_ms is None else transition_ms
        self._screens: Dict[Screen, QWidget] = {}
        self._animation: Optional[QPropertyAnimation] = None
        self._animated_widget: Optional[QWidget] = None

    def register(self, screen: Screen, widget: QWidget):
        """Add a screen widget to the stack."""
        self._screens[screen] = widget
        self.stack.addWidget(widget)
        if screen == self.state.screen:
            self.stack.setCurrentWidget(widget)

    def widget_for(self, screen: Screen) -> QWidget:
        return self._screens[screen]

    def navigate(self, screen: Screen):
        """Show a screen, notifying the outgoing and incoming widgets."""
        previous = self.state.screen
        if not self.state.navigate(screen):
            return

        outgoing = self._screens.get(previous)
        if outgoing is not None and hasattr(outgoing, "on_leave"):
            outgoing.on_leave()

        incoming = self._screens[self.state.screen]
        self.stack.setCurrentWidget(incoming)
        if hasattr(incoming, "on_enter"):
            incoming.on_enter()

        self._fade_in(incoming)
        log.debug(f"[nav] {previous.value} -> {self.state.screen.value}")

        if self.on_screen_changed:
            self.on_screen_changed(self.state.screen)

    def back(self):
        self.navigate(Screen.CAMERA)

    def _fade_in(self, widget: QWidget):
        if self.transition_ms <= 0:
            return

        if self._animation is not None:
            self._animation.stop()
            self._animated_widget.setGraphicsEffect(None)

        effect = QGraphicsOpacityEffect(widget)
        widget.setGraphicsEffect(effect)

        animation = QPropertyAnimation(effect, b"opacity")
        animation.setDuration(self.transition_ms)
        animation.setStartValue(0.0)
        animation.setEndValue(1.0)
        animation.setEasingCurve(QEasingCurve.OutCubic)
        # Drop the effect afterwards so children render without an offscreen pass
        animation.finished.connect(lambda: widget.setGraphicsEffect(None))
        animation.start()
        self._animation = animation
        self._animated_widget = widget
