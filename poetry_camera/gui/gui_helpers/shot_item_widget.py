# poetry_camera/gui/gui_helpers/shot_item_widget.py
"""
History shot tile.
Routes mouse and touch gestures to a PressDetector for long-press delete.
"""

from typing import Callable, Hashable, Optional

from PySide6.QtWidgets import QFrame
from PySide6.QtCore import Qt, QEvent

from ...core import PressDetector, Scheduler


class ShotItemWidget(QFrame):
    """Grey rounded tile standing in for one shot."""

    TILE_HEIGHT = 80

    def __init__(self,
                 shot_id: Hashable,
                 on_long_press: Callable[[Hashable], None],
                 scheduler: Scheduler,
                 threshold_ms: Optional[int] = None,
                 parent=None):
        """
        Args:
            shot_id: Identity of the shot shown
            on_long_press: Callback(shot_id) after a held press
            scheduler: Timer provider for the detector
            threshold_ms: Hold duration override
        """
        super().__init__(parent)
        self.shot_id = shot_id
        self.detector = PressDetector(
            item_id=shot_id,
            on_long_press=on_long_press,
            scheduler=scheduler,
            threshold_ms=threshold_ms,
        )
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("shotItem")
        self.setFixedHeight(self.TILE_HEIGHT)
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.setAccessibleName(f"Shot {self.shot_id}")
        self.setToolTip(f"Hold for {self.detector.threshold_ms / 1000:g} seconds to delete")
        self.setStyleSheet("""
            QFrame#shotItem {
                background-color: #E5E7EB;
                border-radius: 12px;
            }
        """)

    def dispose(self):
        """Cancel any armed press before the widget goes away."""
        self.detector.dispose()

    # --- Mouse ---

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.detector.on_press_start()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.detector.on_press_end()
        super().mouseReleaseEvent(event)

    def mouseMoveEvent(self, event):
        # Mouse is grabbed while held, so leaveEvent only arrives after release
        if not self.rect().contains(event.position().toPoint()):
            self.detector.on_press_cancel()
        super().mouseMoveEvent(event)

    def leaveEvent(self, event):
        self.detector.on_press_cancel()
        super().leaveEvent(event)

    def hideEvent(self, event):
        self.detector.on_press_cancel()
        super().hideEvent(event)

    # --- Touch ---

    def event(self, event):
        event_type = event.type()
        if event_type == QEvent.TouchBegin:
            self.detector.on_press_start()
            event.accept()
            return True
        if event_type == QEvent.TouchEnd:
            self.detector.on_press_end()
            event.accept()
            return True
        if event_type == QEvent.TouchCancel:
            self.detector.on_press_cancel()
            event.accept()
            return True
        return super().event(event)
