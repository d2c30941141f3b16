# poetry_camera/gui/gui_helpers/undo_banner.py
"""
Undo affordance for the pending deletion.
Red tile with a circular countdown ring and an "Undo N" label.
"""

from typing import Optional

from PySide6.QtWidgets import QFrame, QHBoxLayout, QAbstractButton
from PySide6.QtCore import Qt, Signal, QRectF, QSize, QVariantAnimation, QEasingCurve
from PySide6.QtGui import QPainter, QPen, QColor, QFont

from ...config import DEFAULT_CONFIG as CFG
from ...core import PendingSnapshot

RING_TRACK_COLOR = QColor("#E5E7EB")
RING_COLOR = QColor("#EF4444")
LABEL_COLOR = QColor("#DC2626")


class CountdownRingButton(QAbstractButton):
    """Round button painting the remaining undo window as an arc."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._fraction = 1.0
        self.setCursor(Qt.PointingHandCursor)
        self.setAccessibleName("Undo")
        self.setFocusPolicy(Qt.StrongFocus)

    @property
    def fraction(self) -> float:
        return self._fraction

    def set_fraction(self, value: float):
        self._fraction = max(0.0, min(1.0, float(value)))
        self.update()

    def set_seconds(self, seconds: int):
        self.setText(f"Undo {seconds}")
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(64, 64)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        side = min(self.width(), self.height()) - 8
        rect = QRectF((self.width() - side) / 2, (self.height() - side) / 2, side, side)

        track_pen = QPen(RING_TRACK_COLOR, 5)
        painter.setPen(track_pen)
        painter.drawEllipse(rect)

        # Arc starts at 12 o'clock and shrinks clockwise as the window runs out
        ring_pen = QPen(RING_COLOR, 5)
        ring_pen.setCapStyle(Qt.RoundCap)
        painter.setPen(ring_pen)
        span = int(-360 * 16 * self._fraction)
        painter.drawArc(rect, 90 * 16, span)

        font = QFont(self.font())
        font.setPixelSize(10)
        font.setWeight(QFont.Weight.Medium)
        painter.setFont(font)
        painter.setPen(LABEL_COLOR)
        painter.drawText(self.rect(), Qt.AlignCenter, self.text())
        painter.end()


class UndoBanner(QFrame):
    """Shown in the history list while a deletion is pending."""

    undo_clicked = Signal()

    def __init__(self, tick_ms: Optional[int] = None, parent=None):
        """
        Args:
            tick_ms: Ring interpolation time per tick (default: CFG.UNDO_TICK_MS)
        """
        super().__init__(parent)
        self.tick_ms = CFG.UNDO_TICK_MS if tick_ms is None else tick_ms
        self._pending_id = None
        self._setup_ui()

        self._animation = QVariantAnimation(self)
        self._animation.setEasingCurve(QEasingCurve.Linear)
        self._animation.valueChanged.connect(self.ring.set_fraction)

        self.setVisible(False)

    def _setup_ui(self):
        self.setObjectName("undoBanner")
        self.setFixedHeight(80)
        self.setStyleSheet("""
            QFrame#undoBanner {
                background-color: #FEE2E2;
                border-radius: 12px;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.ring = CountdownRingButton()
        self.ring.setFixedSize(64, 64)
        self.ring.clicked.connect(self.undo_clicked)
        layout.addWidget(self.ring, alignment=Qt.AlignCenter)

    @property
    def label_text(self) -> str:
        return self.ring.text()

    def render_snapshot(self, snapshot: Optional[PendingSnapshot]):
        """
        Update from a controller snapshot.

        Args:
            snapshot: Current pending deletion, or None to hide
        """
        if snapshot is None:
            self._animation.stop()
            self._pending_id = None
            self.setVisible(False)
            return

        self.ring.set_seconds(snapshot.seconds_remaining)
        target = snapshot.remaining_fraction

        if snapshot.pending_id != self._pending_id or self.isHidden():
            # New countdown: start from a full ring
            self._animation.stop()
            self._pending_id = snapshot.pending_id
            self.ring.set_fraction(target)
            self.setVisible(True)
            return

        self._animation.stop()
        self._animation.setDuration(self.tick_ms)
        self._animation.setStartValue(self.ring.fraction)
        self._animation.setEndValue(target)
        self._animation.start()
