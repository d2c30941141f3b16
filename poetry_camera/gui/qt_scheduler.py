# poetry_camera/gui/qt_scheduler.py
"""
QTimer-backed scheduler for the deletion core.
Callbacks run on the Qt event loop thread.
"""

from __future__ import annotations
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from ..core.scheduler import check_delay, check_interval


class QtTimerHandle:
    """Cancellable handle around a QTimer. cancel() is idempotent."""

    def __init__(self, timer: QTimer, callback: Callable[[], None]):
        self._timer: Optional[QTimer] = timer
        self._callback = callback
        timer.timeout.connect(self._on_timeout)

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        self._release()

    def _release(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None

    def _on_timeout(self) -> None:
        if self._timer is None:
            return
        if self._timer.isSingleShot():
            self._release()
        self._callback()


class QtScheduler:
    """Scheduler implementation using QTimer."""

    def __init__(self, parent: Optional[QObject] = None):
        """
        Args:
            parent: QObject owning the timers (timers die with it)
        """
        self.parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self.parent)
        timer.setSingleShot(True)
        handle = QtTimerHandle(timer, callback)
        timer.start(check_delay(delay_ms))
        return handle

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self.parent)
        handle = QtTimerHandle(timer, callback)
        timer.start(check_interval(interval_ms))
        return handle
