# poetry_camera/core/press_detector.py
"""
Long-press detection for a single history item.

Turns press-start / press-end / press-cancel into at most one long-press
event per gesture. The detector owns one single-shot timer at a time and
never touches the item store; it only reports the item id.
"""

from __future__ import annotations
from typing import Callable, Hashable, Optional

from poetry_camera.config import DEFAULT_CONFIG as CFG
from poetry_camera.core.scheduler import Scheduler, TimerHandle
from poetry_camera.utils.log import setup_logger

log = setup_logger("core.press_detector")


class PressDetector:
    """
    Per-item long-press classifier.

    Usage:
        detector = PressDetector(item_id=3, on_long_press=controller.request_delete,
                                 scheduler=scheduler)
        detector.on_press_start()
        ...                       # held for threshold_ms
        # -> controller.request_delete(3) is called exactly once
    """

    def __init__(self,
                 item_id: Hashable,
                 on_long_press: Callable[[Hashable], None],
                 scheduler: Scheduler,
                 threshold_ms: Optional[int] = None):
        """
        Args:
            item_id: Identity reported when the long-press fires
            on_long_press: Callback(item_id)
            scheduler: Timer provider
            threshold_ms: Hold duration (default: CFG.LONG_PRESS_MS)
        """
        self.item_id = item_id
        self.on_long_press = on_long_press
        self.scheduler = scheduler
        self.threshold_ms = CFG.LONG_PRESS_MS if threshold_ms is None else threshold_ms
        self._timer: Optional[TimerHandle] = None
        self._session: Optional[object] = None

    @property
    def is_armed(self) -> bool:
        """True while a press is being held and has not fired yet."""
        return self._timer is not None and self._timer.active

    def on_press_start(self) -> None:
        """Arm the timer for a new gesture, replacing any armed one."""
        self._disarm()
        session = object()
        self._session = session
        self._timer = self.scheduler.call_later(self.threshold_ms, lambda: self._fire(session))

    def on_press_end(self) -> None:
        """Release before the threshold cancels the gesture."""
        self._disarm()

    def on_press_cancel(self) -> None:
        """Pointer left / touch cancelled."""
        self._disarm()

    def dispose(self) -> None:
        """Cancel-on-unmount. Safe at any time."""
        self._disarm()

    def _disarm(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._session = None

    def _fire(self, session: object) -> None:
        if session is not self._session:
            return  # stale timer from a cancelled gesture

        # Session consumed: later end/cancel calls find nothing to cancel
        self._timer = None
        self._session = None
        log.debug(f"[press] Long-press on item {self.item_id!r}")
        self.on_long_press(self.item_id)
