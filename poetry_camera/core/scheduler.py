# poetry_camera/core/scheduler.py
"""
Timer scheduling primitives for the deletion core.

The core only needs "run callback after ms" and "run callback every ms,
cancellable". Anything providing call_later()/call_every() returning a
TimerHandle can drive it:

    ManualScheduler  - virtual clock, advanced explicitly (tests, headless runs)
    QtScheduler      - QTimer-backed, see poetry_camera.gui.qt_scheduler

Pure Python, no Qt dependencies.
"""

from __future__ import annotations
import itertools
from typing import Callable, List, Optional, Protocol


class TimerHandle(Protocol):
    """Handle for a scheduled callback."""

    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Deferred and periodic callback provider."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


def check_delay(delay_ms: int) -> int:
    """Validate a single-shot delay (zero allowed)."""
    if delay_ms < 0:
        raise ValueError(f"Delay must not be negative, got {delay_ms} ms")
    return int(delay_ms)


def check_interval(interval_ms: int) -> int:
    """Validate a periodic interval (must be positive)."""
    if interval_ms <= 0:
        raise ValueError(f"Interval must be positive, got {interval_ms} ms")
    return int(interval_ms)


class ManualTimer:
    """Timer entry on a ManualScheduler's virtual clock."""

    def __init__(self, due_ms: int, seq: int, callback: Callable[[], None],
                 interval_ms: Optional[int] = None):
        self.due_ms = due_ms
        self.seq = seq
        self.callback = callback
        self.interval_ms = interval_ms
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def periodic(self) -> bool:
        return self.interval_ms is not None

    def cancel(self) -> None:
        self._active = False

    def _fire(self) -> None:
        if self.periodic:
            self.due_ms += self.interval_ms
        else:
            self._active = False
        self.callback()


class ManualScheduler:
    """
    Deterministic scheduler driven by a virtual millisecond clock.

    Nothing runs until advance() is called. Due callbacks run in due-time
    order, ties broken by scheduling order, with the clock set to each
    callback's due time while it runs.

    Usage:
        scheduler = ManualScheduler()
        handle = scheduler.call_later(3000, on_fire)
        scheduler.advance(2999)   # nothing yet
        scheduler.advance(1)      # on_fire runs
    """

    def __init__(self):
        self._now_ms = 0
        self._timers: List[ManualTimer] = []
        self._seq = itertools.count()

    @property
    def now_ms(self) -> int:
        """Current virtual time in milliseconds."""
        return self._now_ms

    @property
    def active_count(self) -> int:
        """Number of timers that can still fire."""
        return sum(1 for t in self._timers if t.active)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self._now_ms + check_delay(delay_ms), next(self._seq), callback)
        self._timers.append(timer)
        return timer

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> ManualTimer:
        interval_ms = check_interval(interval_ms)
        timer = ManualTimer(self._now_ms + interval_ms, next(self._seq), callback, interval_ms)
        self._timers.append(timer)
        return timer

    def advance(self, ms: int) -> None:
        """
        Move the virtual clock forward, running every callback that falls due.

        Args:
            ms: Milliseconds to advance (must not be negative)
        """
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({ms} ms)")

        target = self._now_ms + ms
        while True:
            due = [t for t in self._timers if t.active and t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self._now_ms = timer.due_ms
            timer._fire()

        self._now_ms = target
        self._timers = [t for t in self._timers if t.active]
