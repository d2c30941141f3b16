# poetry_camera/core/pending_deletion.py
"""
Single-slot undoable deletion with a countdown.

State machine:
    Idle     - nothing pending
    Pending  - one shot removed from the store, recoverable until the
               countdown reaches zero

    Idle    --request_delete(present id)-->  Pending (seconds_remaining = W)
    Pending --tick, remaining > 0-------->   Pending (remaining - 1)
    Pending --tick, remaining == 0------->   Idle    (deletion permanent)
    Pending --undo()--------------------->   Idle    (shot re-inserted)
    Pending --dispose()------------------>   Idle    (deletion permanent)

Every other call is a silent no-op. The controller is the only writer of
the pending record; the presentation layer reads PendingSnapshot values.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional

from poetry_camera.config import DEFAULT_CONFIG as CFG
from poetry_camera.core.item_store import ItemStore, Shot
from poetry_camera.core.scheduler import Scheduler, TimerHandle
from poetry_camera.utils.log import setup_logger

log = setup_logger("core.pending_deletion")


@dataclass(frozen=True)
class PendingSnapshot:
    """Read-only view of the pending deletion for rendering."""
    pending_id: Hashable
    seconds_remaining: int
    window_s: int

    @property
    def remaining_fraction(self) -> float:
        """1.0 right after the delete, 0.0 when the window is used up."""
        return self.seconds_remaining / self.window_s


class _PendingDeletion:
    """Mutable record owned by the controller."""

    def __init__(self, item: Shot, seconds_remaining: int):
        self.item = item
        self.seconds_remaining = seconds_remaining


SnapshotListener = Callable[[Optional[PendingSnapshot]], None]


class PendingDeletionController:
    """
    Serializes deletions through one undoable slot.

    Usage:
        controller = PendingDeletionController(store, scheduler)
        controller.subscribe(banner.render)
        controller.request_delete(3)   # shot 3 leaves the store, countdown starts
        controller.undo()              # shot 3 is back, countdown stopped
    """

    def __init__(self,
                 store: ItemStore,
                 scheduler: Scheduler,
                 window_s: Optional[int] = None,
                 tick_ms: Optional[int] = None,
                 on_finalized: Optional[Callable[[Hashable], None]] = None):
        """
        Args:
            store: Item store to remove from / restore into
            scheduler: Timer provider for the countdown
            window_s: Undo window length in ticks (default: CFG.UNDO_WINDOW_S)
            tick_ms: Tick interval (default: CFG.UNDO_TICK_MS)
            on_finalized: Callback(item_id) when a deletion becomes permanent
        """
        self.store = store
        self.scheduler = scheduler
        self.window_s = CFG.UNDO_WINDOW_S if window_s is None else window_s
        self.tick_ms = CFG.UNDO_TICK_MS if tick_ms is None else tick_ms
        self.on_finalized = on_finalized

        if self.window_s <= 0:
            raise ValueError(f"Undo window must be positive, got {self.window_s}")

        self._pending: Optional[_PendingDeletion] = None
        self._tick: Optional[TimerHandle] = None
        self._listeners: List[SnapshotListener] = []

    # --------------------------------------------------
    # Properties
    # --------------------------------------------------

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def snapshot(self) -> Optional[PendingSnapshot]:
        """Current pending deletion, or None when idle."""
        if self._pending is None:
            return None
        return PendingSnapshot(
            pending_id=self._pending.item.id,
            seconds_remaining=self._pending.seconds_remaining,
            window_s=self.window_s,
        )

    # --------------------------------------------------
    # Operations
    # --------------------------------------------------

    def request_delete(self, item_id: Hashable) -> None:
        """Remove a shot and open the undo window. Ignored while one is pending."""
        if self._pending is not None:
            log.debug(
                f"[pending] Delete of {item_id!r} dropped, "
                f"{self._pending.item.id!r} is still pending"
            )
            return

        item = self.store.get(item_id)
        if item is None:
            log.debug(f"[pending] Delete of {item_id!r} ignored, not in store")
            return

        self.store.remove(item_id)
        record = _PendingDeletion(item, self.window_s)
        self._pending = record
        self._tick = self.scheduler.call_every(self.tick_ms, lambda: self._on_tick(record))
        log.info(f"[pending] Shot {item_id!r} removed, undo available for {self.window_s}s")
        self._notify()

    def undo(self) -> None:
        """Restore the pending shot. Ignored while idle."""
        record = self._pending
        if record is None:
            log.debug("[pending] Undo ignored, nothing pending")
            return

        self._stop_tick()
        self._pending = None
        self.store.insert_sorted(record.item)
        log.info(
            f"[pending] Undo: shot {record.item.id!r} restored "
            f"with {record.seconds_remaining}s left"
        )
        self._notify()

    def dispose(self) -> None:
        """Tear down with the view. A pending deletion becomes permanent."""
        if self._pending is None:
            return
        self._finalize("view closed")

    def subscribe(self, callback: SnapshotListener) -> Callable[[], None]:
        """
        Register a snapshot listener.

        Listeners are called with the new snapshot (or None) after every
        transition and every tick.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    # --------------------------------------------------
    # Internals
    # --------------------------------------------------

    def _on_tick(self, record: _PendingDeletion) -> None:
        if record is not self._pending:
            return  # stale tick from a finished cycle

        record.seconds_remaining -= 1
        if record.seconds_remaining > 0:
            self._notify()
            return

        self._finalize("undo window elapsed")

    def _finalize(self, reason: str) -> None:
        record = self._pending
        self._stop_tick()
        self._pending = None
        # Store already lost the shot on entry to Pending; nothing else to mutate
        log.info(f"[pending] Shot {record.item.id!r} deleted permanently ({reason})")
        self._notify()
        if self.on_finalized is not None:
            self.on_finalized(record.item.id)

    def _stop_tick(self) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None

    def _notify(self) -> None:
        snapshot = self.snapshot
        for callback in list(self._listeners):
            callback(snapshot)
