"""
Tests for the single-slot pending deletion controller.
"""

import pytest

from poetry_camera.core.pending_deletion import PendingDeletionController, PendingSnapshot
from poetry_camera.core.press_detector import PressDetector


def seconds(snapshots):
    return [s.seconds_remaining if s is not None else None for s in snapshots]


class TestRequestDelete:

    def test_removes_immediately_and_opens_window(self, controller, store):
        """Shot leaves the store at once, countdown starts at 5."""
        controller.request_delete(3)
        assert 3 not in store
        assert controller.snapshot == PendingSnapshot(pending_id=3, seconds_remaining=5, window_s=5)

    def test_absent_id_is_noop(self, controller, store, snapshots):
        controller.request_delete(42)
        assert not controller.is_pending
        assert len(store) == 8
        assert snapshots == []

    def test_second_request_while_pending_dropped(self, controller, store, scheduler):
        """Only one deletion can be pending; the second shot stays."""
        controller.request_delete(3)
        scheduler.advance(1000)
        controller.request_delete(5)

        assert 5 in store
        assert controller.snapshot.pending_id == 3
        assert controller.snapshot.seconds_remaining == 4

    def test_request_after_finalize_accepted(self, controller, store, scheduler):
        controller.request_delete(3)
        scheduler.advance(5000)
        controller.request_delete(5)
        assert controller.snapshot.pending_id == 5
        assert 5 not in store

    def test_invalid_window_rejected(self, store, scheduler):
        with pytest.raises(ValueError):
            PendingDeletionController(store, scheduler, window_s=0)


class TestCountdown:

    def test_listener_sequence(self, controller, scheduler, snapshots):
        """Listeners see 5, 4, 3, 2, 1 then idle."""
        controller.request_delete(3)
        scheduler.advance(5000)
        assert seconds(snapshots) == [5, 4, 3, 2, 1, None]

    def test_still_pending_before_last_tick(self, controller, scheduler):
        controller.request_delete(3)
        scheduler.advance(4999)
        assert controller.is_pending
        assert controller.snapshot.seconds_remaining == 1

    def test_idle_after_window(self, controller, store, scheduler):
        """After five ticks the deletion is permanent and the store sees no further change."""
        controller.request_delete(3)
        store_changes = []
        store.subscribe(lambda: store_changes.append(store.ids()))
        scheduler.advance(5000)
        assert store_changes == []
        assert store.ids() == [1, 2, 4, 5, 6, 7, 8]
        assert not controller.is_pending
        assert 3 not in store
        assert scheduler.active_count == 0

    def test_remaining_fraction(self, controller, scheduler):
        controller.request_delete(3)
        assert controller.snapshot.remaining_fraction == 1.0
        scheduler.advance(2000)
        assert controller.snapshot.remaining_fraction == pytest.approx(0.6)

    def test_on_finalized_called_once(self, store, scheduler):
        finalized = []
        controller = PendingDeletionController(store, scheduler, window_s=5, tick_ms=1000,
                                               on_finalized=finalized.append)
        controller.request_delete(3)
        scheduler.advance(20000)
        assert finalized == [3]


class TestUndo:

    def test_undo_restores_between_neighbours(self, controller, store, scheduler):
        controller.request_delete(4)
        scheduler.advance(2000)
        assert controller.snapshot.seconds_remaining == 3
        controller.undo()

        assert store.ids() == [1, 2, 3, 4, 5, 6, 7, 8]
        assert not controller.is_pending

        scheduler.advance(1000)
        assert controller.snapshot is None
        assert store.ids() == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_undo_stops_countdown(self, controller, store, scheduler, snapshots):
        """No ticks or removals after undo."""
        controller.request_delete(4)
        scheduler.advance(1000)
        controller.undo()
        scheduler.advance(10000)

        assert seconds(snapshots) == [5, 4, None]
        assert 4 in store
        assert scheduler.active_count == 0

    def test_undo_on_last_second(self, controller, store, scheduler):
        controller.request_delete(4)
        scheduler.advance(4999)
        controller.undo()
        scheduler.advance(1)
        assert 4 in store

    def test_undo_while_idle_is_noop(self, controller, store, snapshots):
        controller.undo()
        assert len(store) == 8
        assert snapshots == []

    def test_undo_after_finalize_is_noop(self, controller, store, scheduler):
        controller.request_delete(4)
        scheduler.advance(5000)
        controller.undo()
        assert 4 not in store

    def test_undo_does_not_finalize(self, store, scheduler):
        finalized = []
        controller = PendingDeletionController(store, scheduler, window_s=5, tick_ms=1000,
                                               on_finalized=finalized.append)
        controller.request_delete(4)
        controller.undo()
        scheduler.advance(10000)
        assert finalized == []

    def test_delete_undo_delete_runs_fresh_window(self, controller, scheduler, snapshots):
        """A second cycle starts at 5 and ignores the first cycle's timer."""
        controller.request_delete(4)
        scheduler.advance(500)
        controller.undo()
        controller.request_delete(4)
        scheduler.advance(999)
        assert controller.snapshot.seconds_remaining == 5
        scheduler.advance(1)
        assert controller.snapshot.seconds_remaining == 4


class TestDispose:

    def test_dispose_makes_deletion_permanent(self, controller, store, scheduler, snapshots):
        controller.request_delete(4)
        scheduler.advance(2000)
        controller.dispose()

        assert not controller.is_pending
        assert 4 not in store
        assert snapshots[-1] is None
        scheduler.advance(10000)
        assert scheduler.active_count == 0

    def test_dispose_when_idle(self, controller, snapshots):
        controller.dispose()
        assert snapshots == []

    def test_unsubscribe(self, controller, scheduler):
        seen = []
        unsubscribe = controller.subscribe(seen.append)
        unsubscribe()
        controller.request_delete(1)
        assert seen == []


class TestWithPressDetector:
    """Long-press wired straight into the controller."""

    def test_hold_then_undo(self, controller, store, scheduler):
        detector = PressDetector(4, controller.request_delete, scheduler, threshold_ms=3000)
        detector.on_press_start()
        scheduler.advance(3000)
        detector.on_press_end()

        assert 4 not in store
        assert controller.snapshot.seconds_remaining == 5

        scheduler.advance(3000)
        controller.undo()
        assert store.ids() == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_two_holds_only_first_deletes(self, controller, store, scheduler):
        first = PressDetector(2, controller.request_delete, scheduler, threshold_ms=3000)
        second = PressDetector(6, controller.request_delete, scheduler, threshold_ms=3000)
        first.on_press_start()
        second.on_press_start()
        scheduler.advance(3000)

        assert 2 not in store
        assert 6 in store
        assert controller.snapshot.pending_id == 2
