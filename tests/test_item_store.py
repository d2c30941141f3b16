"""
Tests for the ordered item store.
"""

import pytest

from poetry_camera.core.item_store import ItemStore, Shot


class TestConstruction:

    def test_placeholder_ids(self, store):
        """Placeholder store holds ids 1..8 in order."""
        assert store.ids() == [1, 2, 3, 4, 5, 6, 7, 8]
        assert len(store) == 8

    def test_items_sorted_by_id(self):
        store = ItemStore([Shot(5), Shot(1), Shot(3)])
        assert store.ids() == [1, 3, 5]

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            ItemStore([Shot(1), Shot(1)])

    def test_empty_store(self):
        store = ItemStore.with_placeholder_shots(0)
        assert len(store) == 0
        assert store.ids() == []


class TestQueries:

    def test_contains_and_get(self, store):
        assert 3 in store
        assert 42 not in store
        assert store.get(3) == Shot(3)
        assert store.get(42) is None

    def test_payload_ignored_for_equality(self):
        assert Shot(1, payload="a") == Shot(1, payload="b")

    def test_iteration_is_a_copy(self, store):
        """Removing while iterating does not skip items."""
        seen = []
        for shot in store:
            seen.append(shot.id)
            store.remove(shot.id)
        assert seen == [1, 2, 3, 4, 5, 6, 7, 8]
        assert len(store) == 0


class TestMutations:

    def test_remove_present(self, store):
        assert store.remove(4) is True
        assert store.ids() == [1, 2, 3, 5, 6, 7, 8]

    def test_remove_absent(self, store):
        assert store.remove(42) is False
        assert len(store) == 8

    def test_insert_sorted_restores_position(self, store):
        """Re-inserted shot lands between its neighbours."""
        store.remove(4)
        store.insert_sorted(Shot(4))
        assert store.ids() == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_insert_sorted_at_ends(self, store):
        store.remove(1)
        store.remove(8)
        store.insert_sorted(Shot(8))
        store.insert_sorted(Shot(1))
        assert store.ids() == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_insert_present_id_is_noop(self, store):
        store.insert_sorted(Shot(3, payload="dup"))
        assert store.ids() == [1, 2, 3, 4, 5, 6, 7, 8]
        assert store.get(3).payload is None


class TestSubscribe:

    def test_listener_called_on_change(self, store):
        calls = []
        store.subscribe(lambda: calls.append(store.ids()))
        store.remove(2)
        store.insert_sorted(Shot(2))
        assert calls == [[1, 3, 4, 5, 6, 7, 8], [1, 2, 3, 4, 5, 6, 7, 8]]

    def test_no_notification_for_noops(self, store):
        calls = []
        store.subscribe(lambda: calls.append(1))
        store.remove(42)
        store.insert_sorted(Shot(1))
        assert calls == []

    def test_unsubscribe(self, store):
        calls = []
        unsubscribe = store.subscribe(lambda: calls.append(1))
        unsubscribe()
        unsubscribe()
        store.remove(1)
        assert calls == []
