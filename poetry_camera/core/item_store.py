# poetry_camera/core/item_store.py
"""
Ordered, keyed store of history shots.

Pure data model with no Qt dependencies.
Items are kept in ascending identity order; the pending-deletion controller
is the only writer on behalf of the deletion mechanism.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, Iterator, List, Optional

from poetry_camera.utils.log import setup_logger

log = setup_logger("core.item_store")


@dataclass(frozen=True)
class Shot:
    """
    A history entry.

    Attributes:
        id: Stable, unique, totally ordered identity
        payload: Opaque data for the presentation layer (ignored for equality)
    """
    id: Hashable
    payload: Any = field(default=None, compare=False)


class ItemStore:
    """
    Ordered collection of shots keyed by id, no duplicate keys.

    Usage:
        store = ItemStore.with_placeholder_shots(8)
        store.remove(3)                  # True
        store.insert_sorted(Shot(3))     # back between 2 and 4
    """

    def __init__(self, items: Iterable[Shot] = ()):
        self._items: List[Shot] = []
        self._listeners: List[Callable[[], None]] = []

        seen = set()
        for item in items:
            if item.id in seen:
                raise ValueError(f"Duplicate shot id: {item.id!r}")
            seen.add(item.id)
            self._items.append(item)
        self._items.sort(key=lambda s: s.id)

    @classmethod
    def with_placeholder_shots(cls, count: int) -> "ItemStore":
        """Create a store holding placeholder shots with ids 1..count."""
        return cls(Shot(i + 1) for i in range(count))

    # --------------------------------------------------
    # Queries
    # --------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Shot]:
        return iter(list(self._items))

    def __contains__(self, item_id: Hashable) -> bool:
        return self.get(item_id) is not None

    def get(self, item_id: Hashable) -> Optional[Shot]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def ids(self) -> List[Hashable]:
        """Ids in store order."""
        return [item.id for item in self._items]

    # --------------------------------------------------
    # Mutations
    # --------------------------------------------------

    def remove(self, item_id: Hashable) -> bool:
        """
        Remove a shot by id.

        Returns:
            True if removed, False if no shot had that id.
        """
        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                log.debug(f"[store] Removed shot {item_id!r} ({len(self._items)} left)")
                self._notify()
                return True
        return False

    def insert_sorted(self, item: Shot) -> None:
        """
        Insert a shot at the position its id dictates.

        Re-inserting an id that is already present is a no-op.
        """
        if item.id in self:
            log.debug(f"[store] Shot {item.id!r} already present, insert skipped")
            return

        self._items.append(item)
        self._items.sort(key=lambda s: s.id)
        log.debug(f"[store] Inserted shot {item.id!r} ({len(self._items)} total)")
        self._notify()

    # --------------------------------------------------
    # Change notification
    # --------------------------------------------------

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()
