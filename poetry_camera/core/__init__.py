# poetry_camera/core/__init__.py
"""
Core package for deferred deletion: press detection, the single-slot
undo controller and the item store they operate on. No Qt dependencies.
"""

from .item_store import ItemStore, Shot
from .press_detector import PressDetector
from .pending_deletion import PendingDeletionController, PendingSnapshot
from .scheduler import ManualScheduler, Scheduler, TimerHandle

__all__ = [
    "ItemStore",
    "Shot",
    "PressDetector",
    "PendingDeletionController",
    "PendingSnapshot",
    "ManualScheduler",
    "Scheduler",
    "TimerHandle",
]
