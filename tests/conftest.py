"""
Pytest configuration and fixtures for Poetry Camera tests.
"""

import os
import pytest

# Headless Qt before any PySide6 import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from poetry_camera.core import ItemStore, ManualScheduler, PendingDeletionController


@pytest.fixture
def scheduler():
    """Virtual clock starting at 0 ms."""
    return ManualScheduler()


@pytest.fixture
def store():
    """Eight placeholder shots with ids 1..8."""
    return ItemStore.with_placeholder_shots(8)


@pytest.fixture
def controller(store, scheduler):
    """Controller with a 5 tick window of 1000 ms ticks."""
    return PendingDeletionController(store, scheduler, window_s=5, tick_ms=1000)


@pytest.fixture
def snapshots(controller):
    """Every snapshot the controller publishes, in order."""
    seen = []
    controller.subscribe(seen.append)
    return seen
