# poetry_camera/gui/screens/history_screen.py
"""
History screen.

Lists shots from the item store. Holding a shot deletes it; the undo banner
below the list offers a short window to bring it back. Leaving the screen
makes any pending deletion permanent.
"""

from typing import Dict, Hashable, Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QScrollArea, QFrame
from PySide6.QtCore import Qt, Signal

from ..controllers import UIBuilder
from ..gui_helpers import ShotItemWidget, UndoBanner
from ..qt_scheduler import QtScheduler
from ...config import DEFAULT_CONFIG as CFG
from ...core import ItemStore, PendingDeletionController, PendingSnapshot, Scheduler
from ...utils.log import setup_logger

log = setup_logger("gui.history_screen")


class HistoryScreen(QWidget):
    """Scrollable list of shots with long-press delete and undo."""

    back_clicked = Signal()
    pending_changed = Signal(object)   # PendingSnapshot or None
    shot_deleted = Signal(object)      # shot id, once deletion is permanent

    def __init__(self,
                 store: ItemStore,
                 scheduler: Optional[Scheduler] = None,
                 long_press_ms: Optional[int] = None,
                 parent=None):
        """
        Args:
            store: Shots to display
            scheduler: Timer provider (default: QtScheduler owned by this screen)
            long_press_ms: Hold duration override (default: CFG.LONG_PRESS_MS)
        """
        super().__init__(parent)
        self.store = store
        self.scheduler = scheduler or QtScheduler(self)
        self.long_press_ms = CFG.LONG_PRESS_MS if long_press_ms is None else long_press_ms
        self.controller = PendingDeletionController(
            store=store,
            scheduler=self.scheduler,
            on_finalized=self.shot_deleted.emit,
        )
        self._shot_widgets: Dict[Hashable, ShotItemWidget] = {}

        self._setup_ui()

        self._unsubscribe_store = self.store.subscribe(self._sync_shots)
        self._unsubscribe_pending = self.controller.subscribe(self._on_pending_changed)
        self._sync_shots()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QHBoxLayout()
        header.setContentsMargins(16, 16, 16, 16)
        self.back_btn = UIBuilder.create_back_button()
        self.back_btn.clicked.connect(self.back_clicked)
        header.addWidget(self.back_btn)
        header.addStretch()
        layout.addLayout(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        container = QWidget()
        self.list_layout = QVBoxLayout(container)
        self.list_layout.setContentsMargins(16, 0, 16, 24)
        self.list_layout.setSpacing(12)

        self.undo_banner = UndoBanner(tick_ms=self.controller.tick_ms)
        self.undo_banner.undo_clicked.connect(self.controller.undo)
        self.list_layout.addWidget(self.undo_banner)
        self.list_layout.addStretch()

        scroll.setWidget(container)
        layout.addWidget(scroll, stretch=1)

    # --------------------------------------------------
    # Screen lifecycle
    # --------------------------------------------------

    def on_enter(self):
        self._sync_shots()

    def on_leave(self):
        """Cancel held presses and settle the pending deletion."""
        for widget in self._shot_widgets.values():
            widget.dispose()
        self.controller.dispose()

    def shutdown(self):
        """Detach from the store before the window closes."""
        self.on_leave()
        self._unsubscribe_store()
        self._unsubscribe_pending()

    # --------------------------------------------------
    # Rendering
    # --------------------------------------------------

    @property
    def shot_ids(self):
        """Ids currently shown, in list order."""
        return [sid for sid in self.store.ids() if sid in self._shot_widgets]

    def shot_widget(self, shot_id: Hashable) -> Optional[ShotItemWidget]:
        return self._shot_widgets.get(shot_id)

    def _sync_shots(self):
        """Add and remove tiles so the list mirrors the store."""
        store_ids = self.store.ids()
        wanted = set(store_ids)

        for shot_id in [sid for sid in self._shot_widgets if sid not in wanted]:
            widget = self._shot_widgets.pop(shot_id)
            widget.dispose()
            self.list_layout.removeWidget(widget)
            widget.hide()
            widget.deleteLater()

        for index, shot_id in enumerate(store_ids):
            if shot_id in self._shot_widgets:
                continue
            widget = ShotItemWidget(
                shot_id=shot_id,
                on_long_press=self.controller.request_delete,
                scheduler=self.scheduler,
                threshold_ms=self.long_press_ms,
            )
            # Tiles sit above the banner, in store order
            self.list_layout.insertWidget(index, widget)
            self._shot_widgets[shot_id] = widget

    def _on_pending_changed(self, snapshot: Optional[PendingSnapshot]):
        self.undo_banner.render_snapshot(snapshot)
        self.pending_changed.emit(snapshot)
