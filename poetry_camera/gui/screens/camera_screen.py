# poetry_camera/gui/screens/camera_screen.py
"""
Camera screen (default).

Layout:
1. Header - History / Settings
2. Viewfinder placeholder
3. Footer - Gallery / Shutter / Flash toggle

No capture happens here; the shutter only reports the press.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QFrame, QLabel
from PySide6.QtCore import Qt, Signal

from ..controllers import UIBuilder
from ...utils.log import setup_logger

log = setup_logger("gui.camera_screen")

FLASH_ON_GLYPH = "🔦"
FLASH_OFF_GLYPH = "⛔"


class CameraScreen(QWidget):
    """Viewfinder placeholder with navigation and camera controls."""

    history_clicked = Signal()
    settings_clicked = Signal()
    flash_toggled = Signal()
    shutter_clicked = Signal()

    def __init__(self, flash_on: bool = False, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self.set_flash(flash_on)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Header
        header = QHBoxLayout()
        header.setContentsMargins(16, 16, 16, 16)
        self.history_btn = UIBuilder.create_icon_button("🕘", "History")
        self.history_btn.clicked.connect(self.history_clicked)
        self.settings_btn = UIBuilder.create_icon_button("⚙️", "Settings")
        self.settings_btn.clicked.connect(self.settings_clicked)
        header.addWidget(self.history_btn)
        header.addStretch()
        header.addWidget(self.settings_btn)
        layout.addLayout(header)

        # Viewfinder placeholder
        viewfinder = QFrame()
        viewfinder.setObjectName("viewfinder")
        viewfinder.setStyleSheet("""
            QFrame#viewfinder {
                background-color: #E5E7EB;
                border-radius: 12px;
            }
        """)
        vf_layout = QVBoxLayout(viewfinder)
        camera_icon = QLabel("📷")
        camera_icon.setStyleSheet("font-size: 64px; color: #9CA3AF;")
        camera_icon.setAlignment(Qt.AlignCenter)
        vf_layout.addWidget(camera_icon)

        vf_wrapper = QHBoxLayout()
        vf_wrapper.setContentsMargins(16, 0, 16, 16)
        vf_wrapper.addWidget(viewfinder)
        layout.addLayout(vf_wrapper, stretch=1)

        # Footer controls
        footer = QHBoxLayout()
        footer.setContentsMargins(16, 0, 16, 24)
        self.gallery_btn = UIBuilder.create_icon_button("🖼️", "Gallery", size=52, font_size=28)
        self.shutter_btn = UIBuilder.create_shutter_button()
        self.shutter_btn.clicked.connect(self._on_shutter)
        self.flash_btn = UIBuilder.create_icon_button(FLASH_OFF_GLYPH, "Flash", size=52, font_size=28)
        self.flash_btn.clicked.connect(self.flash_toggled)

        footer.addStretch()
        footer.addWidget(self.gallery_btn)
        footer.addStretch()
        footer.addWidget(self.shutter_btn)
        footer.addStretch()
        footer.addWidget(self.flash_btn)
        footer.addStretch()
        layout.addLayout(footer)

    def set_flash(self, on: bool):
        """Reflect the flash state on the toggle."""
        self.flash_btn.setText(FLASH_ON_GLYPH if on else FLASH_OFF_GLYPH)
        self.flash_btn.setToolTip("Flash on" if on else "Flash off")
        self.flash_btn.setAccessibleName("Flash on" if on else "Flash off")

    def _on_shutter(self):
        log.debug("[camera] Shutter pressed (capture not available)")
        self.shutter_clicked.emit()
