# poetry_camera/gui/controllers/ui_builder.py
"""
UI component builder.
Creates styled buttons, labels and cards for the phone-style screens.
"""

from PySide6.QtWidgets import QPushButton, QLabel, QFrame, QVBoxLayout
from PySide6.QtCore import Qt


class UIBuilder:
    """Factory for creating styled UI components."""

    @staticmethod
    def create_icon_button(text: str, tooltip: str, size: int = 44, font_size: int = 22) -> QPushButton:
        """
        Create a borderless "ghost" icon button.

        Args:
            text: Glyph shown on the button
            tooltip: Tooltip and accessible name
            size: Square size in pixels
            font_size: Glyph size in pixels

        Returns:
            Configured QPushButton
        """
        btn = QPushButton(text)
        btn.setToolTip(tooltip)
        btn.setAccessibleName(tooltip)
        btn.setFixedSize(size, size)
        btn.setCursor(Qt.PointingHandCursor)
        btn.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                border: none;
                border-radius: {size // 2}px;
                font-size: {font_size}px;
            }}
            QPushButton:hover {{
                background-color: #F0F0F0;
            }}
        """)
        return btn

    @staticmethod
    def create_shutter_button(size: int = 80) -> QPushButton:
        """
        Create the round shutter button.

        Returns:
            Configured QPushButton labelled "Shutter" for screen readers
        """
        btn = QPushButton()
        btn.setAccessibleName("Shutter")
        btn.setToolTip("Shutter")
        btn.setFixedSize(size, size)
        btn.setCursor(Qt.PointingHandCursor)
        btn.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                border: 4px solid #1F2937;
                border-radius: {size // 2}px;
            }}
            QPushButton:hover {{
                background-color: #F3F4F6;
            }}
            QPushButton:pressed {{
                background-color: #E5E7EB;
            }}
        """)
        return btn

    @staticmethod
    def create_back_button() -> QPushButton:
        """Create the ghost-style Back button used by secondary screens."""
        btn = QPushButton("Back")
        btn.setAccessibleName("Back")
        btn.setCursor(Qt.PointingHandCursor)
        btn.setStyleSheet("""
            QPushButton {
                background-color: transparent;
                color: #111827;
                padding: 8px 14px;
                font-size: 14px;
                font-weight: 600;
                border: none;
                border-radius: 6px;
            }
            QPushButton:hover {
                background-color: #F0F0F0;
            }
        """)
        return btn

    @staticmethod
    def create_section_label(text: str, font_size: int = 15, bold: bool = True) -> QLabel:
        """
        Create a styled section header label.

        Args:
            text: Label text
            font_size: Font size in pixels
            bold: Whether to use bold font

        Returns:
            Configured QLabel
        """
        label = QLabel(text)
        style = f"font-size: {font_size}px;"
        if bold:
            style += " font-weight: 600;"
        label.setStyleSheet(style)
        return label

    @staticmethod
    def create_info_label(text: str = "") -> QLabel:
        """
        Create an info label (secondary text style).

        Args:
            text: Initial text

        Returns:
            Configured QLabel
        """
        label = QLabel(text)
        label.setStyleSheet("color: #6B7280; font-size: 12px;")
        return label

    @staticmethod
    def create_card() -> tuple:
        """
        Create a light grey rounded card for settings groups.

        Returns:
            (QFrame, QVBoxLayout) pair
        """
        card = QFrame()
        card.setObjectName("settingsCard")
        card.setStyleSheet("""
            QFrame#settingsCard {
                background-color: #F3F4F6;
                border-radius: 12px;
            }
        """)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(8)
        return card, layout
