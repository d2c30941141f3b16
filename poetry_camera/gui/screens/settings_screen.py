# poetry_camera/gui/screens/settings_screen.py
"""
Settings screen: poem type picker and model temperature slider.
Values live in a SettingsModel for the session only.
"""

from typing import Dict, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QRadioButton, QButtonGroup, QSlider, QScrollArea, QFrame
)
from PySide6.QtCore import Qt, Signal

from ..controllers import UIBuilder
from ..models import SettingsModel
from ...utils.log import setup_logger

log = setup_logger("gui.settings_screen")


class SettingsScreen(QWidget):
    """Poem type radios and a 0.00 - 2.00 temperature slider."""

    back_clicked = Signal()
    settings_changed = Signal(str, float)   # poem_type, temperature

    def __init__(self, model: Optional[SettingsModel] = None, parent=None):
        super().__init__(parent)
        self.model = model or SettingsModel()
        self._radio_buttons: Dict[str, QRadioButton] = {}
        self._setup_ui()
        self.load_current_values()

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
        container = QWidget()
        body = QVBoxLayout(container)
        body.setContentsMargins(16, 0, 16, 24)
        body.setSpacing(16)

        self._create_poem_type_section(body)
        self._create_temperature_section(body)
        body.addStretch()

        scroll.setWidget(container)
        layout.addWidget(scroll, stretch=1)

    # --- Sections ---
    def _create_poem_type_section(self, body: QVBoxLayout):
        card, card_layout = UIBuilder.create_card()
        card_layout.addWidget(UIBuilder.create_section_label("Poem Type"))

        self.poem_type_group = QButtonGroup(self)
        self.poem_type_group.setExclusive(True)
        for poem_type in self.model.poem_types:
            radio = QRadioButton(poem_type)
            radio.setStyleSheet("font-size: 13px;")
            radio.setProperty("poem_type", poem_type)
            self.poem_type_group.addButton(radio)
            card_layout.addWidget(radio)
            self._radio_buttons[poem_type] = radio
        self.poem_type_group.buttonToggled.connect(self._on_poem_type_toggled)

        body.addWidget(card)

    def _create_temperature_section(self, body: QVBoxLayout):
        card, card_layout = UIBuilder.create_card()

        title_row = QHBoxLayout()
        title_row.addWidget(UIBuilder.create_section_label("Model Temperature"))
        title_row.addStretch()
        self.temperature_value_label = UIBuilder.create_info_label()
        self.temperature_value_label.setStyleSheet("color: #4B5563; font-size: 13px;")
        title_row.addWidget(self.temperature_value_label)
        card_layout.addLayout(title_row)

        self.temperature_slider = QSlider(Qt.Horizontal)
        self.temperature_slider.setAccessibleName("Model Temperature")
        self.temperature_slider.setRange(0, self.model.slider_steps)
        self.temperature_slider.setSingleStep(1)
        self.temperature_slider.setPageStep(4)
        self.temperature_slider.valueChanged.connect(self._on_slider_moved)
        card_layout.addWidget(self.temperature_slider)

        low = self.model.temperature_min
        high = self.model.temperature_max
        ticks = QHBoxLayout()
        ticks.addWidget(UIBuilder.create_info_label(f"{low:.2f}"))
        ticks.addStretch()
        ticks.addWidget(UIBuilder.create_info_label(f"{(low + high) / 2:.2f}"))
        ticks.addStretch()
        ticks.addWidget(UIBuilder.create_info_label(f"{high:.2f}"))
        card_layout.addLayout(ticks)

        body.addWidget(card)

    # --- Load & Update ---
    def load_current_values(self):
        """Push model values into the widgets."""
        self._radio_buttons[self.model.poem_type].setChecked(True)
        self.temperature_slider.blockSignals(True)
        self.temperature_slider.setValue(self.model.temperature_to_step(self.model.temperature))
        self.temperature_slider.blockSignals(False)
        self.temperature_value_label.setText(self.model.temperature_label)

    def _on_poem_type_toggled(self, button: QRadioButton, checked: bool):
        if not checked:
            return
        poem_type = button.property("poem_type")
        if poem_type == self.model.poem_type:
            return
        self.model.set_poem_type(poem_type)
        log.debug(f"[settings] Poem type -> {poem_type}")
        self.settings_changed.emit(self.model.poem_type, self.model.temperature)

    def _on_slider_moved(self, step: int):
        self.model.set_temperature(self.model.step_to_temperature(step))
        self.temperature_value_label.setText(self.model.temperature_label)
        self.settings_changed.emit(self.model.poem_type, self.model.temperature)
