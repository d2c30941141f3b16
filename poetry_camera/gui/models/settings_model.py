# poetry_camera/gui/models/settings_model.py
"""
Poem settings model.

Pure data model with no Qt dependencies.
Holds the session's poem type and model temperature. Nothing here is saved.
"""

from __future__ import annotations
from typing import List, Optional

from poetry_camera.config import DEFAULT_CONFIG as CFG


class SettingsModel:
    """
    Poem type and temperature for the current session.

    Usage:
        model = SettingsModel()
        model.set_poem_type("Sonnet")
        model.set_temperature(1.23)    # snapped to 1.25
        model.temperature_label        # "1.25"
    """

    def __init__(self,
                 poem_types: Optional[List[str]] = None,
                 poem_type: Optional[str] = None,
                 temperature: Optional[float] = None):
        self.poem_types: List[str] = list(poem_types or CFG.POEM_TYPES)
        self.temperature_min = CFG.TEMPERATURE_MIN
        self.temperature_max = CFG.TEMPERATURE_MAX
        self.temperature_step = CFG.TEMPERATURE_STEP

        self._poem_type = self.poem_types[0]
        self._temperature = self.temperature_min
        self.set_poem_type(poem_type or CFG.DEFAULT_POEM_TYPE)
        self.set_temperature(CFG.DEFAULT_TEMPERATURE if temperature is None else temperature)

    # --------------------------------------------------
    # Properties
    # --------------------------------------------------

    @property
    def poem_type(self) -> str:
        return self._poem_type

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def temperature_label(self) -> str:
        """Temperature formatted for display (two decimals)."""
        return f"{self._temperature:.2f}"

    @property
    def slider_steps(self) -> int:
        """Number of discrete steps between min and max."""
        return round((self.temperature_max - self.temperature_min) / self.temperature_step)

    # --------------------------------------------------
    # Mutations
    # --------------------------------------------------

    def set_poem_type(self, poem_type: str) -> None:
        if poem_type not in self.poem_types:
            raise ValueError(f"Unknown poem type {poem_type!r}; expected one of {self.poem_types}")
        self._poem_type = poem_type

    def set_temperature(self, value: float) -> None:
        """Set temperature, snapped to the nearest step."""
        if not self.temperature_min <= value <= self.temperature_max:
            raise ValueError(
                f"Temperature {value} outside [{self.temperature_min}, {self.temperature_max}]"
            )
        self._temperature = self.step_to_temperature(self.temperature_to_step(value))

    # --------------------------------------------------
    # Slider mapping
    # --------------------------------------------------

    def temperature_to_step(self, value: float) -> int:
        return round((value - self.temperature_min) / self.temperature_step)

    def step_to_temperature(self, step: int) -> float:
        step = max(0, min(self.slider_steps, step))
        return round(self.temperature_min + step * self.temperature_step, 2)
