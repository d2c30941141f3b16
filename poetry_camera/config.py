# poetry_camera/config.py
"""
Application configuration for the Poetry Camera shell.
Gesture timings, undo window, settings defaults and window geometry.
Loads user preferences from persistent storage.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from poetry_camera.utils.persistent_config import load_persistent_config, USER_CONFIG_DIR

_PERSISTENT_CONFIG = load_persistent_config()


def _get_config_value(key: str, default: Any) -> Any:
    """Get config value from persistent storage or use default."""
    return _PERSISTENT_CONFIG.get(key, default)


@dataclass
class Config:
    # --- Logging ---
    LOG_LEVEL: str = field(default_factory=lambda: _get_config_value('LOG_LEVEL', 'INFO'))
    LOG_DIR: Path = field(
        default_factory=lambda: Path(_get_config_value('LOG_DIR', USER_CONFIG_DIR / "logs"))
    )

    # --- Deferred deletion ---
    # Hold duration before a press turns into a delete request
    LONG_PRESS_MS: int = field(default_factory=lambda: _get_config_value('LONG_PRESS_MS', 3000))
    UNDO_WINDOW_S: int = field(default_factory=lambda: _get_config_value('UNDO_WINDOW_S', 5))
    UNDO_TICK_MS: int = field(default_factory=lambda: _get_config_value('UNDO_TICK_MS', 1000))

    # --- History ---
    INITIAL_SHOT_COUNT: int = field(
        default_factory=lambda: _get_config_value('INITIAL_SHOT_COUNT', 8)
    )

    # --- Poem settings ---
    POEM_TYPES: list = field(default_factory=lambda: _get_config_value(
        'POEM_TYPES', ["Haiku", "Sonnet", "Limerick", "Free Verse", "Acrostic"]
    ))
    DEFAULT_POEM_TYPE: str = field(
        default_factory=lambda: _get_config_value('DEFAULT_POEM_TYPE', 'Haiku')
    )
    DEFAULT_TEMPERATURE: float = field(
        default_factory=lambda: _get_config_value('DEFAULT_TEMPERATURE', 0.7)
    )
    TEMPERATURE_MIN: float = 0.0
    TEMPERATURE_MAX: float = 2.0
    TEMPERATURE_STEP: float = 0.05

    # --- Window ---
    WINDOW_WIDTH: int = 360
    WINDOW_HEIGHT: int = 640
    TRANSITION_MS: int = field(default_factory=lambda: _get_config_value('TRANSITION_MS', 250))

    def __post_init__(self):
        for name in ('LONG_PRESS_MS', 'UNDO_WINDOW_S', 'UNDO_TICK_MS'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if self.INITIAL_SHOT_COUNT < 0:
            raise ValueError(f"INITIAL_SHOT_COUNT must not be negative, got {self.INITIAL_SHOT_COUNT}")

        if self.DEFAULT_POEM_TYPE not in self.POEM_TYPES:
            raise ValueError(
                f"DEFAULT_POEM_TYPE {self.DEFAULT_POEM_TYPE!r} is not one of {self.POEM_TYPES}"
            )

        if not self.TEMPERATURE_MIN <= self.DEFAULT_TEMPERATURE <= self.TEMPERATURE_MAX:
            raise ValueError(
                f"DEFAULT_TEMPERATURE must be within "
                f"[{self.TEMPERATURE_MIN}, {self.TEMPERATURE_MAX}], got {self.DEFAULT_TEMPERATURE}"
            )

DEFAULT_CONFIG = Config()
