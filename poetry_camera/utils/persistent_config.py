# poetry_camera/utils/persistent_config.py
"""
Persistent user configuration storage.
Reads user overrides for application defaults (timings, settings defaults).

Shots and pending deletions are never stored here.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, Any, Optional

# Store config in user's home directory
USER_CONFIG_DIR = Path.home() / ".poetry_camera"
USER_CONFIG_PATH = USER_CONFIG_DIR / "config.json"


def load_persistent_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load persistent user configuration.

    Args:
        path: Override config file location (default: USER_CONFIG_PATH)

    Returns:
        Dict of overrides, empty if the file is missing or unreadable.
    """
    config_path = path or USER_CONFIG_PATH
    if not config_path.exists():
        return {}

    try:
        with config_path.open('r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Warning: Failed to load persistent config: {e}")
        return {}

    if not isinstance(config, dict):
        print(f"Warning: Ignoring persistent config, expected an object in {config_path}")
        return {}

    if 'LOG_DIR' in config and config['LOG_DIR']:
        config['LOG_DIR'] = Path(config['LOG_DIR']).expanduser()

    return config
