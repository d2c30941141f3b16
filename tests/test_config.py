"""
Tests for configuration defaults, validation and persistent overrides.
"""

import json
import logging
from pathlib import Path

import pytest

from poetry_camera import config
from poetry_camera.config import Config
from poetry_camera.utils.log import (
    clear_logger_configuration,
    get_configured_loggers,
    reconfigure_loggers,
    setup_logger,
)
from poetry_camera.utils.persistent_config import load_persistent_config


@pytest.fixture
def no_overrides(monkeypatch):
    monkeypatch.setattr(config, "_PERSISTENT_CONFIG", {})


class TestConfigDefaults:

    def test_deletion_timings(self, no_overrides):
        cfg = Config()
        assert cfg.LONG_PRESS_MS == 3000
        assert cfg.UNDO_WINDOW_S == 5
        assert cfg.UNDO_TICK_MS == 1000

    def test_settings_defaults(self, no_overrides):
        cfg = Config()
        assert cfg.DEFAULT_POEM_TYPE == "Haiku"
        assert cfg.DEFAULT_POEM_TYPE in cfg.POEM_TYPES
        assert cfg.DEFAULT_TEMPERATURE == 0.7
        assert cfg.INITIAL_SHOT_COUNT == 8

    def test_override_applied(self, monkeypatch):
        monkeypatch.setattr(config, "_PERSISTENT_CONFIG", {"UNDO_WINDOW_S": 10})
        assert Config().UNDO_WINDOW_S == 10


class TestConfigValidation:

    @pytest.mark.parametrize("key,value", [
        ("LONG_PRESS_MS", 0),
        ("UNDO_WINDOW_S", -1),
        ("UNDO_TICK_MS", "1000"),
        ("UNDO_WINDOW_S", True),
        ("INITIAL_SHOT_COUNT", -1),
        ("DEFAULT_POEM_TYPE", "Ballad"),
        ("DEFAULT_TEMPERATURE", 2.5),
    ])
    def test_bad_override_rejected(self, monkeypatch, key, value):
        monkeypatch.setattr(config, "_PERSISTENT_CONFIG", {key: value})
        with pytest.raises(ValueError):
            Config()


class TestPersistentConfig:

    def test_missing_file(self, tmp_path):
        assert load_persistent_config(tmp_path / "config.json") == {}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_persistent_config(path) == {}

    def test_non_object_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_persistent_config(path) == {}

    def test_valid_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"LONG_PRESS_MS": 2000, "LOG_DIR": "~/pc_logs"}), encoding="utf-8")
        loaded = load_persistent_config(path)
        assert loaded["LONG_PRESS_MS"] == 2000
        assert loaded["LOG_DIR"] == Path("~/pc_logs").expanduser()


class TestLogging:

    def test_setup_logger_does_not_propagate(self):
        logger = setup_logger("test.log_setup")
        assert logger.propagate is False
        assert logger.level == logging.DEBUG

    def test_reconfigure_writes_file(self, tmp_path):
        logger = setup_logger("test.log_file")
        try:
            reconfigure_loggers(tmp_path)
            logger.info("hello")
            for handler in logger.handlers:
                handler.flush()
            log_file = tmp_path / "test_log_file.log.txt"
            assert log_file.exists()
            assert "hello" in log_file.read_text(encoding="utf-8")
            assert "test.log_file" in get_configured_loggers()
        finally:
            clear_logger_configuration()

        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert get_configured_loggers() == set()
