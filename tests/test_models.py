"""
Tests for the Qt-free GUI models.
"""

import pytest

from poetry_camera.gui.models import AppState, Screen, SettingsModel


class TestSettingsModel:

    def test_defaults(self):
        model = SettingsModel()
        assert model.poem_type == "Haiku"
        assert model.temperature == 0.7
        assert model.temperature_label == "0.70"

    def test_slider_steps(self):
        assert SettingsModel().slider_steps == 40

    def test_set_poem_type(self):
        model = SettingsModel()
        model.set_poem_type("Sonnet")
        assert model.poem_type == "Sonnet"

    def test_unknown_poem_type_rejected(self):
        with pytest.raises(ValueError):
            SettingsModel().set_poem_type("Ballad")

    def test_temperature_snaps_to_step(self):
        model = SettingsModel()
        model.set_temperature(1.23)
        assert model.temperature == 1.25
        assert model.temperature_label == "1.25"

    def test_temperature_bounds(self):
        model = SettingsModel()
        model.set_temperature(0.0)
        assert model.temperature_label == "0.00"
        model.set_temperature(2.0)
        assert model.temperature_label == "2.00"
        with pytest.raises(ValueError):
            model.set_temperature(2.01)
        with pytest.raises(ValueError):
            model.set_temperature(-0.1)

    def test_step_mapping(self):
        model = SettingsModel()
        assert model.temperature_to_step(0.7) == 14
        assert model.step_to_temperature(14) == 0.7
        assert model.step_to_temperature(99) == 2.0
        assert model.step_to_temperature(-3) == 0.0


class TestAppState:

    def test_starts_on_camera(self):
        state = AppState()
        assert state.screen == Screen.CAMERA
        assert state.flash_on is False

    def test_navigate(self):
        state = AppState()
        assert state.navigate(Screen.HISTORY) is True
        assert state.screen == Screen.HISTORY
        assert state.navigate(Screen.HISTORY) is False

    def test_navigate_by_value(self):
        state = AppState()
        state.navigate("settings")
        assert state.screen == Screen.SETTINGS

    def test_back(self):
        state = AppState()
        state.navigate(Screen.SETTINGS)
        assert state.back() is True
        assert state.screen == Screen.CAMERA

    def test_toggle_flash(self):
        state = AppState()
        assert state.toggle_flash() is True
        assert state.toggle_flash() is False
