import pytest
from PySide6.QtCore import QSettings

from linecanvas.config import LineCanvasConfig, load_config
from linecanvas.errors import ConfigError


@pytest.fixture
def settings(tmp_path, qapp):
    return QSettings(str(tmp_path / "linecanvas.ini"), QSettings.Format.IniFormat)


def test_defaults():
    config = load_config(None)
    assert config == LineCanvasConfig()
    assert (config.move_step, config.rotation_step, config.resize_step) == (100, 30.0, 10)
    assert config.min_length == 0.0
    assert config.scene_rect == (0, 0, 550, 550)


@pytest.mark.parametrize("kwargs", [
    {"min_length": -1.0},
    {"scene_width": 0},
    {"scene_height": -5},
    {"rotation_step": float("nan")},
    {"move_step": float("inf")},
    {"window_width": 0},
    {"window_height": -1},
    {"label_offset": -5},
    {"line_color": "not-a-color"},
    {"background_color": ""},
])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError):
        LineCanvasConfig(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        LineCanvasConfig(min_length=-1.0)


def test_overrides_from_settings(settings):
    settings.setValue("controls/move_step", 50)
    settings.setValue("controls/rotation_step", "15")
    settings.setValue("scene/width", 800)
    settings.sync()

    config = load_config(settings)
    assert config.move_step == 50
    assert config.rotation_step == 15.0
    assert config.scene_width == 800
    assert config.resize_step == 10


def test_empty_settings_give_defaults(settings):
    assert load_config(settings) == LineCanvasConfig()


def test_non_numeric_override(settings):
    settings.setValue("controls/resize_step", "abc")
    with pytest.raises(ConfigError):
        load_config(settings)


def test_hex_colors_are_accepted():
    config = LineCanvasConfig(line_color="#00ff00", background_color="#202020")
    assert config.line_color == "#00ff00"
