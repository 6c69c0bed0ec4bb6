import logging

import pytest
from PySide6.QtCore import QSettings

from linecanvas.errors import ConfigError
from linecanvas.logging_config import level_from_settings, setup_logging, setup_logging_from_settings


@pytest.fixture
def settings(tmp_path, qapp):
    return QSettings(str(tmp_path / "linecanvas.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("linecanvas")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_default_level(settings):
    assert level_from_settings(settings) == logging.INFO


@pytest.mark.parametrize("raw, expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    ("10", 10),
    (30, 30),
])
def test_level_from_settings(settings, raw, expected):
    settings.setValue("logging/level", raw)
    assert level_from_settings(settings) == expected


def test_unknown_level(settings):
    settings.setValue("logging/level", "LOUD")
    with pytest.raises(ConfigError):
        level_from_settings(settings)


def test_setup_is_not_duplicated(package_logger):
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_from_settings_with_file(settings, tmp_path, package_logger):
    log_file = tmp_path / "run.log"
    settings.setValue("logging/level", "WARNING")
    settings.setValue("logging/file", str(log_file))

    setup_logging_from_settings(settings)
    assert package_logger.level == logging.WARNING
    assert len(package_logger.handlers) == 2

    logging.getLogger("linecanvas.view").warning("surface gone")
    for handler in package_logger.handlers:
        handler.flush()
    assert "surface gone" in log_file.read_text(encoding="utf-8")
