"""
Logging Configuration
Sets up the global logger for the application.

The level and an optional log file can be set in the application's
QSettings store::

    [logging]
    level=DEBUG
    file=linecanvas.log
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QSettings

from linecanvas.errors import ConfigError

LEVEL_KEY = "logging/level"
FILE_KEY = "logging/file"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'linecanvas' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("linecanvas")
    logger.setLevel(level)

    # Avoid duplicate logs when called again
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")


def level_from_settings(settings: QSettings, default: int = logging.INFO) -> int:
    """
    Read `logging/level` as a level name ("DEBUG") or number ("10").

    Raises:
        ConfigError: If the value names no logging level.
    """
    raw = settings.value(LEVEL_KEY)
    if raw is None or raw == "":
        return default

    text = str(raw).strip()
    if text.isdigit():
        return int(text)
    level = getattr(logging, text.upper(), None)
    if not isinstance(level, int):
        raise ConfigError(f"Setting '{LEVEL_KEY}' is not a logging level: {raw!r}")
    return level


def setup_logging_from_settings(settings: QSettings) -> None:
    """`setup_logging` with the level and log file taken from `settings`."""
    log_file = settings.value(FILE_KEY) or None
    setup_logging(level=level_from_settings(settings), log_file=log_file)
