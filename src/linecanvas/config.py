"""
Configuration
=============
This module serves as the central registry for the demo's tunable constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents step sizes and scene dimensions from being
   hardcoded across the controller and the line variants.
2. Overrides: Values can be overridden through QSettings (INI format, set up
   by `linecanvas.application.create_app`), e.g.::

       [controls]
       move_step=50
       rotation_step=15

Exports:
    LineCanvasConfig: Frozen dataclass holding every tunable.
    load_config: Build a config from QSettings overrides.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Optional

from PySide6.QtCore import QSettings
from PySide6.QtGui import QColor

from linecanvas.errors import ConfigError

logger = logging.getLogger(__name__)

# QSettings key -> config field
SETTINGS_KEYS: dict[str, str] = {
    "controls/move_step": "move_step",
    "controls/rotation_step": "rotation_step",
    "controls/resize_step": "resize_step",
    "lines/min_length": "min_length",
    "scene/width": "scene_width",
    "scene/height": "scene_height",
}


@dataclass(frozen=True)
class LineCanvasConfig:
    move_step: int = 100
    rotation_step: float = 30.0  # degrees
    resize_step: int = 10
    min_length: float = 0.0
    label_offset: int = 5

    scene_width: int = 550
    scene_height: int = 550
    window_width: int = 800
    window_height: int = 600

    line_color: str = "red"
    background_color: str = "white"

    def __post_init__(self) -> None:
        for name in ("move_step", "rotation_step", "resize_step", "min_length"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ConfigError(f"'{name}' must be finite, got {value!r}.")
        if self.min_length < 0:
            raise ConfigError(f"'min_length' must be >= 0, got {self.min_length}.")
        if self.scene_width <= 0 or self.scene_height <= 0:
            raise ConfigError(f"Scene size must be positive, got {self.scene_width}x{self.scene_height}.")
        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigError(f"Window size must be positive, got {self.window_width}x{self.window_height}.")
        if self.label_offset < 0:
            raise ConfigError(f"'label_offset' must be >= 0, got {self.label_offset}.")
        for name in ("line_color", "background_color"):
            if not QColor(getattr(self, name)).isValid():
                raise ConfigError(f"'{name}' is not a valid color: {getattr(self, name)!r}.")

    @property
    def scene_rect(self) -> tuple[int, int, int, int]:
        return 0, 0, self.scene_width, self.scene_height


def load_config(settings: Optional[QSettings] = None) -> LineCanvasConfig:
    """
    Create the configuration, applying any overrides found in `settings`.

    Args:
        settings: Settings store to read. `None` returns the defaults.

    Raises:
        ConfigError: If an override is not a number or is out of range.
    """
    if settings is None:
        return LineCanvasConfig()

    types = {f.name: f.type for f in fields(LineCanvasConfig)}
    overrides = {}
    for key, name in SETTINGS_KEYS.items():
        if not settings.contains(key):
            continue
        raw = settings.value(key)
        cast = float if types[name] == "float" else int
        try:
            overrides[name] = cast(raw)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Setting '{key}' is not a number: {raw!r}") from e
        logger.debug(f"Config override {key} = {overrides[name]}")

    return LineCanvasConfig(**overrides)
