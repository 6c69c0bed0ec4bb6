"""
Exception types raised by linecanvas.

Line operations themselves never raise for numeric input; these cover the
boundaries around them (surface setup, configuration, use after teardown).
"""


class LineCanvasError(Exception):
    """Base class for all linecanvas errors."""


class SurfaceError(LineCanvasError):
    """The drawing surface is unavailable or refused to create a primitive."""


class LineClosedError(LineCanvasError):
    """An operation was called on a line whose surface entries were released."""


class ConfigError(LineCanvasError, ValueError):
    """A configuration value is out of its valid range."""
