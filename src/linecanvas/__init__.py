"""Two interchangeable 2D line backends: Qt-drawn and self-rasterized."""

__version__ = "0.1.0"
