"""
Line Rasterization (Bresenham)
==============================
Turns a segment between two endpoints into the integer pixels approximating it.

Why is this file needed?
------------------------
The self-rendering line does not use any native line primitive. It paints
individual pixels, and this module decides which ones, using only integer
incremental arithmetic.

Octant handling:
    1. |dy| < |dx| -> "low" (shallow) line, x is the driving axis.
       Otherwise   -> "high" (steep) line, y is the driving axis.
    2. Endpoints are swapped when needed so the driving coordinate only
       ever increases inside the stepping loop.
    3. The minor axis steps by +1 or -1 depending on the sign of its delta.

Endpoints are truncated toward zero once, before classification.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt
    from linecanvas.model.geometry_primitives import Point

logger = logging.getLogger(__name__)

Pixel = tuple[int, int]


@dataclass(frozen=True)
class Annotation:
    """A text label anchored at a scene position (baseline-left)."""
    text: str
    x: int
    y: int


@dataclass(frozen=True)
class RenderPass:
    """Everything one repaint of a self-rendering line needs to draw."""
    pixels: tuple[Pixel, ...]
    labels: tuple[Annotation, ...] = field(default_factory=tuple)

    def pixel_array(self) -> npt.NDArray[np.int64]:
        return _as_array(self.pixels)


def iter_line_low(x1: int, y1: int, x2: int, y2: int) -> Iterator[Pixel]:
    """Shallow case: x1 <= x2 and |y2 - y1| <= x2 - x1."""
    dx = x2 - x1
    dy = y2 - y1
    sy = -1 if dy < 0 else 1
    dy *= sy

    d = 2 * dy - dx
    y = y1
    for x in range(x1, x2 + 1):
        yield x, y
        if d > 0:
            y += sy
            d += 2 * (dy - dx)
        else:
            d += 2 * dy


def iter_line_high(x1: int, y1: int, x2: int, y2: int) -> Iterator[Pixel]:
    """Steep case: y1 <= y2 and |x2 - x1| <= y2 - y1."""
    dx = x2 - x1
    dy = y2 - y1
    sx = -1 if dx < 0 else 1
    dx *= sx

    d = 2 * dx - dy
    x = x1
    for y in range(y1, y2 + 1):
        yield x, y
        if d > 0:
            x += sx
            d += 2 * (dx - dy)
        else:
            d += 2 * dx


def rasterize(x1: float, y1: float, x2: float, y2: float) -> tuple[Pixel, ...]:
    """
    Rasterize the segment (x1, y1) -> (x2, y2).

    Args:
        x1, y1: First endpoint (real coordinates, truncated to int).
        x2, y2: Second endpoint (real coordinates, truncated to int).

    Returns:
        The pixels ordered along the increasing driving axis, exactly one per
        integer step. The order may therefore be reversed relative to the
        input endpoints.
    """
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)

    if abs(y2 - y1) < abs(x2 - x1):
        if x1 > x2:
            return tuple(iter_line_low(x2, y2, x1, y1))
        return tuple(iter_line_low(x1, y1, x2, y2))

    if y1 > y2:
        return tuple(iter_line_high(x2, y2, x1, y1))
    return tuple(iter_line_high(x1, y1, x2, y2))


def render_segment(start: Point, end: Point, label_offset: int = 5) -> RenderPass:
    """
    Build the render pass of a segment: its pixels plus the "A2"/"B2" labels.

    Labels go to the original (pre-swap) endpoints, `label_offset` pixels up,
    whichever stepping routine produced the pixels.
    """
    pixels = rasterize(start.x, start.y, end.x, end.y)
    labels = (
        Annotation("A2", int(start.x), int(start.y) - label_offset),
        Annotation("B2", int(end.x), int(end.y) - label_offset),
    )
    logger.debug(f"Rasterized ({start.x:g}, {start.y:g}) -> ({end.x:g}, {end.y:g}): {len(pixels)} px")
    return RenderPass(pixels=pixels, labels=labels)


def _as_array(pixels: tuple[Pixel, ...]) -> npt.NDArray[np.int64]:
    if not pixels:
        return np.empty((0, 2), dtype=np.int64)
    return np.asarray(pixels, dtype=np.int64)
