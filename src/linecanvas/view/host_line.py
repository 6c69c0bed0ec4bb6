"""
Host-Delegated Line
===================
A line that lets Qt do the drawing: it wraps a QGraphicsLineItem and only
forwards moves, rotations and resizes to it.

The item carries two child labels, "A1" on the first endpoint (also the
rotation pivot) and "B1" on the second, so they follow every move and
rotation of the line.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QLineF, QPointF
from PySide6.QtWidgets import QGraphicsLineItem

from linecanvas.model.geometry_primitives import Vector
from linecanvas.model.lines import Line, LineKind, DEFAULT_ROTATION_STEP
from linecanvas.view.surface import Surface

logger = logging.getLogger(__name__)


class HostLine(Line):
    kind = LineKind.HOST_DELEGATED

    def __init__(
        self,
        surface: Surface,
        segment: QLineF,
        rotation_step: float = DEFAULT_ROTATION_STEP,
        min_length: float = 0.0,
    ) -> None:
        super().__init__(rotation_step)
        self.surface = surface
        self.min_length = min_length

        self._line_handle = surface.add_line(segment)
        self._item: QGraphicsLineItem = self._line_handle.item
        self._item.setTransformOriginPoint(segment.p1())

        # Kept apart from the item's line so a zero-length line can grow back.
        direction = Vector(segment.dx(), segment.dy()).normalize()
        if direction.magnitude == 0.0:
            direction = Vector(1.0, 0.0)
        self._direction = direction

        self._label_a = surface.add_label("A1", segment.p1(), parent=self._item)
        self._label_b = surface.add_label("B1", segment.p2(), parent=self._item)

        logger.info(f"Host line created: {segment.p1().toTuple()} -> {segment.p2().toTuple()}")

    # ---- state ----

    @property
    def rotation(self) -> float:
        return self._item.rotation()

    @property
    def length(self) -> float:
        return self._item.line().length()

    def endpoints(self) -> tuple[QPointF, QPointF]:
        """Both endpoints in scene coordinates (after move and rotation)."""
        line = self._item.line()
        return self._item.mapToScene(line.p1()), self._item.mapToScene(line.p2())

    def label_positions(self) -> tuple[QPointF, QPointF]:
        """Positions of "A1" and "B1" in the line item's coordinates."""
        return self._label_a.item.pos(), self._label_b.item.pos()

    # ---- Line ----

    def move(self, dx: int, dy: int) -> None:
        self._ensure_open()
        self._item.moveBy(dx, dy)
        logger.debug(f"Host line moved by ({dx}, {dy}), pos={self._item.pos().toTuple()}")

    def rotate_clockwise(self) -> None:
        self._ensure_open()
        self._item.setRotation(self._item.rotation() + self.rotation_step)
        logger.debug(f"Host line rotation={self._item.rotation():g}")

    def rotate_counter_clockwise(self) -> None:
        self._ensure_open()
        self._item.setRotation(self._item.rotation() - self.rotation_step)
        logger.debug(f"Host line rotation={self._item.rotation():g}")

    def resize(self, delta: int) -> None:
        self._ensure_open()
        line = self._item.line()
        length = max(self.min_length, line.length() + delta)
        end = line.p1() + QPointF(self._direction.x * length, self._direction.y * length)
        self._item.setLine(QLineF(line.p1(), end))
        self._label_b.item.setPos(end)
        logger.debug(f"Host line length={length:g}")

    def _release(self) -> None:
        # Labels first; they are children of the line item.
        self._label_b.release()
        self._label_a.release()
        self._line_handle.release()
        logger.info("Host line removed from surface.")
