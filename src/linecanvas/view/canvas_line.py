"""
Self-Rendering Line
===================
A line that tracks its own pose and paints itself pixel by pixel.

Why is this file needed?
------------------------
No native line primitive is involved: the line keeps an origin, a length and
an angle (`PoseState`), derives the second endpoint on every repaint and
asks the Bresenham rasterizer which pixels to set.

It is not a QGraphicsItem itself. It owns a small `_CanvasItem`, registered
on the surface through a `SurfaceHandle`, which forwards bounding-rect and
paint calls back to it.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QLineF, QPoint, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPolygon
from PySide6.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget

from linecanvas.model.geometry_primitives import Point, PoseState
from linecanvas.model.lines import Line, LineKind, DEFAULT_ROTATION_STEP
from linecanvas.model.raster import RenderPass, render_segment
from linecanvas.view.surface import Surface

logger = logging.getLogger(__name__)


class _CanvasItem(QGraphicsItem):
    def __init__(self, owner: CanvasLine) -> None:
        super().__init__()
        self._owner = owner

    def boundingRect(self) -> QRectF:
        return self._owner.bounding_region()

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None
    ) -> None:
        self._owner.paint(painter)


class CanvasLine(Line):
    kind = LineKind.SELF_RENDERING

    def __init__(
        self,
        surface: Surface,
        segment: QLineF,
        rotation_step: float = DEFAULT_ROTATION_STEP,
        min_length: float = 0.0,
        label_offset: int = 5,
        line_color: str = "red",
        background_color: str = "white",
    ) -> None:
        super().__init__(rotation_step)
        self.surface = surface
        self.min_length = min_length
        self.label_offset = label_offset
        self.line_color = QColor(line_color)
        self.background_color = QColor(background_color)

        self.pose = PoseState.from_segment(
            Point(segment.x1(), segment.y1()),
            Point(segment.x2(), segment.y2()),
        )
        self._handle = surface.add_item(_CanvasItem(self))

        logger.info(f"Canvas line created: origin=({self.pose.origin.x:g}, {self.pose.origin.y:g}), "
                    f"length={self.pose.length:g}, angle={self.pose.angle:g}")

    # ---- Line ----

    def move(self, dx: int, dy: int) -> None:
        self._ensure_open()
        self.pose.translate(dx, dy)
        self._request_redraw()

    def rotate_clockwise(self) -> None:
        self._ensure_open()
        self.pose.rotate(self.rotation_step)
        self._request_redraw()

    def rotate_counter_clockwise(self) -> None:
        self._ensure_open()
        self.pose.rotate(-self.rotation_step)
        self._request_redraw()

    def resize(self, delta: int) -> None:
        self._ensure_open()
        self.pose.resize(delta, self.min_length)
        self._request_redraw()

    def _release(self) -> None:
        self._handle.release()
        logger.info("Canvas line removed from surface.")

    # ---- rendering ----

    def bounding_region(self) -> QRectF:
        """
        The whole surface. Simpler than the rotated segment's bounding box,
        at the cost of repainting the full scene on every update.
        """
        return self.surface.scene_extent()

    def render_pass(self) -> RenderPass:
        return render_segment(self.pose.origin, self.pose.end, self.label_offset)

    def paint(self, painter: QPainter) -> None:
        painter.fillRect(self.bounding_region(), self.background_color)

        frame = self.render_pass()

        painter.save()
        pen = QPen(self.line_color)
        pen.setStyle(Qt.PenStyle.SolidLine)
        painter.setPen(pen)

        painter.drawPoints(QPolygon([QPoint(int(x), int(y)) for x, y in frame.pixel_array()]))
        for label in frame.labels:
            painter.drawText(label.x, label.y, label.text)

        painter.restore()

    def _request_redraw(self) -> None:
        logger.debug(f"Canvas line pose: origin=({self.pose.origin.x:g}, {self.pose.origin.y:g}), "
                     f"length={self.pose.length:g}, angle={self.pose.angle:g}")
        self._handle.item.update()
