"""
Drawing Surface
===============
A thin wrapper around a QGraphicsScene exposing only what lines need.

Why is this file needed?
------------------------
1. Decoupling: Lines only see "add a primitive", "add a label", "remove by
   handle" and "scene extent", never the scene's full API.
2. Ownership: Every entry a line adds comes back as a `SurfaceHandle`.
   The handle is the single owner of that entry and removes it exactly once.

Classes:
    SurfaceHandle: Owning reference to one scene entry.
    Surface: The scene wrapper.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QLineF, QPointF, QRectF
from PySide6.QtWidgets import QGraphicsItem, QGraphicsScene

from linecanvas.errors import SurfaceError

logger = logging.getLogger(__name__)


class SurfaceHandle:
    """Owns one item registered on a `Surface`. Releasing twice is a no-op."""

    def __init__(self, surface: Surface, item: QGraphicsItem) -> None:
        self._surface = surface
        self._item: Optional[QGraphicsItem] = item

    @property
    def item(self) -> QGraphicsItem:
        if self._item is None:
            raise SurfaceError("Handle has already been released.")
        return self._item

    @property
    def released(self) -> bool:
        return self._item is None

    def release(self) -> None:
        if self._item is None:
            return
        item = self._item
        # Children go first; deleting the parent would delete them under their handles.
        for child in self._surface._children_of(item):
            child.release()

        self._item = None
        if item.scene() is not None:
            item.scene().removeItem(item)
        self._surface._forget(self)
        logger.debug(f"Released {type(item).__name__}")


class Surface:
    def __init__(self, scene: Optional[QGraphicsScene]) -> None:
        if scene is None:
            raise SurfaceError("A QGraphicsScene is required.")
        self.scene = scene
        self._handles: list[SurfaceHandle] = []

    @property
    def live_handles(self) -> int:
        """Number of entries registered and not yet released."""
        return len(self._handles)

    def add_line(self, line: QLineF) -> SurfaceHandle:
        item = self.scene.addLine(line)
        if item is None:
            raise SurfaceError(f"Scene refused to create a line at {line}.")
        return self._register(item)

    def add_label(self, text: str, pos: QPointF, parent: Optional[QGraphicsItem] = None) -> SurfaceHandle:
        """
        Add a text label. With a `parent`, `pos` is in the parent's coordinates
        and the label moves and rotates with it.
        """
        item = self.scene.addText(text)
        if item is None:
            raise SurfaceError(f"Scene refused to create label '{text}'.")
        if parent is not None:
            item.setParentItem(parent)
        item.setPos(pos)
        return self._register(item)

    def add_item(self, item: QGraphicsItem) -> SurfaceHandle:
        self.scene.addItem(item)
        return self._register(item)

    def remove(self, handle: SurfaceHandle) -> None:
        handle.release()

    def scene_extent(self) -> QRectF:
        return self.scene.sceneRect()

    def _register(self, item: QGraphicsItem) -> SurfaceHandle:
        handle = SurfaceHandle(self, item)
        self._handles.append(handle)
        return handle

    def _children_of(self, item: QGraphicsItem) -> list[SurfaceHandle]:
        return [h for h in self._handles if h._item is not None and h._item.parentItem() is item]

    def _forget(self, handle: SurfaceHandle) -> None:
        self._handles.remove(handle)
