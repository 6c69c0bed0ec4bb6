"""
Line Capability Interface
=========================
The contract every line variant implements, whatever draws it.

Classes:
    LineKind: Tag of the concrete variant, fixed at construction.
    Line: Abstract base with move / rotate / resize / close.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from linecanvas.errors import LineClosedError

DEFAULT_ROTATION_STEP: float = 30.0


class LineKind(Enum):
    HOST_DELEGATED = "host"
    SELF_RENDERING = "canvas"


class Line(ABC):
    """
    A movable, rotatable, resizable line.

    Mutations are fire-and-forget: they return nothing and never fail for
    numeric input. `close()` releases everything the line put on its surface;
    it may be called any number of times.
    """
    kind: LineKind

    def __init__(self, rotation_step: float = DEFAULT_ROTATION_STEP) -> None:
        self.rotation_step = rotation_step
        self._closed = False

    @abstractmethod
    def move(self, dx: int, dy: int) -> None:
        """Translate by (dx, dy). Length and angle are unchanged."""

    @abstractmethod
    def rotate_clockwise(self) -> None:
        """Increase the rotation by `rotation_step` degrees around the pivot."""

    @abstractmethod
    def rotate_counter_clockwise(self) -> None:
        """Decrease the rotation by `rotation_step` degrees around the pivot."""

    @abstractmethod
    def resize(self, delta: int) -> None:
        """Change the length by `delta`, keeping the first endpoint fixed."""

    @abstractmethod
    def _release(self) -> None:
        """Remove this line's entries from its surface."""

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._release()
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise LineClosedError(f"{type(self).__name__} has been closed.")

    def __enter__(self) -> Line:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
