"""
Line Controller
===============
Maps discrete key input onto the line that is currently active.

Why is this file needed?
------------------------
1. Routing: It owns the "which line is active" selector, so the window and
   the lines never share that state.
2. Key map: The WASD / QE / ZC / Space bindings live in one table.

Classes:
    Command: Every action the input feed can request.
    LineController: Holds the lines and the active index.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional, Sequence

from PySide6.QtCore import Qt

from linecanvas.config import LineCanvasConfig
from linecanvas.model.lines import Line

logger = logging.getLogger(__name__)


class Command(Enum):
    TOGGLE_ACTIVE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ROTATE_CCW = auto()
    ROTATE_CW = auto()
    SHRINK = auto()
    GROW = auto()


KEY_BINDINGS: dict[int, Command] = {
    Qt.Key.Key_Space.value: Command.TOGGLE_ACTIVE,
    Qt.Key.Key_W.value: Command.MOVE_UP,
    Qt.Key.Key_S.value: Command.MOVE_DOWN,
    Qt.Key.Key_A.value: Command.MOVE_LEFT,
    Qt.Key.Key_D.value: Command.MOVE_RIGHT,
    Qt.Key.Key_Q.value: Command.ROTATE_CCW,
    Qt.Key.Key_E.value: Command.ROTATE_CW,
    Qt.Key.Key_Z.value: Command.SHRINK,
    Qt.Key.Key_C.value: Command.GROW,
}

CONTROLS_HELP = "Controls:\n1. Movement: WASD\n2. Rotation: QE\n3. Scale: ZC\n4. Switch: Space"


def apply_command(line: Line, command: Command, config: LineCanvasConfig) -> None:
    """Run one line command against `line`. TOGGLE_ACTIVE is not a line command."""
    step = config.move_step
    match command:
        case Command.MOVE_UP:
            line.move(0, -step)
        case Command.MOVE_DOWN:
            line.move(0, step)
        case Command.MOVE_LEFT:
            line.move(-step, 0)
        case Command.MOVE_RIGHT:
            line.move(step, 0)
        case Command.ROTATE_CCW:
            line.rotate_counter_clockwise()
        case Command.ROTATE_CW:
            line.rotate_clockwise()
        case Command.SHRINK:
            line.resize(-config.resize_step)
        case Command.GROW:
            line.resize(config.resize_step)
        case _:
            raise ValueError(f"{command} is not a line command.")


class LineController:
    def __init__(self, lines: Sequence[Line], config: Optional[LineCanvasConfig] = None, active: int = 0) -> None:
        if not lines:
            raise ValueError("LineController needs at least one line.")
        self.lines: list[Line] = list(lines)
        self.config = config or LineCanvasConfig()
        self._active = active % len(self.lines)

    @property
    def active_index(self) -> int:
        return self._active

    @property
    def active(self) -> Line:
        return self.lines[self._active]

    def toggle(self) -> None:
        self._active = (self._active + 1) % len(self.lines)
        logger.info(f"Active line: #{self._active} ({self.active.kind.value})")

    def dispatch(self, command: Command) -> None:
        if command is Command.TOGGLE_ACTIVE:
            self.toggle()
        else:
            apply_command(self.active, command, self.config)

    def handle_key(self, key: int) -> bool:
        """
        Dispatch the command bound to `key`.

        Returns:
            False for unbound keys, which are otherwise ignored.
        """
        command = KEY_BINDINGS.get(int(key))
        if command is None:
            logger.debug(f"Ignoring unbound key {key}")
            return False
        self.dispatch(command)
        return True

    def close(self) -> None:
        """Release every line's surface entries."""
        for line in self.lines:
            line.close()
