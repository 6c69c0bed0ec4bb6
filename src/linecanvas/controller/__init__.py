"""
The CONTROLLER layer turns key presses into calls on the active line.
"""
from linecanvas.controller.line_controller import Command, KEY_BINDINGS, LineController, apply_command

__all__ = ["Command", "KEY_BINDINGS", "LineController", "apply_command"]
