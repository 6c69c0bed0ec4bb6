"""
Main Application Window
=======================
Holds the controls help text and the graphics view with the two demo lines.

Why is this file needed?
------------------------
1. Layout: Help label on the left, 550x550 scene on the right.
2. Routing: Key presses go to the `LineController`; the window itself keeps
   no line state.
3. Teardown: Lines release their scene entries before the scene goes away.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QLineF
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QLabel, QGraphicsScene, QGraphicsView
)

from linecanvas.application import VISIBLE_APP_NAME
from linecanvas.config import LineCanvasConfig
from linecanvas.controller.line_controller import CONTROLS_HELP, LineController
from linecanvas.view.canvas_line import CanvasLine
from linecanvas.view.host_line import HostLine
from linecanvas.view.surface import Surface

logger = logging.getLogger(__name__)

ACTIVE_LINE_NAMES = {
    0: "Qt line (A1-B1)",
    1: "Bresenham line (A2-B2)",
}


class MainWindow(QMainWindow):
    def __init__(self, config: Optional[LineCanvasConfig] = None) -> None:
        super().__init__()
        self.config = config or LineCanvasConfig()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(self.config.window_width, self.config.window_height)

        central = QWidget(self)
        layout = QHBoxLayout(central)
        self.setCentralWidget(central)

        self.help_label = QLabel(CONTROLS_HELP, central)
        layout.addWidget(self.help_label)

        self.scene = QGraphicsScene(central)
        self.scene.setSceneRect(*self.config.scene_rect)
        self.view = QGraphicsView(self.scene, central)
        self.view.setSceneRect(*self.config.scene_rect)
        layout.addWidget(self.view)

        self.surface = Surface(self.scene)

        # Canvas line first: it fills the whole scene, so it must sit below.
        canvas_line = CanvasLine(
            self.surface,
            QLineF(100, 200, 200, 200),
            rotation_step=self.config.rotation_step,
            min_length=self.config.min_length,
            label_offset=self.config.label_offset,
            line_color=self.config.line_color,
            background_color=self.config.background_color,
        )
        host_line = HostLine(
            self.surface,
            QLineF(100, 100, 200, 100),
            rotation_step=self.config.rotation_step,
            min_length=self.config.min_length,
        )
        self.controller = LineController([host_line, canvas_line], self.config)

        self._show_active()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not self.controller.handle_key(event.key()):
            super().keyPressEvent(event)
            return
        self._show_active()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.close()
        logger.info(f"Surface entries left after close: {self.surface.live_handles}")
        super().closeEvent(event)

    def _show_active(self) -> None:
        name = ACTIVE_LINE_NAMES.get(self.controller.active_index, f"#{self.controller.active_index}")
        self.statusBar().showMessage(f"Active: {name}")
