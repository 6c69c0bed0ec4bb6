"""
Pytest configuration and fixtures for the linecanvas test suite.

Qt runs on the 'offscreen' platform so the suite works without a display.
"""
import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication, QGraphicsScene


def pytest_configure(config):
    """Make the src/ layout importable without installing the package."""
    src_root = os.path.join(os.path.dirname(os.path.dirname(__file__)), "src")
    if src_root not in sys.path:
        sys.path.insert(0, src_root)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def scene(qapp):
    scene = QGraphicsScene()
    scene.setSceneRect(0, 0, 550, 550)
    yield scene
    scene.clear()


@pytest.fixture
def surface(scene):
    from linecanvas.view.surface import Surface
    return Surface(scene)
