import pytest
from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QCloseEvent, QKeyEvent

from linecanvas.model.lines import LineKind
from linecanvas.view.main_window import MainWindow


def press(window: MainWindow, key: Qt.Key) -> None:
    window.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, key.value, Qt.KeyboardModifier.NoModifier))


@pytest.fixture
def window(qapp):
    win = MainWindow()
    yield win
    win.closeEvent(QCloseEvent())


def test_two_lines_host_active_first(window):
    assert [line.kind for line in window.controller.lines] == [
        LineKind.HOST_DELEGATED, LineKind.SELF_RENDERING
    ]
    assert window.controller.active.kind is LineKind.HOST_DELEGATED
    assert window.scene.sceneRect().width() == 550
    assert "Qt line" in window.statusBar().currentMessage()


def test_keys_drive_active_line(window):
    host, canvas = window.controller.lines

    press(window, Qt.Key.Key_W)
    p1, _ = host.endpoints()
    assert (p1.x(), p1.y()) == (100, 0)

    press(window, Qt.Key.Key_Space)
    assert window.controller.active is canvas
    assert "Bresenham" in window.statusBar().currentMessage()

    press(window, Qt.Key.Key_C)
    assert canvas.pose.length == pytest.approx(110)


def test_unmapped_key_changes_nothing(window):
    host, canvas = window.controller.lines
    before = host.endpoints()
    press(window, Qt.Key.Key_X)
    assert host.endpoints() == before
    assert window.controller.active is host


def test_close_releases_scene_entries(qapp):
    win = MainWindow()
    assert win.surface.live_handles == 4
    win.closeEvent(QCloseEvent())
    assert win.surface.live_handles == 0
    assert win.scene.items() == []
