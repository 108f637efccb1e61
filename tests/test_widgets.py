import pytest
from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtTest import QTest
from PyQt5.QtWidgets import QWidget

from touch_joystick.widgets import JoystickOverlay, QtFadeTween, QtInterfaceElement


def test_element_positions_by_centre(qapp):
    host = QWidget()
    element = QtInterfaceElement("joyring", host)
    element.width = 100
    element.height = 100
    element.set_pos(200, 150)
    geometry = element.view.geometry()
    assert (geometry.x(), geometry.y()) == (150, 100)
    assert (geometry.width(), geometry.height()) == (100, 100)
    assert (element.x, element.y) == (200, 150)


def test_element_alpha_visibility_and_layer(qapp):
    host = QWidget()
    element = QtInterfaceElement("joystick", host)
    layers = []
    element.layer_changed.connect(layers.append)

    element.alpha = 0.25
    assert element.alpha == pytest.approx(0.25)
    element.layer = 5
    element.layer = 5
    assert layers == [5.0]

    assert not element.visible
    element.show()
    assert element.visible
    element.hide()
    assert not element.visible


def test_fade_tween_runs_on_qt_animation(qapp):
    values = []
    tween = QtFadeTween()
    tween.build(1.0, 0.5, 500).animate(values.append)
    assert tween.is_running

    tween.pause()
    assert tween.is_paused
    tween.resume()
    tween.animation.setCurrentTime(500)
    assert values[-1] == pytest.approx(0.5)

    tween.stop()
    assert not tween.is_running


def test_fade_tween_zero_duration(qapp):
    values = []
    tween = QtFadeTween()
    tween.build(0.5, 1.0, 0).animate(values.append)
    assert values == [1.0]
    assert not tween.is_running


@pytest.fixture
def overlay(qapp):
    widget = JoystickOverlay()
    widget.resize(800, 600)
    widget.show()
    yield widget
    widget.close()


def test_overlay_builds_controllers_and_rejects_conflicts(overlay):
    left = overlay.add_controller({"type": "traversal", "zone": "left"})
    right = overlay.add_controller({"type": "static", "zone": "right"})
    assert left is not None and right is not None
    assert overlay.add_controller({"type": "static", "zone": "left"}) is None
    assert overlay.controllers == [left, right]
    assert overlay.dispatcher.screen_size() == (800.0, 600.0)


def test_overlay_mouse_drives_controller(overlay):
    began, released = [], []
    controller = overlay.add_controller({
        "type": "static",
        "callback": {
            "on_touch_begin": lambda: began.append(True),
            "on_release": released.append,
        },
    })
    QTest.mousePress(overlay, Qt.LeftButton, Qt.NoModifier, QPoint(300, 200))
    assert began == [True]
    assert controller.is_active
    assert controller.anchor_position == (300, 200)

    QTest.mouseRelease(overlay, Qt.LeftButton, Qt.NoModifier, QPoint(300, 200))
    assert released == [0.0]
    assert not controller.is_active


def test_overlay_shutdown_destroys_controllers(overlay):
    overlay.add_controller({"type": "traversal", "zone": "left"})
    overlay.shutdown()
    assert overlay.controllers == []
    assert not overlay.dispatcher.registry.reserved_zones
