import os

import pytest

from touch_joystick import InterfaceElement, Tween, ZoneRegistry

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def registry():
    return ZoneRegistry()


class Recorder:
    """Collects controller callbacks."""

    def __init__(self):
        self.moves = []
        self.releases = []
        self.touch_begins = 0

    def on_move(self, x, y, angle, in_center):
        self.moves.append((x, y, angle, in_center))

    def on_release(self, angle):
        self.releases.append(angle)

    def on_touch_begin(self):
        self.touch_begins += 1

    def callbacks(self):
        return {
            "on_move": self.on_move,
            "on_release": self.on_release,
            "on_touch_begin": self.on_touch_begin,
        }


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_controller(registry, recorder):
    from touch_joystick import Controller

    def _make(**options):
        options.setdefault("callback", recorder.callbacks())
        return Controller(
            options,
            registry=registry,
            joyring=InterfaceElement("joyring"),
            joystick=InterfaceElement("joystick"),
            tween=Tween(),
        )

    return _make
