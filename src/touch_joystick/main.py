#!/usr/bin/env python3

import logging
import sys

from PyQt5.QtWidgets import QApplication

from .logging_setup import setup_logging
from .widgets import JoystickOverlay

logger = logging.getLogger(__name__)


def _log_move(side: str):
    def on_move(x: float, y: float, angle: float, in_center: bool) -> None:
        logger.debug("%s stick x=%+.2f y=%+.2f angle=%.0f center=%s", side, x, y, angle, in_center)
    return on_move


def _log_release(side: str):
    def on_release(angle: float) -> None:
        logger.info("%s stick released at %.0f degrees", side, angle)
    return on_release


def main():
    """Open a demo window with a traversal stick on the left and a static one on the right."""
    setup_logging(console_level="INFO")
    app = QApplication(sys.argv)

    overlay = JoystickOverlay()
    overlay.setWindowTitle("Touch Joystick")
    overlay.resize(960, 540)
    overlay.add_controller({
        "type": "traversal",
        "zone": "left",
        "size": 140,
        "position": {"x": 160, "y": 400},
        "callback": {"on_move": _log_move("left"), "on_release": _log_release("left")},
    })
    overlay.add_controller({
        "type": "static",
        "zone": "right",
        "size": 140,
        "position": {"x": 800, "y": 400},
        "callback": {"on_move": _log_move("right"), "on_release": _log_release("right")},
    })
    overlay.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
