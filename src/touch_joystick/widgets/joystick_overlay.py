"""Full-window host that turns Qt touch and mouse input into joystick updates."""

from __future__ import annotations

import logging
from typing import List, Optional

from PyQt5.QtCore import QEvent, Qt
from PyQt5.QtGui import QColor, QPainter, QPen
from PyQt5.QtWidgets import QWidget

from ..controller import Controller
from ..dispatcher import TouchDispatcher
from ..zones import ZoneRegistry
from .fade_animation import QtFadeTween
from .interface_element import ROLE_JOYRING, ROLE_JOYSTICK, QtInterfaceElement

logger = logging.getLogger(__name__)

# Finger id used for the primary mouse button.
MOUSE_FINGER = -1


class JoystickOverlay(QWidget):
    """Owns the controllers of one screen and feeds them touch samples."""

    def __init__(self, registry: Optional[ZoneRegistry] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._dispatcher = TouchDispatcher(registry, self.width(), self.height())
        self._elements: List[QtInterfaceElement] = []
        self._mouse_down = False

        self.setAttribute(Qt.WA_AcceptTouchEvents)
        self.setMinimumSize(320, 240)

    @property
    def dispatcher(self) -> TouchDispatcher:
        return self._dispatcher

    @property
    def controllers(self) -> List[Controller]:
        return self._dispatcher.controllers

    def add_controller(self, options=None) -> Optional[Controller]:
        """Create a controller drawn on this overlay; None on a zone conflict."""
        joyring = QtInterfaceElement(ROLE_JOYRING, self)
        joystick = QtInterfaceElement(ROLE_JOYSTICK, self)
        controller = self._dispatcher.add_controller(
            options, joyring=joyring, joystick=joystick, tween=QtFadeTween(self)
        )
        if controller is None:
            for element in (joyring, joystick):
                element.view.deleteLater()
                element.deleteLater()
            return None

        for element in (joyring, joystick):
            element.layer_changed.connect(self.restack)
            self._elements.append(element)
        self.restack()
        self.update()
        return controller

    def restack(self, *_args) -> None:
        """Raise element views in (plane, layer) order."""
        for element in sorted(self._elements, key=lambda e: (e.plane, e.layer)):
            element.view.raise_()

    # ---- Qt events ----
    def event(self, e) -> bool:
        if e.type() in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd):
            for point in e.touchPoints():
                pos = point.pos()
                state = point.state()
                if state & Qt.TouchPointPressed:
                    self._dispatcher.touch_begin(point.id(), pos.x(), pos.y())
                elif state & Qt.TouchPointReleased:
                    self._dispatcher.touch_end(point.id(), pos.x(), pos.y())
                elif state & Qt.TouchPointMoved:
                    self._dispatcher.touch_move(point.id(), pos.x(), pos.y())
            e.accept()
            return True
        if e.type() == QEvent.TouchCancel:
            self._dispatcher.release_all()
            e.accept()
            return True
        return super().event(e)

    def mousePressEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._mouse_down = True
            self._dispatcher.touch_begin(MOUSE_FINGER, e.x(), e.y())

    def mouseMoveEvent(self, e) -> None:
        if self._mouse_down:
            self._dispatcher.touch_move(MOUSE_FINGER, e.x(), e.y())

    def mouseReleaseEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._mouse_down = False
            self._dispatcher.touch_end(MOUSE_FINGER, e.x(), e.y())

    def resizeEvent(self, e) -> None:
        self._dispatcher.set_screen_size(self.width(), self.height())
        super().resizeEvent(e)

    def paintEvent(self, event) -> None:
        if len(self._dispatcher.registry.reserved_zones) < 2:
            return
        painter = QPainter(self)
        painter.setPen(QPen(QColor(120, 120, 120, 80), 1, Qt.DotLine))
        center_x = self.width() // 2
        painter.drawLine(center_x, 0, center_x, self.height())

    # ---- lifecycle ----
    def shutdown(self) -> None:
        self._dispatcher.release_all()
        for controller in self._dispatcher.controllers:
            controller.destroy()
        logger.info("Joystick overlay shut down")

    def closeEvent(self, event) -> None:  # noqa: D401 - Qt signature
        self.shutdown()
        super().closeEvent(event)
