from __future__ import annotations

from typing import Optional

from PyQt5.QtCore import QObject, QPoint, QRect, Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QPixmap, QRadialGradient
from PyQt5.QtWidgets import QGraphicsOpacityEffect, QWidget

ROLE_JOYRING = "joyring"
ROLE_JOYSTICK = "joystick"


class _ElementView(QWidget):
    """Paints one joystick part inside its square bounds."""

    def __init__(self, role: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._role = role
        self._pixmap: Optional[QPixmap] = None
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WA_TranslucentBackground)

    def set_icon(self, icon_name: str) -> None:
        pixmap = QPixmap(icon_name) if icon_name else None
        self._pixmap = pixmap if pixmap is not None and not pixmap.isNull() else None
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        size = min(self.width(), self.height())
        if self._pixmap is not None:
            painter.drawPixmap(QRect(0, 0, size, size), self._pixmap)
        elif self._role == ROLE_JOYRING:
            self._draw_ring(painter, size)
        else:
            self._draw_stick(painter, size)

    def _draw_ring(self, painter: QPainter, size: int) -> None:
        painter.save()
        center = size // 2
        radius = max(1, center - 2)

        gradient = QRadialGradient(center, center, radius)
        gradient.setColorAt(0.0, QColor(60, 60, 60, 160))
        gradient.setColorAt(0.7, QColor(45, 45, 45, 160))
        gradient.setColorAt(1.0, QColor(30, 30, 30, 200))
        painter.setBrush(QBrush(gradient))
        painter.setPen(QPen(QColor(80, 80, 80), 2))
        painter.drawEllipse(QPoint(center, center), radius, radius)

        highlight_radius = radius - 5
        if highlight_radius > 0:
            painter.setPen(QPen(QColor(100, 100, 100, 100), 1))
            painter.setBrush(Qt.NoBrush)
            painter.drawEllipse(QPoint(center, center), highlight_radius, highlight_radius)
        painter.restore()

    def _draw_stick(self, painter: QPainter, size: int) -> None:
        painter.save()
        center = size // 2
        radius = max(1, center - 1)
        base_color = QColor(80, 160, 255)

        handle_gradient = QRadialGradient(center - 3, center - 3, radius)
        handle_gradient.setColorAt(0.0, base_color.lighter(150))
        handle_gradient.setColorAt(0.5, base_color)
        handle_gradient.setColorAt(1.0, base_color.darker(120))
        painter.setBrush(QBrush(handle_gradient))
        painter.setPen(QPen(base_color.darker(150), 1))
        painter.drawEllipse(QPoint(center, center), radius, radius)

        highlight_radius = radius - 3
        if highlight_radius > 0:
            painter.setBrush(QBrush(QColor(255, 255, 255, 80)))
            painter.setPen(Qt.NoPen)
            painter.drawEllipse(QPoint(center - 2, center - 2), highlight_radius // 2, highlight_radius // 2)
        painter.restore()


class QtInterfaceElement(QObject):
    """Qt-backed visual element positioned by its centre."""

    layer_changed = pyqtSignal(float)

    def __init__(self, role: str = ROLE_JOYRING, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.role = role
        self.view = _ElementView(role, parent)
        self._opacity = QGraphicsOpacityEffect(self.view)
        self._opacity.setOpacity(1.0)
        self.view.setGraphicsEffect(self._opacity)
        self.view.hide()

        self._x = 0.0
        self._y = 0.0
        self._width = 0.0
        self._height = 0.0
        self._layer = 0.0
        self.plane = 0
        self.atlas_name = ""
        self._icon_name = ""

    # ---- geometry ----
    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def set_pos(self, x: float, y: float) -> None:
        self._x = x
        self._y = y
        self._sync_geometry()

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value
        self._sync_geometry()

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = value
        self._sync_geometry()

    def _sync_geometry(self) -> None:
        w = int(round(self._width))
        h = int(round(self._height))
        self.view.setGeometry(int(round(self._x - w / 2)), int(round(self._y - h / 2)), w, h)

    # ---- appearance ----
    @property
    def alpha(self) -> float:
        return self._opacity.opacity()

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._opacity.setOpacity(value)

    @property
    def layer(self) -> float:
        return self._layer

    @layer.setter
    def layer(self, value: float) -> None:
        if value != self._layer:
            self._layer = value
            self.layer_changed.emit(float(value))

    @property
    def icon_name(self) -> str:
        return self._icon_name

    @icon_name.setter
    def icon_name(self, value: str) -> None:
        self._icon_name = value
        self.view.set_icon(value)

    # ---- visibility ----
    @property
    def visible(self) -> bool:
        return not self.view.isHidden()

    def show(self) -> None:
        self.view.show()

    def hide(self) -> None:
        self.view.hide()
