"""Visual elements owned by a controller and the adapter that moves them."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .config import ControllerOptions
from .geometry import Point

TOPMOST_LAYER = 1999998


@runtime_checkable
class VisualElement(Protocol):
    """What the controller needs from a drawable element.

    ``x``/``y`` are the element's centre.
    """

    x: float
    y: float
    width: float
    height: float
    alpha: float
    layer: float
    plane: float
    atlas_name: str
    icon_name: str

    @property
    def visible(self) -> bool: ...

    def set_pos(self, x: float, y: float) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...


class InterfaceElement:
    """Headless element: plain attributes, no drawing."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.x = 0.0
        self.y = 0.0
        self.width = 0.0
        self.height = 0.0
        self.alpha = 1.0
        self.layer = 0
        self.plane = 0
        self.atlas_name = ""
        self.icon_name = ""
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def set_pos(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def show(self) -> None:
        self._visible = True

    def hide(self) -> None:
        self._visible = False

    def __repr__(self) -> str:
        return f"InterfaceElement({self.name!r}, x={self.x}, y={self.y}, alpha={self.alpha})"


class VisualBinding:
    """Applies controller geometry to the joyring and joystick elements."""

    def __init__(self, joyring: VisualElement, joystick: VisualElement, options: ControllerOptions) -> None:
        self.joyring = joyring
        self.joystick = joystick
        self._layer = options.layer
        self.spawn = Point(float(options.position.x), float(options.position.y))

        joyring.atlas_name = options.atlas_name
        joyring.icon_name = options.joyring_icon_name
        joyring.width = joyring.height = options.size
        joyring.plane = options.plane

        joystick.atlas_name = options.atlas_name
        joystick.icon_name = options.joystick_icon_name
        joystick.width = joystick.height = options.size / 2
        joystick.plane = options.plane

        self.restore_layers()

    def place(self, ring: Point, stick: Point) -> None:
        self.joyring.set_pos(ring[0], ring[1])
        self.joystick.set_pos(stick[0], stick[1])

    def reset_positions(self) -> None:
        self.place(self.spawn, self.spawn)

    @property
    def alpha(self) -> float:
        return self.joyring.alpha

    def set_alpha(self, alpha: float) -> None:
        self.joyring.alpha = alpha
        self.joystick.alpha = alpha

    def raise_to_top(self) -> None:
        self.joyring.layer = TOPMOST_LAYER
        self.joystick.layer = TOPMOST_LAYER + 1

    def restore_layers(self) -> None:
        # The stick always sits one layer above its ring.
        self.joyring.layer = self._layer
        self.joystick.layer = self._layer + 1

    @property
    def visible(self) -> bool:
        return self.joyring.visible

    def show(self) -> None:
        self.joyring.show()
        self.joystick.show()

    def hide(self) -> None:
        self.joyring.hide()
        self.joystick.hide()
