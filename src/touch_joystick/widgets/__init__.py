"""Qt host binding for touch joystick controllers."""

from .fade_animation import QtFadeTween
from .interface_element import QtInterfaceElement
from .joystick_overlay import MOUSE_FINGER, JoystickOverlay

__all__ = ['JoystickOverlay', 'MOUSE_FINGER', 'QtFadeTween', 'QtInterfaceElement']
