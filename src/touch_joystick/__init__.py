"""Virtual on-screen joysticks for touch input."""

from .binding import InterfaceElement, VisualBinding, VisualElement
from .config import (
    AxisLock,
    ControllerCallbacks,
    ControllerOptions,
    ControllerType,
    Position,
    Zone,
    sanitize_options,
)
from .controller import Controller, build_controller
from .dispatcher import TouchDispatcher
from .tween import Tween
from .zones import ZoneConflictError, ZoneRegistry

__version__ = '0.1.0'

__all__ = [
    'AxisLock',
    'Controller',
    'ControllerCallbacks',
    'ControllerOptions',
    'ControllerType',
    'InterfaceElement',
    'Position',
    'TouchDispatcher',
    'Tween',
    'VisualBinding',
    'VisualElement',
    'Zone',
    'ZoneConflictError',
    'ZoneRegistry',
    'build_controller',
    'sanitize_options',
]
