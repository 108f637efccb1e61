"""Configuration values for a touch joystick controller."""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Mapping, Optional

logger = logging.getLogger(__name__)


class ControllerType(str, Enum):
    """How the controller reacts to a touch."""
    STATIONARY = "stationary"
    STATIC = "static"
    TRAVERSAL = "traversal"


class AxisLock(str, Enum):
    """Which displacement axes are frozen to the anchor."""
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "both"


class Zone(str, Enum):
    """Half of the screen reserved by a zoned controller."""
    LEFT = "left"
    RIGHT = "right"


DEFAULT_SIZE = 100
DEFAULT_POSITION_X = 100
DEFAULT_POSITION_Y = 100
DEFAULT_INACTIVE_ALPHA = 0.5
DEFAULT_TRANSITION_TIME = 500
DEFAULT_SCALE = 1
DEFAULT_PLANE = 1
DEFAULT_LAYER = 1


@dataclass(frozen=True)
class Position:
    x: int = DEFAULT_POSITION_X
    y: int = DEFAULT_POSITION_Y


@dataclass(frozen=True)
class ControllerCallbacks:
    """Handlers invoked synchronously by the controller."""
    on_touch_begin: Optional[Callable[[], Any]] = None
    on_release: Optional[Callable[[float], Any]] = None
    on_move: Optional[Callable[[float, float, float, bool], Any]] = None


@dataclass(frozen=True)
class ControllerOptions:
    """Validated, read-only controller configuration."""

    type: ControllerType = ControllerType.STATIONARY
    size: int = DEFAULT_SIZE                     # ring diameter in pixels
    position: Position = field(default_factory=Position)
    locked_dimension: AxisLock = AxisLock.NONE
    zone: Optional[Zone] = None
    inactive_alpha: float = DEFAULT_INACTIVE_ALPHA
    transition_time: float = DEFAULT_TRANSITION_TIME  # ms
    scale: int = DEFAULT_SCALE                   # reserved
    plane: float = DEFAULT_PLANE
    layer: float = DEFAULT_LAYER
    atlas_name: str = ""
    joystick_icon_name: str = ""
    joyring_icon_name: str = ""
    callback: ControllerCallbacks = field(default_factory=ControllerCallbacks)

    @property
    def radius(self) -> float:
        return self.size / 2

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]] = None) -> "ControllerOptions":
        """Build options from a plain dict, replacing bad values with defaults."""
        return sanitize_options(raw)


def _is_int(value) -> bool:
    # 250.0 counts; JSON and Qt hand back whole numbers as floats.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return float(value).is_integer()


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _enum_value(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            return None
    return None


def _sanitize_position(value) -> Position:
    if isinstance(value, Position):
        x, y = value.x, value.y
    elif isinstance(value, Mapping):
        x, y = value.get("x"), value.get("y")
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        x, y = value
    else:
        logger.warning("position was not a point. Default position has been used.")
        return Position()

    if not _is_int(x):
        logger.warning("position.x was not an integer. Default position.x value has been used.")
        x = DEFAULT_POSITION_X
    if not _is_int(y):
        logger.warning("position.y was not an integer. Default position.y value has been used.")
        y = DEFAULT_POSITION_Y
    return Position(int(x), int(y))


def _sanitize_callbacks(value) -> ControllerCallbacks:
    if isinstance(value, ControllerCallbacks):
        return value
    if value is None:
        return ControllerCallbacks()
    if not isinstance(value, Mapping):
        logger.warning("callback was not a mapping. No callbacks have been bound.")
        return ControllerCallbacks()

    handlers = {}
    for name in ("on_touch_begin", "on_release", "on_move"):
        handler = value.get(name)
        if handler is not None and not callable(handler):
            logger.warning("callback.%s is not callable. It has been ignored.", name)
            handler = None
        handlers[name] = handler
    return ControllerCallbacks(**handlers)


def sanitize_options(raw=None) -> ControllerOptions:
    """Validate ``raw`` field by field.

    ``raw`` may be a mapping or an existing :class:`ControllerOptions`.
    Every malformed field falls back to its default and a warning is logged;
    this never raises.
    """
    if raw is None:
        raw = {}
    elif isinstance(raw, ControllerOptions):
        raw = {f.name: getattr(raw, f.name) for f in fields(raw)}
    elif not isinstance(raw, Mapping):
        logger.warning("options was not a mapping. Default options have been used.")
        raw = {}

    known = {f.name for f in fields(ControllerOptions)}
    for key in raw:
        if key not in known:
            logger.warning("Unknown option %r has been ignored.", key)

    size = raw.get("size", DEFAULT_SIZE)
    if not _is_int(size) or size <= 0:
        logger.warning("size was not a positive integer. Default value of %d has been used.", DEFAULT_SIZE)
        size = DEFAULT_SIZE

    controller_type = _enum_value(ControllerType, raw.get("type", ControllerType.STATIONARY))
    if controller_type is None:
        logger.warning("type was not a valid controller type. Default value of stationary has been used.")
        controller_type = ControllerType.STATIONARY

    zone = None
    raw_zone = raw.get("zone")
    if raw_zone is not None:
        zone = _enum_value(Zone, raw_zone)
        if zone is None:
            logger.warning("zone must be left or right. No zone has been set.")

    locked = AxisLock.NONE
    raw_locked = raw.get("locked_dimension")
    if raw_locked is not None:
        locked = _enum_value(AxisLock, raw_locked)
        if locked is None:
            logger.warning("Invalid value for locked_dimension has been passed. No value has been set.")
            locked = AxisLock.NONE
    if controller_type is ControllerType.TRAVERSAL and locked is not AxisLock.NONE:
        logger.warning("type is traversal. A traversal controller cannot be locked.")
        locked = AxisLock.NONE

    names = {}
    for name in ("atlas_name", "joystick_icon_name", "joyring_icon_name"):
        value = raw.get(name, "")
        if not isinstance(value, str):
            logger.warning("%s was not a string. No value has been used.", name)
            value = ""
        names[name] = value

    transition_time = raw.get("transition_time", DEFAULT_TRANSITION_TIME)
    if not _is_number(transition_time):
        transition_time = DEFAULT_TRANSITION_TIME
    transition_time = max(0.0, float(transition_time))

    inactive_alpha = raw.get("inactive_alpha", DEFAULT_INACTIVE_ALPHA)
    if not _is_number(inactive_alpha):
        inactive_alpha = DEFAULT_INACTIVE_ALPHA
    inactive_alpha = max(0.0, min(1.0, float(inactive_alpha)))

    scale = raw.get("scale", DEFAULT_SCALE)
    if not _is_int(scale):
        logger.warning("scale was not an integer. Default scale of %d has been used.", DEFAULT_SCALE)
        scale = DEFAULT_SCALE

    plane = raw.get("plane", DEFAULT_PLANE)
    if not _is_number(plane):
        plane = DEFAULT_PLANE

    layer = raw.get("layer", DEFAULT_LAYER)
    if not _is_number(layer):
        layer = DEFAULT_LAYER

    return ControllerOptions(
        type=controller_type,
        size=int(size),
        position=_sanitize_position(raw.get("position", Position())),
        locked_dimension=locked,
        zone=zone,
        inactive_alpha=inactive_alpha,
        transition_time=transition_time,
        scale=int(scale),
        plane=plane,
        layer=layer,
        callback=_sanitize_callbacks(raw.get("callback")),
        **names,
    )
