"""On-screen joystick controller.

Controller types:

* stationary: fixed at its spawn position; the stick moves inside the ring
  and clamps at its edge.
* static: spawns under the finger on touch-down and stays there until the
  next touch; the stick clamps at the ring's edge.
* traversal: spawns under the finger; when dragged the stick follows the
  finger and pulls the ring along behind it. Never axis-locked.

Static and traversal controllers need a zone (left | right) as soon as a
second one exists; at most two of them may exist and their zones must
oppose each other.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from . import geometry
from .binding import TOPMOST_LAYER, InterfaceElement, VisualBinding, VisualElement
from .config import AxisLock, ControllerOptions, ControllerType, Zone, sanitize_options
from .geometry import Point
from .motion import compute_motion
from .tween import Tween, ease_in_out_quad
from .zones import ZoneConflictError, ZoneRegistry

logger = logging.getLogger(__name__)


class Controller:
    """One joystick widget: a ring and a stick driven by a single finger.

    The host dispatcher calls :meth:`update` for every touch sample and
    :meth:`release` when the finger lifts. Construction raises
    :class:`~touch_joystick.zones.ZoneConflictError` when the requested zone
    cannot be reserved; use :func:`build_controller` to get ``None`` instead.
    """

    TOPMOST_LAYER = TOPMOST_LAYER
    # Fraction of the ring diameter treated as "centred".
    CENTER_THRESHOLD = 0.1

    def __init__(
        self,
        options=None,
        *,
        registry: ZoneRegistry,
        dispatcher=None,
        joyring: Optional[VisualElement] = None,
        joystick: Optional[VisualElement] = None,
        tween=None,
    ) -> None:
        self.options: ControllerOptions = sanitize_options(options)
        self._registry = registry
        self._zone: Optional[Zone] = None

        if self.options.type is not ControllerType.STATIONARY:
            registry.claim_or_raise(self.options.zone, self)
            if registry.owner(self.options.zone) is self:
                self._zone = self.options.zone

        self._binding = VisualBinding(
            joyring if joyring is not None else InterfaceElement("joyring"),
            joystick if joystick is not None else InterfaceElement("joystick"),
            self.options,
        )
        self.tween = tween if tween is not None else Tween()

        callbacks = self.options.callback
        self.on_touch_begin = callbacks.on_touch_begin
        self.on_release = callbacks.on_release
        self.on_move = callbacks.on_move

        self._axis_lock = AxisLock.NONE
        self.lock(self.options.locked_dimension)

        self._anchor = self._binding.spawn
        self._angle = 0.0
        self._active = False
        self._assigned_input = None
        self._torn_down = False

        self._dispatcher = dispatcher
        if dispatcher is not None:
            dispatcher.track(self)

        logger.debug("Built %s controller at %s (zone=%s)", self.options.type.value,
                     self._binding.spawn, self._zone.value if self._zone else "full screen")
        self.show()

    # ---- queries ----
    def get_type(self) -> ControllerType:
        return self.options.type

    def get_components(self) -> Dict[str, VisualElement]:
        return {"joystick": self._binding.joystick, "joyring": self._binding.joyring}

    @property
    def radius(self) -> float:
        return self.options.radius

    @property
    def zone(self) -> Optional[Zone]:
        return self._zone

    @property
    def axis_lock(self) -> AxisLock:
        return self._axis_lock

    @property
    def anchor_position(self) -> Point:
        return self._anchor

    @property
    def spawn_position(self) -> Point:
        return self._binding.spawn

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def assigned_input(self):
        return self._assigned_input

    @property
    def visible(self) -> bool:
        return self._binding.visible

    # ---- input ----
    def assign_input(self, input_id) -> None:
        """Bind the finger that will drive this controller until release."""
        self._assigned_input = input_id

    def update(self, x: float, y: float, touch_start: bool = False) -> None:
        """Feed one touch sample in screen coordinates."""
        if self._torn_down or self._axis_lock is AxisLock.BOTH:
            return
        if touch_start:
            self._handle_transition(fade=False)
            self._binding.raise_to_top()
            self._active = True
            if self.on_touch_begin is not None:
                self.on_touch_begin()
        if not self._active:
            return

        result = compute_motion(self.options.type, Point(x, y), touch_start,
                                self._axis_lock, self._anchor, self.radius)
        self._anchor = result.anchor
        self._binding.place(result.ring, result.stick)
        if result.snapped:
            self._angle = 0.0
            return

        self._angle = result.angle
        in_center = abs(result.clamped_distance) < self.options.size * self.CENTER_THRESHOLD
        r = self.radius
        ax, ay = result.anchor
        normalized_x = geometry.normalize(result.touch.x, ax - r, ax + r)
        # Screen y grows downward; analog y grows upward.
        normalized_y = -geometry.normalize(result.touch.y, ay - r, ay + r)

        if self.on_move is not None:
            self.on_move(normalized_x, normalized_y, self._angle, in_center)

    def release(self, force: bool = False) -> None:
        """Return to the idle state.

        A soft release (finger lifted) keeps the configuration. A forced
        release also unbinds callbacks, frees the zone and detaches from the
        dispatcher, which is how a controller is torn down.
        """
        if self._axis_lock is AxisLock.BOTH and not force:
            return
        self._reset(soft=not force)
        self._binding.reset_positions()
        self._handle_transition(fade=True)

    def destroy(self) -> None:
        self.release(force=True)
        logger.debug("Destroyed %s controller", self.options.type.value)

    # ---- axis lock ----
    def lock(self, dimension) -> None:
        """Lock ``horizontal``, ``vertical`` or anything else (both)."""
        value = _dimension_name(dimension)
        if value is None:
            return
        if self.options.type is ControllerType.TRAVERSAL:
            if value != AxisLock.NONE.value:
                logger.warning("A traversal controller cannot be locked.")
            return
        if value == AxisLock.HORIZONTAL.value:
            self._axis_lock = AxisLock.HORIZONTAL
        elif value == AxisLock.VERTICAL.value:
            self._axis_lock = AxisLock.VERTICAL
        elif value == AxisLock.NONE.value:
            self._axis_lock = AxisLock.NONE
        else:
            self._axis_lock = AxisLock.BOTH

    def unlock(self, dimension) -> None:
        """Unlock one axis; unlocking one axis of ``both`` keeps the other."""
        value = _dimension_name(dimension)
        if value is None:
            return
        if value == AxisLock.HORIZONTAL.value and self._axis_lock is AxisLock.BOTH:
            self._axis_lock = AxisLock.VERTICAL
        elif value == AxisLock.VERTICAL.value and self._axis_lock is AxisLock.BOTH:
            self._axis_lock = AxisLock.HORIZONTAL
        else:
            self._axis_lock = AxisLock.NONE

    # ---- visibility ----
    def show(self) -> None:
        self._binding.reset_positions()
        self._binding.show()
        self._handle_transition(fade=True)

    def hide(self) -> None:
        self._binding.hide()
        self._reset(soft=True)
        self.tween.stop()
        self._binding.set_alpha(self.options.inactive_alpha)

    # ---- internals ----
    def _handle_transition(self, fade: bool) -> None:
        """Tween both elements to the inactive alpha (``fade``) or to opaque."""
        self.tween.stop()
        start = self._binding.alpha
        end = self.options.inactive_alpha if fade else 1.0
        if start == end:
            return
        self.tween.build(start, end, self.options.transition_time, ease_in_out_quad).animate(self._binding.set_alpha)

    def _reset(self, soft: bool) -> None:
        angle = self._angle
        self._angle = 0.0
        self._anchor = self._binding.spawn
        self._binding.restore_layers()
        self._assigned_input = None

        if self._active:
            self._active = False
            if self.on_release is not None:
                self.on_release(angle)

        if not soft:
            self.on_release = None
            self.on_move = None
            self.on_touch_begin = None
            self._registry.release_owner(self)
            self._zone = None
            self._axis_lock = AxisLock.NONE
            if self._dispatcher is not None:
                self._dispatcher.untrack(self)
                self._dispatcher = None
            self._torn_down = True

    def __repr__(self) -> str:
        return (f"Controller(type={self.options.type.value}, zone={self._zone}, "
                f"lock={self._axis_lock.value}, active={self._active})")


def _dimension_name(dimension) -> Optional[str]:
    if isinstance(dimension, AxisLock):
        return dimension.value
    if isinstance(dimension, str):
        return dimension.strip().lower()
    return None


def build_controller(options=None, *, registry: ZoneRegistry, **kwargs) -> Optional[Controller]:
    """Create a controller, or log an error and return None on a zone conflict."""
    try:
        return Controller(options, registry=registry, **kwargs)
    except ZoneConflictError as exc:
        logger.error("%s", exc)
        return None
