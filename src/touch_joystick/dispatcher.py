"""Routes raw touch points to the controllers on a screen."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from . import geometry
from .config import ControllerType, Zone
from .controller import Controller, build_controller
from .geometry import Point
from .zones import ZoneRegistry

logger = logging.getLogger(__name__)


class TouchDispatcher:
    """Assigns each finger to at most one controller and forwards its samples.

    Responsibilities:
      - Keep the list of tracked controllers
      - Pick a controller for a new finger (ring hit, then zone, then full screen)
      - Forward moves and lifts of that finger to its controller
    """

    def __init__(self, registry: Optional[ZoneRegistry] = None,
                 width: float = 0.0, height: float = 0.0) -> None:
        self.registry = registry if registry is not None else ZoneRegistry()
        self._width = float(width)
        self._height = float(height)
        self._controllers: List[Controller] = []
        self._fingers: Dict[object, Controller] = {}

    # ---- screen / tracking ----
    def set_screen_size(self, width: float, height: float) -> None:
        self._width = float(width)
        self._height = float(height)

    def screen_size(self):
        return (self._width, self._height)

    def track(self, controller: Controller) -> None:
        if controller not in self._controllers:
            self._controllers.append(controller)

    def untrack(self, controller: Controller) -> None:
        if controller in self._controllers:
            self._controllers.remove(controller)
        for finger in [f for f, c in self._fingers.items() if c is controller]:
            del self._fingers[finger]

    @property
    def controllers(self) -> List[Controller]:
        return list(self._controllers)

    def add_controller(self, options=None, **kwargs) -> Optional[Controller]:
        """Build a controller bound to this dispatcher's registry."""
        return build_controller(options, registry=self.registry, dispatcher=self, **kwargs)

    def controller_for(self, finger) -> Optional[Controller]:
        return self._fingers.get(finger)

    # ---- touch events ----
    def touch_begin(self, finger, x: float, y: float) -> Optional[Controller]:
        if finger in self._fingers:
            self.touch_end(finger)
        controller = self._pick(Point(x, y))
        if controller is None:
            return None
        self._fingers[finger] = controller
        controller.assign_input(finger)
        logger.debug("Finger %s assigned to %r", finger, controller)
        controller.update(x, y, True)
        return controller

    def touch_move(self, finger, x: float, y: float) -> None:
        controller = self._held(finger)
        if controller is not None:
            controller.update(x, y, False)

    def touch_end(self, finger, x: Optional[float] = None, y: Optional[float] = None) -> None:
        controller = self._held(finger)
        self._fingers.pop(finger, None)
        if controller is not None:
            controller.release()

    def release_all(self) -> None:
        for finger in list(self._fingers):
            self.touch_end(finger)

    # ---- internals ----
    def _held(self, finger) -> Optional[Controller]:
        controller = self._fingers.get(finger)
        if controller is None:
            return None
        if controller.assigned_input != finger:
            # Controller was reset behind our back (hidden, destroyed).
            del self._fingers[finger]
            return None
        return controller

    def _free(self) -> List[Controller]:
        busy = set(id(c) for c in self._fingers.values())
        return [c for c in self._controllers if c.visible and id(c) not in busy]

    def zone_at(self, x: float) -> Zone:
        return Zone.LEFT if x < self._width / 2 else Zone.RIGHT

    def _pick(self, point: Point) -> Optional[Controller]:
        free = self._free()

        for controller in free:
            if controller.get_type() is ControllerType.STATIONARY:
                if geometry.distance(controller.spawn_position, point) <= controller.radius:
                    return controller

        zoned = [c for c in free if c.zone is not None]
        if zoned:
            zone = self.zone_at(point.x)
            for controller in zoned:
                if controller.zone is zone:
                    return controller

        for controller in free:
            if controller.get_type() is not ControllerType.STATIONARY and controller.zone is None:
                return controller
        return None
