"""Per-type motion policies.

Each policy turns a touch point into where the ring and the stick should
be drawn, plus the anchor to measure the next touch from. Policies hold no
state of their own; the controller passes the anchor back in every frame.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict

from . import geometry
from .config import AxisLock, ControllerType
from .geometry import Point


@dataclass(frozen=True)
class MotionResult:
    stick: Point          # centre of the joystick element
    ring: Point           # centre of the joyring element
    anchor: Point         # anchor for the next update
    touch: Point          # touch point after axis lock
    angle: float
    distance: float       # raw anchor-to-touch distance
    clamped_distance: float
    snapped: bool = False  # touch-start snap; no analog output


def apply_axis_lock(touch: Point, anchor: Point, lock: AxisLock) -> Point:
    """Freeze the locked coordinate of ``touch`` to the anchor's."""
    if lock is AxisLock.HORIZONTAL:
        return Point(touch[0], anchor[1])
    if lock is AxisLock.VERTICAL:
        return Point(anchor[0], touch[1])
    return Point(touch[0], touch[1])


def _clamp_to_radius(anchor: Point, touch: Point, radius: float):
    dist = geometry.distance(anchor, touch)
    deg = geometry.angle(anchor, touch)
    clamped = min(dist, radius)
    return dist, deg, clamped, geometry.point_from_distance_and_angle(anchor, clamped, deg)


def _snap(touch: Point) -> MotionResult:
    return MotionResult(
        stick=touch, ring=touch, anchor=touch, touch=touch,
        angle=0.0, distance=0.0, clamped_distance=0.0, snapped=True,
    )


class MotionPolicy(ABC):
    """Contract shared by the three controller types."""

    @abstractmethod
    def compute(self, touch: Point, touch_start: bool, lock: AxisLock,
                anchor: Point, radius: float) -> MotionResult:
        """Place ring and stick for one touch sample."""


class StationaryMotion(MotionPolicy):
    """Ring fixed at the spawn point; the stick is clamped inside it."""

    def compute(self, touch, touch_start, lock, anchor, radius):
        touch = apply_axis_lock(touch, anchor, lock)
        dist, deg, clamped, stick = _clamp_to_radius(anchor, touch, radius)
        return MotionResult(stick, Point(*anchor), Point(*anchor), touch, deg, dist, clamped)


class StaticMotion(MotionPolicy):
    """Ring spawns under the finger and stays there until the next touch."""

    def compute(self, touch, touch_start, lock, anchor, radius):
        touch = Point(*touch)
        if touch_start:
            return _snap(touch)
        touch = apply_axis_lock(touch, anchor, lock)
        dist, deg, clamped, stick = _clamp_to_radius(anchor, touch, radius)
        return MotionResult(stick, Point(*anchor), Point(*anchor), touch, deg, dist, clamped)


class TraversalMotion(MotionPolicy):
    """Stick follows the finger and drags the ring behind it on a leash.

    Axis locks are ignored; a traversal controller is never locked.
    """

    def compute(self, touch, touch_start, lock, anchor, radius):
        touch = Point(*touch)
        if touch_start:
            return _snap(touch)
        dist = geometry.distance(anchor, touch)
        deg = geometry.angle(anchor, touch)
        clamped = min(dist, radius)
        # The ring trails the stick, pointing back at the old anchor.
        ring = geometry.point_from_distance_and_angle(touch, clamped, geometry.angle(touch, anchor))
        new_anchor = ring if dist > clamped else Point(*anchor)
        return MotionResult(touch, ring, new_anchor, touch, deg, dist, clamped)


MOTION_POLICIES: Dict[ControllerType, MotionPolicy] = {
    ControllerType.STATIONARY: StationaryMotion(),
    ControllerType.STATIC: StaticMotion(),
    ControllerType.TRAVERSAL: TraversalMotion(),
}


def compute_motion(controller_type: ControllerType, touch: Point, touch_start: bool,
                   lock: AxisLock, anchor: Point, radius: float) -> MotionResult:
    """Dispatch to the policy of ``controller_type``."""
    return MOTION_POLICIES[controller_type].compute(touch, touch_start, lock, anchor, radius)
