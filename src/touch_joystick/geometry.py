"""Plane geometry helpers shared by every motion policy.

Coordinates are screen pixels (y grows downward). Angles are degrees in the
stick convention: 0 points right, 90 points up, and values lie in [0, 360).
"""

from __future__ import annotations

import math
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


def clamp_unit(v: float) -> float:
    """Clamp to [-1, 1]."""
    return max(-1.0, min(1.0, v))


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def angle(a: Point, b: Point) -> float:
    """Angle in degrees from ``a`` towards ``b``, with up as 90."""
    if a[0] == b[0] and a[1] == b[1]:
        return 0.0
    # Screen y is inverted so a stick pushed forward reads as 90.
    degrees = math.degrees(math.atan2(a[1] - b[1], b[0] - a[0]))
    return degrees % 360.0


def point_from_distance_and_angle(origin: Point, dist: float, degrees: float) -> Point:
    """Inverse of :func:`distance`/:func:`angle` measured from ``origin``."""
    rad = math.radians(degrees)
    return Point(origin[0] + dist * math.cos(rad), origin[1] - dist * math.sin(rad))


def normalize(value: float, low: float, high: float) -> float:
    """Map ``value`` from the window ``[low, high]`` onto [-1, 1].

    Values outside the window saturate. A zero-width window maps to 0.
    """
    span = high - low
    if span == 0:
        return 0.0
    return clamp_unit(2.0 * (value - low) / span - 1.0)
