"""Screen-half reservations for static and traversal controllers.

Static and traversal controllers spawn wherever the screen is touched, so
two of them can only coexist when each owns one half of the screen. A
lone controller may skip the zone and use the whole screen.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .config import Zone

logger = logging.getLogger(__name__)

ZONE_RULE = (
    "A static or traversal controller requires a zone once another one holds a zone. "
    "At most two such controllers may exist and they must use opposing zones: left | right. "
    "A controller without a zone takes the full screen and excludes every other one."
)


class ZoneConflictError(ValueError):
    """Raised when a controller cannot get the zone it asked for."""


class ZoneRegistry:
    """Tracks which controller owns which screen half.

    One registry is shared by every controller of a host screen; it is
    passed in explicitly so separate screens (or tests) stay isolated.
    """

    def __init__(self) -> None:
        self._owners: Dict[Zone, object] = {}
        # A lone unzoned controller owns the whole screen.
        self._full_screen = None

    def claim(self, zone: Optional[Zone], controller) -> bool:
        """Reserve ``zone`` for ``controller``.

        ``zone=None`` asks for the full screen, which is only possible when
        nothing else is held. Any claim fails while the full screen is held,
        and a zone fails when it is already taken.
        """
        if self._full_screen is not None:
            return False
        if zone is None:
            if self._owners:
                return False
            self._full_screen = controller
            logger.debug("Full screen reserved")
            return True
        if zone in self._owners:
            return False
        self._owners[zone] = controller
        logger.debug("Zone %s reserved", zone.value)
        return True

    def claim_or_raise(self, zone: Optional[Zone], controller) -> None:
        if not self.claim(zone, controller):
            raise ZoneConflictError(ZONE_RULE)

    def release(self, zone: Optional[Zone]) -> None:
        if zone is not None and self._owners.pop(zone, None) is not None:
            logger.debug("Zone %s released", zone.value)

    def release_owner(self, controller) -> None:
        """Drop every claim held by ``controller``, full screen included."""
        if self._full_screen is controller:
            self._full_screen = None
            logger.debug("Full screen released")
        for zone in [z for z, c in self._owners.items() if c is controller]:
            self.release(zone)

    def is_reserved(self, zone: Zone) -> bool:
        return zone in self._owners

    def owner(self, zone: Zone):
        return self._owners.get(zone)

    @property
    def full_screen_owner(self):
        return self._full_screen

    @property
    def reserved_zones(self) -> frozenset:
        return frozenset(self._owners)
