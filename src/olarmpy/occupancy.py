"""Infer zone occupancy from zone and device timestamps."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import Area

_LOGGER = logging.getLogger(__name__)


def is_occupied(zone_number: int, area: Area, delay_ms: int) -> bool:
    """Return True if the zone changed within ``delay_ms`` of the device's last update.

    This is a heuristic for "the sensor fired recently", not a direct
    occupancy signal.

    Raises:
        OlarmConfigurationError: If the zone does not exist in the area.
    """
    difference = area.device_timestamp - area.zone_stamp(zone_number)
    _LOGGER.debug(
        "Zone occupancy check for zone %d: zone stamp %d, device stamp %d",
        zone_number,
        area.zone_stamp(zone_number),
        area.device_timestamp,
    )
    return difference < delay_ms


class ZoneOccupancy:
    """Occupancy of a fixed set of configured zones."""

    def __init__(self, zones: Iterable[int], delay_ms: int) -> None:
        self.zones = tuple(zones)
        self.delay_ms = delay_ms

    def validate(self, area: Area) -> None:
        """Fail fast if a configured zone is missing from the area."""
        for zone in self.zones:
            area.zone_stamp(zone)

    def evaluate(self, area: Area) -> dict[int, bool]:
        """Return ``{zone: occupied}`` for every configured zone."""
        result = {zone: is_occupied(zone, area, self.delay_ms) for zone in self.zones}
        for zone, occupied in result.items():
            _LOGGER.info(
                "Zone %d %s",
                zone,
                "occupancy detected" if occupied else "occupancy not detected",
            )
        return result
