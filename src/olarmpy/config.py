"""Per-area configuration for olarmpy."""

from __future__ import annotations

import dataclasses
from typing import Any

from .const import (
    DEFAULT_GARAGE_DOOR_DELAY,
    DEFAULT_OCCUPANCY_DELAY,
    DEFAULT_POLLING_INTERVAL,
)
from .exceptions import OlarmConfigurationError


@dataclasses.dataclass(frozen=True)
class OlarmAreaConfig:
    """Configuration of one monitored area.

    Parameters
    ----------
    area_name : str
        Area label as shown in the Olarm app.
    polling_interval_ms : int
        Interval between periodic refreshes.
    occupancy_delay_ms : int
        A zone counts as occupied while its last change is less than this
        far behind the device's last update.
    occupancy_zones : tuple[int, ...]
        1-based zone numbers exposed as occupancy sensors.
    garage_door_zone : int or None
        1-based zone number of the garage door contact.
    garage_door_pgm : int or None
        1-based PGM number wired to the garage door relay. The garage door
        is only enabled when both this and ``garage_door_zone`` are set.
    garage_door_delay_ms : int
        Time a full open or close takes.
    """

    area_name: str
    polling_interval_ms: int = DEFAULT_POLLING_INTERVAL
    occupancy_delay_ms: int = DEFAULT_OCCUPANCY_DELAY
    occupancy_zones: tuple[int, ...] = ()
    garage_door_zone: int | None = None
    garage_door_pgm: int | None = None
    garage_door_delay_ms: int = DEFAULT_GARAGE_DOOR_DELAY

    def __post_init__(self) -> None:
        if not self.area_name:
            raise OlarmConfigurationError("area_name is required")
        for name in ("polling_interval_ms", "occupancy_delay_ms", "garage_door_delay_ms"):
            if getattr(self, name) <= 0:
                raise OlarmConfigurationError(f"{name} must be positive")
        object.__setattr__(self, "occupancy_zones", tuple(self.occupancy_zones))
        for zone in self.occupancy_zones:
            if zone < 1:
                raise OlarmConfigurationError(f"Invalid occupancy zone: {zone}")
        if (self.garage_door_zone is None) != (self.garage_door_pgm is None):
            raise OlarmConfigurationError(
                "garage_door_zone and garage_door_pgm must be configured together"
            )
        if self.garage_door_zone is not None and self.garage_door_zone < 1:
            raise OlarmConfigurationError(f"Invalid garage door zone: {self.garage_door_zone}")
        if self.garage_door_pgm is not None and self.garage_door_pgm < 1:
            raise OlarmConfigurationError(f"Invalid garage door PGM: {self.garage_door_pgm}")

    @property
    def has_garage_door(self) -> bool:
        return self.garage_door_zone is not None and self.garage_door_pgm is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OlarmAreaConfig:
        """Build from plugin-style JSON config keys."""
        kwargs: dict[str, Any] = {"area_name": data.get("area") or data.get("name") or ""}
        for key, field_name in (
            ("pollingInterval", "polling_interval_ms"),
            ("occupancyDelay", "occupancy_delay_ms"),
            ("garageDoorDelay", "garage_door_delay_ms"),
            ("garageDoorZone", "garage_door_zone"),
            ("garageDoorPGM", "garage_door_pgm"),
        ):
            if data.get(key) is not None:
                try:
                    kwargs[field_name] = int(data[key])
                except (TypeError, ValueError) as err:
                    raise OlarmConfigurationError(f"{key} must be an integer") from err
        try:
            kwargs["occupancy_zones"] = tuple(int(z) for z in data.get("occupancyZones") or ())
        except (TypeError, ValueError) as err:
            raise OlarmConfigurationError("occupancyZones must be integers") from err
        return cls(**kwargs)
