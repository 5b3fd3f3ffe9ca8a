"""Data models for the olarmpy library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .const import AreaState, ZoneState
from .exceptions import OlarmApiError, OlarmConfigurationError


_TRIGGERED_STATES = ("fire", "emergency")


def _parse_area_state(raw: str | None) -> AreaState:
    # Anything the panel reports that we cannot represent (countdowns,
    # sleep modes) is treated as not ready so it never overwrites a target.
    if raw in _TRIGGERED_STATES:
        return AreaState.TRIGGERED
    try:
        return AreaState(raw) if raw else AreaState.NOT_READY
    except ValueError:
        return AreaState.NOT_READY


def _parse_zone_state(raw: str | None) -> ZoneState:
    try:
        return ZoneState(raw) if raw else ZoneState.UNKNOWN
    except ValueError:
        return ZoneState.UNKNOWN


@dataclass(frozen=True)
class Area:
    """Snapshot of one alarm area as reported by the Olarm API.

    Snapshots are never merged: every fetch produces new instances that
    replace the previous ones wholesale.
    """

    device_id: str
    area_number: int  # 1-based
    area_name: str
    area_state: AreaState
    device_timestamp: int  # epoch ms
    zones: tuple[ZoneState, ...] = ()
    zones_stamp: tuple[int, ...] = ()
    zones_labels: tuple[str, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.zones) != len(self.zones_stamp):
            raise OlarmApiError(
                f"Area {self.area_name!r}: {len(self.zones)} zones but "
                f"{len(self.zones_stamp)} zone timestamps"
            )

    @property
    def zone_count(self) -> int:
        """Number of zones reported by the panel."""
        return len(self.zones)

    def _zone_index(self, zone_number: int) -> int:
        if not 1 <= zone_number <= len(self.zones):
            raise OlarmConfigurationError(
                f"Zone {zone_number} out of range for area {self.area_name!r} "
                f"({len(self.zones)} zones)"
            )
        return zone_number - 1

    def zone_state(self, zone_number: int) -> ZoneState:
        """Return the state of a 1-based zone."""
        return self.zones[self._zone_index(zone_number)]

    def zone_stamp(self, zone_number: int) -> int:
        """Return the last-changed timestamp (epoch ms) of a 1-based zone."""
        return self.zones_stamp[self._zone_index(zone_number)]

    @classmethod
    def from_api(cls, data: dict[str, Any], area_number: int) -> Area:
        """Create one area from a device payload.

        Args:
            data: Raw device resource from ``/api/v4/devices``.
            area_number: 1-based area number within the device.
        """
        state = data.get("deviceState") or {}
        profile = data.get("deviceProfile") or {}
        index = area_number - 1

        labels = profile.get("areasLabels") or []
        area_name = labels[index] if index < len(labels) else ""
        if not area_name:
            area_name = f"Area {area_number}"

        areas = state.get("areas") or []
        raw_state = areas[index] if index < len(areas) else None

        return cls(
            device_id=data.get("deviceId", ""),
            area_number=area_number,
            area_name=area_name,
            area_state=_parse_area_state(raw_state),
            device_timestamp=int(state.get("timestamp") or 0),
            zones=tuple(_parse_zone_state(z) for z in state.get("zones") or []),
            zones_stamp=tuple(int(s or 0) for s in state.get("zonesStamp") or []),
            zones_labels=tuple(profile.get("zonesLabels") or []),
            raw=data,
        )

    @classmethod
    def list_from_api(cls, data: dict[str, Any]) -> list[Area]:
        """Create every area of a device payload."""
        profile = data.get("deviceProfile") or {}
        state = data.get("deviceState") or {}
        count = len(profile.get("areasLabels") or state.get("areas") or [])
        return [cls.from_api(data, number) for number in range(1, count + 1)]


@dataclass
class SecurityStatePair:
    """Observed (current) and requested (target) security state of an area."""

    current: AreaState = AreaState.DISARMED
    target: AreaState = AreaState.DISARMED
