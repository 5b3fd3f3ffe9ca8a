"""Mapping between olarmpy states and HomeKit characteristic values.

APPLE  OLARM
Home   <unused>, writes become Stay
Away   Armed
Night  Stay
Off    Disarmed, and also NotReady / Triggered
"""

from __future__ import annotations

from enum import IntEnum

from .const import AreaState, DoorState


class SecuritySystemState(IntEnum):
    """SecuritySystemCurrentState / SecuritySystemTargetState values."""

    STAY_ARM = 0
    AWAY_ARM = 1
    NIGHT_ARM = 2
    DISARMED = 3
    ALARM_TRIGGERED = 4


class OccupancyDetected(IntEnum):
    """OccupancyDetected values."""

    OCCUPANCY_NOT_DETECTED = 0
    OCCUPANCY_DETECTED = 1


class CurrentDoorState(IntEnum):
    """CurrentDoorState values."""

    OPEN = 0
    CLOSED = 1
    OPENING = 2
    CLOSING = 3
    STOPPED = 4


class TargetDoorState(IntEnum):
    """TargetDoorState values."""

    OPEN = 0
    CLOSED = 1


_TO_SECURITY_SYSTEM = {
    AreaState.ARMED: SecuritySystemState.AWAY_ARM,
    AreaState.ARMED_STAY: SecuritySystemState.NIGHT_ARM,
    AreaState.DISARMED: SecuritySystemState.DISARMED,
    AreaState.NOT_READY: SecuritySystemState.DISARMED,
    # TODO: decide whether a triggered area should surface as ALARM_TRIGGERED
    AreaState.TRIGGERED: SecuritySystemState.DISARMED,
}

_FROM_SECURITY_SYSTEM = {
    SecuritySystemState.STAY_ARM: AreaState.ARMED_STAY,
    SecuritySystemState.AWAY_ARM: AreaState.ARMED,
    SecuritySystemState.NIGHT_ARM: AreaState.ARMED_STAY,
    SecuritySystemState.DISARMED: AreaState.DISARMED,
    SecuritySystemState.ALARM_TRIGGERED: AreaState.TRIGGERED,
}


def to_security_system_state(state: AreaState) -> SecuritySystemState:
    """Convert an area state to the value shown by the hub."""
    return _TO_SECURITY_SYSTEM.get(state, SecuritySystemState.DISARMED)


def from_security_system_state(value: int) -> AreaState:
    """Convert a hub target value to an area state.

    Unrecognized values fall back to disarmed.
    """
    try:
        return _FROM_SECURITY_SYSTEM[SecuritySystemState(value)]
    except ValueError:
        return AreaState.DISARMED


def to_occupancy_detected(occupied: bool) -> OccupancyDetected:
    if occupied:
        return OccupancyDetected.OCCUPANCY_DETECTED
    return OccupancyDetected.OCCUPANCY_NOT_DETECTED


def to_current_door_state(state: DoorState) -> CurrentDoorState:
    return CurrentDoorState[state.name]


def to_target_door_state(state: DoorState) -> TargetDoorState:
    """Convert a door target to the hub value. In-transit states map to their destination."""
    if state in (DoorState.OPEN, DoorState.OPENING):
        return TargetDoorState.OPEN
    return TargetDoorState.CLOSED


def from_target_door_state(value: int) -> DoorState:
    if value == TargetDoorState.OPEN:
        return DoorState.OPEN
    return DoorState.CLOSED
