"""Tests for zone occupancy inference."""

import pytest

from olarmpy.const import AreaState, ZoneState
from olarmpy.exceptions import OlarmConfigurationError
from olarmpy.homekit import OccupancyDetected, to_occupancy_detected
from olarmpy.models import Area
from olarmpy.occupancy import ZoneOccupancy, is_occupied


def _area() -> Area:
    return Area(
        device_id="dev-1",
        area_number=1,
        area_name="House",
        area_state=AreaState.DISARMED,
        device_timestamp=100000,
        zones=(ZoneState.CLOSED, ZoneState.CLOSED, ZoneState.ACTIVE),
        zones_stamp=(10000, 99000, 100000),
    )


def test_recent_zone_is_occupied() -> None:
    assert is_occupied(2, _area(), 5000) is True


def test_old_zone_is_not_occupied() -> None:
    assert is_occupied(2, _area(), 500) is False


def test_difference_equal_to_delay_is_not_occupied() -> None:
    assert is_occupied(2, _area(), 1000) is False


def test_out_of_range_zone_fails() -> None:
    with pytest.raises(OlarmConfigurationError):
        is_occupied(4, _area(), 5000)


def test_zone_occupancy_evaluate() -> None:
    occupancy = ZoneOccupancy([1, 2, 3], 5000)
    assert occupancy.evaluate(_area()) == {1: False, 2: True, 3: True}


def test_zone_occupancy_validate() -> None:
    ZoneOccupancy([1, 3], 5000).validate(_area())
    with pytest.raises(OlarmConfigurationError):
        ZoneOccupancy([1, 9], 5000).validate(_area())


def test_to_occupancy_detected() -> None:
    assert to_occupancy_detected(True) is OccupancyDetected.OCCUPANCY_DETECTED
    assert to_occupancy_detected(False) is OccupancyDetected.OCCUPANCY_NOT_DETECTED
