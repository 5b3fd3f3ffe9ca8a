"""Constants for the olarmpy library."""

from enum import StrEnum

# Olarm API base URL
API_BASE_URL = "https://apiv4.olarm.co"
DEVICES_PATH = "/api/v4/devices"

# Minimum time between two area fetches (ms). Bounds vendor API volume
# when the hub polls often.
MIN_REFRESH_INTERVAL = 15000

# An in-flight door transition whose zone has not changed for this long
# (ms) is settled to whatever the zone reports.
DOOR_STALE_AFTER = 60000

# Configuration defaults (ms)
DEFAULT_POLLING_INTERVAL = 30000
DEFAULT_OCCUPANCY_DELAY = 60000
DEFAULT_GARAGE_DOOR_DELAY = 15000

# User agent
USER_AGENT = "olarmpy/0.1.0"


class AreaState(StrEnum):
    """Area arming states as returned by the Olarm API."""

    DISARMED = "disarm"
    ARMED = "arm"
    ARMED_STAY = "stay"
    NOT_READY = "notready"
    TRIGGERED = "alarm"


class AreaAction(StrEnum):
    """Area commands accepted by the actions endpoint."""

    ARM = "area-arm"
    STAY = "area-stay"
    DISARM = "area-disarm"


class PgmCommand(StrEnum):
    """Programmable output commands."""

    PULSE = "pgm-pulse"
    ON = "pgm-open"
    OFF = "pgm-close"


class ZoneState(StrEnum):
    """Zone states as reported in ``deviceState.zones``."""

    ACTIVE = "a"
    CLOSED = "c"
    BYPASSED = "b"
    UNKNOWN = "unknown"


class DoorState(StrEnum):
    """Garage door states."""

    OPEN = "open"
    CLOSED = "closed"
    OPENING = "opening"
    CLOSING = "closing"
    STOPPED = "stopped"
