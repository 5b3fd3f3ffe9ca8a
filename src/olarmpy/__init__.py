"""olarmpy — Python library bridging Olarm alarm areas to home-automation hubs.

Tracks area arm state, infers zone occupancy and drives a pulse-operated
garage door from the Olarm cloud API.

Usage:
    from olarmpy import OlarmArea, OlarmAreaConfig, OlarmClient

    async with aiohttp.ClientSession() as session:
        client = OlarmClient(session, "api-key")
        area = OlarmArea(client, OlarmAreaConfig(area_name="House"))
        await area.async_setup()
        print(await area.async_get_current_security_state())
"""

from .area import OlarmArea
from .cache import AreaStateCache
from .client import OlarmClient
from .config import OlarmAreaConfig
from .const import AreaAction, AreaState, DoorState, PgmCommand, ZoneState
from .exceptions import (
    AreaNotFoundError,
    OlarmApiError,
    OlarmAuthError,
    OlarmConfigurationError,
    OlarmConnectionError,
    OlarmError,
)
from .garage import GarageDoor, PulselessReversal, PulseReversal, ReversalStrategy
from .homekit import (
    CurrentDoorState,
    OccupancyDetected,
    SecuritySystemState,
    TargetDoorState,
    from_security_system_state,
    from_target_door_state,
    to_current_door_state,
    to_occupancy_detected,
    to_security_system_state,
    to_target_door_state,
)
from .models import Area, SecurityStatePair
from .occupancy import ZoneOccupancy, is_occupied
from .security import SecurityStateReconciler

__all__ = [
    "Area",
    "AreaAction",
    "AreaNotFoundError",
    "AreaState",
    "AreaStateCache",
    "CurrentDoorState",
    "DoorState",
    "GarageDoor",
    "OccupancyDetected",
    "OlarmApiError",
    "OlarmArea",
    "OlarmAreaConfig",
    "OlarmAuthError",
    "OlarmClient",
    "OlarmConfigurationError",
    "OlarmConnectionError",
    "OlarmError",
    "PgmCommand",
    "PulseReversal",
    "PulselessReversal",
    "ReversalStrategy",
    "SecurityStatePair",
    "SecuritySystemState",
    "SecurityStateReconciler",
    "TargetDoorState",
    "ZoneOccupancy",
    "ZoneState",
    "from_security_system_state",
    "from_target_door_state",
    "is_occupied",
    "to_current_door_state",
    "to_occupancy_detected",
    "to_security_system_state",
    "to_target_door_state",
]

__version__ = "0.1.0"
