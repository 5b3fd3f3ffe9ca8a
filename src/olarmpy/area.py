"""Hub-facing view of one configured area.

``OlarmArea`` owns every piece of per-area state (snapshot cache, security
state pair, garage door) and is the single handle passed between the
periodic driver and the hub's read and write handlers.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Callable

from .cache import AreaStateCache, now_ms
from .client import OlarmClient
from .config import OlarmAreaConfig
from .const import MIN_REFRESH_INTERVAL, AreaState, DoorState
from .exceptions import OlarmConfigurationError, OlarmError
from .garage import GarageDoor, ReversalStrategy
from .models import Area
from .occupancy import ZoneOccupancy, is_occupied
from .security import SecurityStateReconciler

_LOGGER = logging.getLogger(__name__)

Listener = Callable[["OlarmArea"], None]


class OlarmArea:
    """Security system, occupancy sensors and garage door of one area.

    Usage:
        area = OlarmArea(client, OlarmAreaConfig(area_name="House"))
        await area.async_setup()
        area.start()
        ...
        await area.async_stop()
    """

    def __init__(
        self,
        client: OlarmClient,
        config: OlarmAreaConfig,
        *,
        clock: Callable[[], int] = now_ms,
        door_reversal: ReversalStrategy | None = None,
    ) -> None:
        self.config = config
        self._client = client
        self._clock = clock
        self._cache = AreaStateCache(client, config.area_name, clock=clock)
        self._security = SecurityStateReconciler(client, self._cache)
        self._occupancy = ZoneOccupancy(config.occupancy_zones, config.occupancy_delay_ms)
        self._occupied: dict[int, bool] = {}
        self._listeners: list[Listener] = []
        self._poll_task: asyncio.Task | None = None

        self.garage_door: GarageDoor | None = None
        if config.has_garage_door:
            self.garage_door = GarageDoor(
                client,
                config.garage_door_zone,  # type: ignore[arg-type]
                config.garage_door_pgm,  # type: ignore[arg-type]
                config.garage_door_delay_ms,
                reversal=door_reversal,
                on_change=self._notify,
            )

    @property
    def name(self) -> str:
        return self.config.area_name

    @property
    def area(self) -> Area | None:
        """Last fetched snapshot."""
        return self._cache.area

    @property
    def occupancy(self) -> dict[int, bool]:
        """Occupancy computed by the last update, keyed by zone number."""
        return dict(self._occupied)

    # ── Lifecycle ────────────────────────────────────────────────────

    async def async_setup(self) -> None:
        """Fetch the area once, seed the state and validate configured zones.

        Raises:
            AreaNotFoundError: If the configured area does not exist.
            OlarmConfigurationError: If a configured zone is out of range.
        """
        area = await self._cache.async_get_current(0)
        self._occupancy.validate(area)
        if self.garage_door is not None:
            area.zone_state(self.garage_door.zone)
        self._security.seed(area.area_state)
        _LOGGER.debug(
            "Set up area %r (%d zones, occupancy zones %s, garage door %s)",
            area.area_name,
            area.zone_count,
            self._occupancy.zones,
            self.garage_door is not None,
        )

    def start(self) -> None:
        """Start polling every ``polling_interval_ms`` on the running loop."""
        if self._poll_task is None or self._poll_task.done():
            self._poll_task = asyncio.get_running_loop().create_task(self._poll())

    async def async_stop(self) -> None:
        """Stop polling and drop any pending door completion."""
        if self._poll_task is not None:
            self._poll_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._poll_task
            self._poll_task = None
        if self.garage_door is not None:
            self.garage_door.cancel()

    async def _poll(self) -> None:
        interval = self.config.polling_interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            try:
                await self.async_update()
            except OlarmError as err:
                _LOGGER.warning("Update of area %r failed: %s", self.name, err)

    async def async_update(self) -> None:
        """Periodic tick: refresh, then update occupancy and the garage door."""
        _LOGGER.debug("Updating area %r", self.name)
        await self._security.async_refresh()
        area = await self._cache.async_get_current(MIN_REFRESH_INTERVAL)
        self._occupied = self._occupancy.evaluate(area)
        if self.garage_door is not None:
            self.garage_door.reconcile(area, self._clock())
        self._notify()

    # ── Listeners ────────────────────────────────────────────────────

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change. Returns a remover."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ── Security system ──────────────────────────────────────────────

    async def async_get_current_security_state(self) -> AreaState:
        """Observed arm state, refreshing through the rate-limited cache."""
        pair = await self._security.async_refresh()
        self._notify()
        return pair.current

    def get_target_security_state(self) -> AreaState:
        """Last requested arm state. Never contacts the API."""
        _LOGGER.info(
            "GET TargetState (%s) %s (current: %s)",
            self.name,
            self._security.target,
            self._security.current,
        )
        return self._security.target

    async def async_set_target_security_state(self, state: AreaState) -> None:
        await self._security.async_request_target(state)
        self._notify()

    # ── Occupancy ────────────────────────────────────────────────────

    async def async_get_zone_occupancy(self, zone_number: int) -> bool:
        """Occupancy of one zone from the latest (rate-limited) snapshot."""
        area = await self._cache.async_get_current(MIN_REFRESH_INTERVAL)
        return is_occupied(zone_number, area, self.config.occupancy_delay_ms)

    # ── Garage door ──────────────────────────────────────────────────

    def _require_door(self) -> GarageDoor:
        if self.garage_door is None:
            raise OlarmConfigurationError(
                f"No garage door configured for area {self.name!r}"
            )
        return self.garage_door

    def get_door_current_state(self) -> DoorState:
        return self._require_door().current_state

    def get_door_target_state(self) -> DoorState:
        return self._require_door().target_state

    async def async_set_door_target_state(self, state: DoorState) -> None:
        door = self._require_door()
        area = self._cache.area
        if area is None:
            area = await self._cache.async_get_current(MIN_REFRESH_INTERVAL)
        await door.async_set_target_state(state, area)
