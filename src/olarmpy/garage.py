"""Garage door driven by a single momentary PGM pulse.

The panel only offers a pulse output, so the door position is inferred:
a pulse from rest starts a transition that completes after a fixed delay,
and the door zone contact overrides the inferred state whenever the door
is at rest or a transition has stalled.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable

from .client import OlarmClient
from .const import (
    DEFAULT_GARAGE_DOOR_DELAY,
    DOOR_STALE_AFTER,
    DoorState,
    PgmCommand,
    ZoneState,
)
from .models import Area

_LOGGER = logging.getLogger(__name__)

_IN_TRANSIT = (DoorState.OPENING, DoorState.CLOSING)
_SETTLED = (DoorState.OPEN, DoorState.CLOSED)


def observed_door_state(zone: ZoneState) -> DoorState:
    """Door state implied by the door zone contact."""
    if zone is ZoneState.ACTIVE:
        return DoorState.OPEN
    return DoorState.CLOSED


class CompletionTimer:
    """Single slot holding at most one pending transition completion."""

    def __init__(self) -> None:
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Replace any pending completion with a new one."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(delay_ms / 1000, self._fire, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()


class ReversalStrategy(ABC):
    """How a request for the opposite direction is handled while the door moves."""

    @abstractmethod
    async def async_reverse(self, door: GarageDoor, area: Area, state: DoorState) -> None:
        """Move ``door`` into the in-transit ``state`` opposite to its current one."""


class PulselessReversal(ReversalStrategy):
    """Treat the reversal as already under way without sending another pulse.

    The pending completion is dropped and no new one is scheduled; the door
    zone settles the final state once the transition goes stale.
    """

    async def async_reverse(self, door: GarageDoor, area: Area, state: DoorState) -> None:
        door.begin_transition(state, schedule=False)


class PulseReversal(ReversalStrategy):
    """Pulse again and restart the completion timer for the new direction."""

    async def async_reverse(self, door: GarageDoor, area: Area, state: DoorState) -> None:
        await door.async_pulse(area)
        door.begin_transition(state)


def _destination(state: DoorState) -> DoorState:
    return DoorState.OPEN if state is DoorState.OPENING else DoorState.CLOSED


class GarageDoor:
    """State machine for one pulse-driven garage door.

    Args:
        client: API client used to pulse the output.
        zone: 1-based zone number of the door contact.
        pgm_channel: 1-based PGM number wired to the door relay.
        delay_ms: Time a full open or close takes.
        reversal: Strategy used when the direction changes mid-transition.
        on_change: Called after every state change.
    """

    def __init__(
        self,
        client: OlarmClient,
        zone: int,
        pgm_channel: int,
        delay_ms: int = DEFAULT_GARAGE_DOOR_DELAY,
        *,
        reversal: ReversalStrategy | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._client = client
        self.zone = zone
        self.pgm_channel = pgm_channel
        self.delay_ms = delay_ms
        self._reversal = reversal or PulselessReversal()
        self._on_change = on_change
        self._current = DoorState.CLOSED
        self._target = DoorState.CLOSED
        self._timer = CompletionTimer()
        self._lock = asyncio.Lock()

    @property
    def current_state(self) -> DoorState:
        return self._current

    @property
    def target_state(self) -> DoorState:
        return self._target

    @property
    def transition_pending(self) -> bool:
        """Return True while a completion timer is outstanding."""
        return self._timer.pending

    async def async_set_target_state(self, target: DoorState, area: Area) -> None:
        """Request the door to open or close.

        Raises:
            ValueError: If ``target`` is neither OPEN nor CLOSED.
            OlarmError: If the pulse fails. The door state is left unchanged.
        """
        if target not in _SETTLED:
            raise ValueError(f"Unsupported door target: {target}")

        # One request at a time; overlapping pulses would reverse the door.
        async with self._lock:
            current = self._current
            _LOGGER.info(
                "SET door target from %s to %s (current: %s)", self._target, target, current
            )

            if current is DoorState.CLOSED and target is DoorState.OPEN:
                await self.async_pulse(area)
                self.begin_transition(DoorState.OPENING)
            elif current is DoorState.OPEN and target is DoorState.CLOSED:
                await self.async_pulse(area)
                self.begin_transition(DoorState.CLOSING)
            elif current is DoorState.OPENING and target is DoorState.CLOSED:
                await self._reversal.async_reverse(self, area, DoorState.CLOSING)
            elif current is DoorState.CLOSING and target is DoorState.OPEN:
                await self._reversal.async_reverse(self, area, DoorState.OPENING)

    def reconcile(self, area: Area, now_ms: int) -> bool:
        """Reconcile the inferred state with the door zone contact.

        At rest the contact is authoritative. In transit it only wins once
        the zone has not changed for longer than DOOR_STALE_AFTER.

        Returns:
            True if the door state changed.
        """
        observed = observed_door_state(area.zone_state(self.zone))

        if self._current in _IN_TRANSIT:
            age = now_ms - area.zone_stamp(self.zone)
            if age <= DOOR_STALE_AFTER:
                return False
            _LOGGER.warning(
                "Door still %s after %d ms without zone updates, settling to %s",
                self._current,
                age,
                observed,
            )
            self._timer.cancel()
        elif self._current not in _SETTLED:
            return False

        if observed is self._current and observed is self._target:
            return False
        self._set_state(observed, observed)
        return True

    def cancel(self) -> None:
        """Drop any pending completion without changing state."""
        self._timer.cancel()

    async def async_pulse(self, area: Area) -> None:
        """Pulse the door output once."""
        _LOGGER.debug("Pulsing PGM %d on %s", self.pgm_channel, area.device_id)
        await self._client.async_set_pgm(area, self.pgm_channel, PgmCommand.PULSE)

    def begin_transition(self, state: DoorState, *, schedule: bool = True) -> None:
        """Enter the in-transit ``state``, replacing any pending completion.

        With ``schedule`` the door settles at its destination after
        ``delay_ms``; without it the door zone settles it.
        """
        if state not in _IN_TRANSIT:
            raise ValueError(f"Not an in-transit door state: {state}")
        destination = _destination(state)
        self._timer.cancel()
        self._set_state(state, destination)
        if schedule:
            self._timer.schedule(self.delay_ms, lambda: self._complete(destination))

    def _complete(self, destination: DoorState) -> None:
        _LOGGER.info("Door transition complete: %s", destination)
        self._set_state(destination, destination)

    def _set_state(self, current: DoorState, target: DoorState) -> None:
        self._current = current
        self._target = target
        if self._on_change is not None:
            self._on_change()
