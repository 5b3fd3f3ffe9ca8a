"""Reconcile the remote area arm state with the hub's current/target pair."""

from __future__ import annotations

import logging

from .cache import AreaStateCache
from .client import OlarmClient
from .const import MIN_REFRESH_INTERVAL, AreaAction, AreaState
from .models import SecurityStatePair

_LOGGER = logging.getLogger(__name__)


def action_for(state: AreaState) -> AreaAction:
    """Return the area command that requests the given state."""
    if state is AreaState.ARMED:
        return AreaAction.ARM
    if state is AreaState.ARMED_STAY:
        return AreaAction.STAY
    return AreaAction.DISARM


class SecurityStateReconciler:
    """Track the observed and requested arm state of one area.

    ``current`` is the last observed state and ``target`` the last requested
    one. A refresh copies the observed state into the target, except when the
    panel reports not ready: there is no target for that, so the previous
    request is kept.
    """

    def __init__(
        self,
        client: OlarmClient,
        cache: AreaStateCache,
        *,
        min_refresh_interval: int = MIN_REFRESH_INTERVAL,
    ) -> None:
        self._client = client
        self._cache = cache
        self._min_refresh_interval = min_refresh_interval
        self._state = SecurityStatePair()

    @property
    def state(self) -> SecurityStatePair:
        """Current/target pair without contacting the API."""
        return SecurityStatePair(self._state.current, self._state.target)

    @property
    def current(self) -> AreaState:
        return self._state.current

    @property
    def target(self) -> AreaState:
        return self._state.target

    def seed(self, state: AreaState) -> None:
        """Initialize both current and target from a known state."""
        self._state = SecurityStatePair(state, state)

    async def async_refresh(self) -> SecurityStatePair:
        """Refresh from the (rate-limited) cache and return the new pair."""
        area = await self._cache.async_get_current(self._min_refresh_interval)
        _LOGGER.info(
            "GET CurrentState (%s) from %s to %s (target: %s)",
            area.area_name,
            self._state.current,
            area.area_state,
            self._state.target,
        )
        self._state.current = area.area_state
        if area.area_state is not AreaState.NOT_READY:
            self._state.target = area.area_state
        return self.state

    async def async_request_target(self, requested: AreaState) -> None:
        """Send the command for ``requested`` and adopt it once accepted.

        The pair is updated optimistically on success, without waiting for a
        later poll to confirm. On failure the error propagates and the pair
        keeps its previous values.
        """
        area = self._cache.area
        if area is None:
            area = await self._cache.async_get_current(self._min_refresh_interval)

        action = action_for(requested)
        _LOGGER.info(
            "SET TargetState (%s) from %s to %s with %r",
            area.area_name,
            self._state.target,
            requested,
            str(action),
        )
        await self._client.async_set_area(area, action)

        self._state = SecurityStatePair(requested, requested)
        _LOGGER.info("Updated %s to %s", area.area_name, requested)
