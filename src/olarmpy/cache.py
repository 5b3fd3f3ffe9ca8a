"""Rate-limited cache of the most recent area snapshot."""

from __future__ import annotations

import logging
import time
from typing import Callable

from .client import OlarmClient
from .const import MIN_REFRESH_INTERVAL
from .exceptions import AreaNotFoundError
from .models import Area

_LOGGER = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class AreaStateCache:
    """Hold the last fetched snapshot of one named area.

    The refetch floor is a rate limit, not a freshness guarantee: callers
    within the window share the same snapshot.
    """

    def __init__(
        self,
        client: OlarmClient,
        area_name: str,
        *,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._client = client
        self._area_name = area_name
        self._clock = clock
        self._area: Area | None = None
        self._fetched_at: int | None = None

    @property
    def area(self) -> Area | None:
        """Cached snapshot, or None before the first fetch."""
        return self._area

    @property
    def fetched_at(self) -> int | None:
        """Epoch ms of the last successful fetch."""
        return self._fetched_at

    def is_stale(self, min_age_ms: int = MIN_REFRESH_INTERVAL) -> bool:
        """Return True if the next read would hit the API."""
        if self._area is None or self._fetched_at is None:
            return True
        return self._clock() - self._fetched_at >= min_age_ms

    async def async_get_current(self, min_age_ms: int = MIN_REFRESH_INTERVAL) -> Area:
        """Return the cached snapshot, refetching if it is older than min_age_ms.

        Raises:
            AreaNotFoundError: If a fresh fetch has no area with the configured name.
            OlarmError: If the fetch fails. The cache is left untouched.
        """
        if self._area is not None and not self.is_stale(min_age_ms):
            _LOGGER.debug(
                "Using cached %r fetched at %s (now %s)",
                self._area_name,
                self._fetched_at,
                self._clock(),
            )
            return self._area

        areas = await self._client.async_get_areas()
        area = next((a for a in areas if a.area_name == self._area_name), None)
        if area is None:
            raise AreaNotFoundError(self._area_name)

        self._area = area
        self._fetched_at = self._clock()
        return area
