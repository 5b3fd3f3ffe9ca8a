"""Tests for the area snapshot cache."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from olarmpy.cache import AreaStateCache
from olarmpy.const import AreaState
from olarmpy.exceptions import AreaNotFoundError, OlarmConnectionError
from olarmpy.models import Area


class _Clock:
    def __init__(self, now: int = 1_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


def _area(name: str, state: AreaState = AreaState.DISARMED) -> Area:
    return Area(
        device_id="dev-1",
        area_number=1,
        area_name=name,
        area_state=state,
        device_timestamp=0,
    )


def _make_cache(*fetches) -> tuple[AreaStateCache, MagicMock, _Clock]:
    client = MagicMock()
    client.async_get_areas = AsyncMock(side_effect=list(fetches))
    clock = _Clock()
    return AreaStateCache(client, "House", clock=clock), client, clock


@pytest.mark.asyncio
async def test_first_call_fetches() -> None:
    cache, client, clock = _make_cache([_area("Garage"), _area("House")])
    assert cache.area is None
    area = await cache.async_get_current()
    assert area.area_name == "House"
    assert cache.area is area
    assert cache.fetched_at == clock.now
    client.async_get_areas.assert_awaited_once()


@pytest.mark.asyncio
async def test_calls_within_interval_share_one_fetch() -> None:
    cache, client, clock = _make_cache([_area("House")], [_area("House")])
    first = await cache.async_get_current(15000)
    clock.now += 14999
    second = await cache.async_get_current(15000)
    assert second is first
    assert client.async_get_areas.await_count == 1


@pytest.mark.asyncio
async def test_refetch_after_interval_replaces_snapshot() -> None:
    cache, client, clock = _make_cache(
        [_area("House")], [_area("House", AreaState.ARMED)]
    )
    await cache.async_get_current(15000)
    clock.now += 15000
    area = await cache.async_get_current(15000)
    assert area.area_state == AreaState.ARMED
    assert client.async_get_areas.await_count == 2


@pytest.mark.asyncio
async def test_missing_area_not_cached() -> None:
    cache, _, _ = _make_cache([_area("Garage")])
    with pytest.raises(AreaNotFoundError):
        await cache.async_get_current()
    assert cache.area is None
    assert cache.is_stale()


@pytest.mark.asyncio
async def test_failed_fetch_keeps_previous_snapshot() -> None:
    cache, _, clock = _make_cache([_area("House")], OlarmConnectionError("down"))
    first = await cache.async_get_current()
    clock.now += 20000
    with pytest.raises(OlarmConnectionError):
        await cache.async_get_current()
    assert cache.area is first
