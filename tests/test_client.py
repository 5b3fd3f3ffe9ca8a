"""Tests for olarmpy client."""

import asyncio
from typing import Any
from unittest.mock import MagicMock

import aiohttp
import pytest

from olarmpy.client import OlarmClient
from olarmpy.const import API_BASE_URL, AreaAction, AreaState, PgmCommand
from olarmpy.exceptions import OlarmApiError, OlarmAuthError, OlarmConnectionError
from olarmpy.models import Area


class _FakeResponse:
    def __init__(self, status: int = 200, body: Any = None) -> None:
        self.status = status
        self._body = body
        self.content_type = "application/json" if body is not None else "text/plain"

    async def json(self) -> Any:
        return self._body

    async def text(self) -> str:
        return str(self._body or "")

    async def __aenter__(self) -> "_FakeResponse":
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None


def _make_client(response: _FakeResponse | None = None) -> tuple[OlarmClient, MagicMock]:
    session = MagicMock()
    session.request.return_value = response or _FakeResponse(body={})
    return OlarmClient(session, "key-123"), session


def _area() -> Area:
    return Area(
        device_id="dev-1",
        area_number=2,
        area_name="House",
        area_state=AreaState.DISARMED,
        device_timestamp=0,
    )


@pytest.mark.asyncio
async def test_get_areas() -> None:
    body = {
        "data": [
            {
                "deviceId": "dev-1",
                "deviceState": {
                    "timestamp": 1000,
                    "areas": ["arm"],
                    "zones": ["c"],
                    "zonesStamp": [900],
                },
                "deviceProfile": {"areasLabels": ["House"]},
            },
            {
                "deviceId": "dev-2",
                "deviceState": {"areas": ["disarm", "stay"], "zones": [], "zonesStamp": []},
                "deviceProfile": {"areasLabels": ["Flat", "Shed"]},
            },
        ]
    }
    client, session = _make_client(_FakeResponse(body=body))
    areas = await client.async_get_areas()

    assert [a.area_name for a in areas] == ["House", "Flat", "Shed"]
    assert areas[0].area_state == AreaState.ARMED
    assert areas[2].area_state == AreaState.ARMED_STAY
    method, url = session.request.call_args.args
    assert method == "GET"
    assert url == f"{API_BASE_URL}/api/v4/devices"
    headers = session.request.call_args.kwargs["headers"]
    assert headers["Authorization"] == "Bearer key-123"


@pytest.mark.asyncio
async def test_set_area_posts_action() -> None:
    client, session = _make_client()
    await client.async_set_area(_area(), AreaAction.STAY)

    method, url = session.request.call_args.args
    assert method == "POST"
    assert url == f"{API_BASE_URL}/api/v4/devices/dev-1/actions"
    assert session.request.call_args.kwargs["json"] == {
        "actionCmd": "area-stay",
        "actionNum": 2,
    }


@pytest.mark.asyncio
async def test_set_pgm_posts_channel() -> None:
    client, session = _make_client(_FakeResponse())
    await client.async_set_pgm(_area(), 3, PgmCommand.PULSE)

    assert session.request.call_args.kwargs["json"] == {
        "actionCmd": "pgm-pulse",
        "actionNum": 3,
    }


@pytest.mark.asyncio
async def test_auth_error() -> None:
    client, _ = _make_client(_FakeResponse(status=401, body={}))
    with pytest.raises(OlarmAuthError):
        await client.async_get_areas()


@pytest.mark.asyncio
async def test_api_error_status() -> None:
    client, _ = _make_client(_FakeResponse(status=500, body={"error": "boom"}))
    with pytest.raises(OlarmApiError) as exc_info:
        await client.async_set_area(_area(), AreaAction.ARM)
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_connection_error_wrapped() -> None:
    client, session = _make_client()
    session.request.side_effect = aiohttp.ClientConnectionError("down")
    with pytest.raises(OlarmConnectionError, match="down"):
        await client.async_get_areas()


@pytest.mark.asyncio
async def test_timeout_wrapped() -> None:
    client, session = _make_client()
    session.request.side_effect = asyncio.TimeoutError()
    with pytest.raises(OlarmConnectionError, match="Timeout"):
        await client.async_set_pgm(_area(), 1, PgmCommand.PULSE)
