"""Olarm API client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .const import API_BASE_URL, DEVICES_PATH, USER_AGENT, AreaAction, PgmCommand
from .exceptions import OlarmApiError, OlarmAuthError, OlarmConnectionError
from .models import Area

_LOGGER = logging.getLogger(__name__)


class OlarmClient:
    """Async client for the Olarm cloud API.

    Usage:
        async with aiohttp.ClientSession() as session:
            client = OlarmClient(session, "api-key")
            areas = await client.async_get_areas()
            await client.async_set_area(areas[0], AreaAction.STAY)
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        *,
        base_url: str = API_BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp client session (caller manages lifecycle).
            api_key: Olarm user API key.
            base_url: API base URL.
        """
        self._session = session
        self._api_key = api_key
        self._base_url = base_url

    # ── HTTP helpers ─────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_data: dict | None = None,
    ) -> Any:
        """Make an authenticated API request."""
        url = f"{self._base_url}{path}"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if json_data is not None:
            headers["Content-Type"] = "application/json"

        _LOGGER.debug("%s %s %s", method, path, json_data or "")
        try:
            async with self._session.request(
                method, url, headers=headers, json=json_data
            ) as resp:
                if resp.status in (401, 403):
                    raise OlarmAuthError(f"API key rejected ({resp.status})")
                if resp.status >= 400:
                    text = await resp.text()
                    raise OlarmApiError(
                        f"{method} {path} failed: {resp.status} {text}",
                        status_code=resp.status,
                    )
                if resp.content_type != "application/json":
                    return None
                return await resp.json()
        except aiohttp.ClientError as err:
            raise OlarmConnectionError(
                f"Connection error: {method} {path}: {err}"
            ) from err
        except asyncio.TimeoutError as err:
            raise OlarmConnectionError(
                f"Timeout: {method} {path}"
            ) from err

    # ── Areas ────────────────────────────────────────────────────────

    async def async_get_areas(self) -> list[Area]:
        """Get every area of every device on the account.

        Returns:
            List of Area snapshots.

        Raises:
            OlarmAuthError: If the API key is rejected.
            OlarmApiError: If the API returns an error.
            OlarmConnectionError: If unable to reach the API.
        """
        result = await self._request("GET", DEVICES_PATH)
        devices = result.get("data", []) if isinstance(result, dict) else []
        areas: list[Area] = []
        for device in devices:
            areas.extend(Area.list_from_api(device))
        _LOGGER.debug(
            "Fetched %d areas from %d devices", len(areas), len(devices)
        )
        return areas

    async def async_set_area(self, area: Area, action: AreaAction) -> None:
        """Arm, stay-arm or disarm an area.

        Raises:
            OlarmApiError: If the command fails.
        """
        await self._action(area.device_id, str(action), area.area_number)

    async def async_set_pgm(
        self, area: Area, channel: int, command: PgmCommand
    ) -> None:
        """Send a command to a programmable output on the area's device.

        Args:
            area: Any area of the device that owns the output.
            channel: 1-based PGM number.
            command: Pulse, on or off.

        Raises:
            OlarmApiError: If the command fails.
        """
        await self._action(area.device_id, str(command), channel)

    async def _action(self, device_id: str, command: str, number: int) -> None:
        await self._request(
            "POST",
            f"{DEVICES_PATH}/{device_id}/actions",
            json_data={"actionCmd": command, "actionNum": number},
        )
