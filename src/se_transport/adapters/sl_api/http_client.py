"""HTTP client for the SL journey planner v2 and transport v1 APIs.

API Documentation: https://www.trafiklab.se/api/our-apis/sl/
"""

import logging
from typing import TYPE_CHECKING, Any

from se_transport.adapters.http_json import fetch_json
from se_transport.adapters.sl_api.constants import (
    SL_SITES_URL,
    SL_STOP_FINDER_URL,
    SL_TRIPS_URL,
    STOP_FINDER_OBJECT_FILTER,
)
from se_transport.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

PROVIDER = "SL"


class SlHttpClient:
    """HTTP client for SL requests. Returns raw decoded JSON."""

    def __init__(self, session: "ClientSession", timeout_seconds: float = 10) -> None:
        """Initialize with an aiohttp session and a per-call timeout."""
        self._session = session
        self._timeout = timeout_seconds

    async def find_stops(self, query: str) -> list[dict[str, Any]]:
        """Raw stop-finder locations for a free-text query."""
        params = {
            "type_sf": "any",
            "name_sf": query,
            "any_obj_filter_sf": STOP_FINDER_OBJECT_FILTER,
        }
        data = await self._get(SL_STOP_FINDER_URL, params)
        locations = data.get("locations") or []
        if not locations:
            _raise_system_error(data, error_types=("error",), require_text=True)
        return locations

    async def get_trips(self, params: dict[str, str]) -> list[dict[str, Any]]:
        """Raw journeys for a trips query."""
        data = await self._get(SL_TRIPS_URL, params)
        journeys = data.get("journeys") or []
        if not journeys:
            _raise_system_error(data, error_types=("error",), require_text=False)
        return journeys

    async def get_sites(self) -> list[dict[str, Any]]:
        """The full list of departure-board sites."""
        data = await fetch_json(
            self._session, SL_SITES_URL, PROVIDER, timeout_seconds=self._timeout
        )
        if not isinstance(data, list):
            raise UpstreamError("unexpected SL sites response format")
        return data

    async def get_departures(self, site_id: int) -> list[dict[str, Any]]:
        """Raw departures for one site."""
        url = f"{SL_SITES_URL}/{site_id}/departures"
        data = await self._get(url, None)
        return data.get("departures") or []

    async def _get(self, url: str, params: dict[str, str] | None) -> dict[str, Any]:
        data = await fetch_json(
            self._session, url, PROVIDER, params=params, timeout_seconds=self._timeout
        )
        if not isinstance(data, dict):
            raise UpstreamError(f"unexpected SL response format from {url}")
        return data


def _raise_system_error(
    data: dict[str, Any], error_types: tuple[str, ...], require_text: bool
) -> None:
    """Surface an upstream system message when a query returned nothing."""
    for message in data.get("systemMessages") or []:
        if not isinstance(message, dict) or message.get("type") not in error_types:
            continue
        text = message.get("text", "")
        if require_text and not text:
            continue
        raise UpstreamError(f"SL API error: {text}")
