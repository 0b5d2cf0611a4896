"""HTTP client for the ResRobot v2.1 API.

API Documentation: https://www.trafiklab.se/api/our-apis/resrobot-v21/
"""

import logging
from typing import TYPE_CHECKING, Any

from se_transport.adapters.http_json import fetch_json
from se_transport.adapters.resrobot_api.constants import (
    RESROBOT_LOCATION_URL,
    RESROBOT_TRIP_URL,
)
from se_transport.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

PROVIDER = "ResRobot"


class ResRobotHttpClient:
    """HTTP client for ResRobot requests. Returns raw decoded JSON."""

    def __init__(
        self, session: "ClientSession", api_key: str, timeout_seconds: float = 15
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._timeout = timeout_seconds

    async def find_locations(self, query: str) -> dict[str, Any]:
        return await self._get(RESROBOT_LOCATION_URL, {"input": query})

    async def get_trips(self, params: dict[str, str]) -> dict[str, Any]:
        return await self._get(RESROBOT_TRIP_URL, params)

    async def _get(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        query = {**params, "format": "json", "accessId": self._api_key}
        data = await fetch_json(
            self._session, url, PROVIDER, params=query, timeout_seconds=self._timeout
        )
        if not isinstance(data, dict):
            raise UpstreamError(f"unexpected ResRobot response format from {url}")
        if data.get("errorCode"):
            raise UpstreamError(
                f"ResRobot API error: {data.get('errorCode')} {data.get('errorText', '')}".strip()
            )
        return data
