"""ResRobot trip planner adapter for nationwide Swedish trips."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from se_transport.adapters.config.app_config import RESROBOT_KEY_HINT
from se_transport.adapters.resrobot_api.http_client import ResRobotHttpClient
from se_transport.adapters.resrobot_api.trip_parser import TripParser
from se_transport.domain.exceptions import ConfigurationError
from se_transport.domain.models.site import StopCandidate
from se_transport.domain.models.trip import Trip
from se_transport.domain.ports.trip_planner import TripPlanner

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class ResRobotTripPlanner(TripPlanner):
    """Adapter for trips across all Swedish operators via ResRobot.

    ResRobot has no transfer limit; ``max_changes`` is accepted and ignored.
    """

    def __init__(
        self,
        session: "ClientSession",
        tz: ZoneInfo,
        api_key: str | None,
        timeout_seconds: float = 15,
    ) -> None:
        """Initialize the adapter.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if not api_key:
            raise ConfigurationError(RESROBOT_KEY_HINT)
        self._client = ResRobotHttpClient(session, api_key, timeout_seconds)
        self._tz = tz

    async def search_stops(self, query: str) -> list[StopCandidate]:
        data = await self._client.find_locations(query)
        candidates = TripParser.parse_stop_candidates(data)
        logger.debug(f"ResRobot stop search '{query}' returned {len(candidates)} candidate(s)")
        return candidates

    async def plan_trips(
        self,
        origin: StopCandidate,
        destination: StopCandidate,
        when: datetime | None = None,
        arrive_by: bool = False,
        count: int = 3,
        max_changes: int | None = None,
    ) -> list[Trip]:
        params = {
            "originId": origin.id,
            "destId": destination.id,
            "numF": str(count),
            "passlist": "0",
        }
        if when is not None:
            local = when.astimezone(self._tz) if when.tzinfo else when
            params["date"] = local.strftime("%Y-%m-%d")
            params["time"] = local.strftime("%H:%M")
        if arrive_by:
            params["searchForArrival"] = "1"

        data = await self._client.get_trips(params)
        return TripParser.parse_trips(data, self._tz)
