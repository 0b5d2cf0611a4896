"""SL journey planner trip planner adapter."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from se_transport.adapters.sl_api.http_client import SlHttpClient
from se_transport.adapters.sl_api.journey_parser import JourneyParser
from se_transport.domain.models.site import StopCandidate
from se_transport.domain.models.trip import Trip
from se_transport.domain.ports.trip_planner import TripPlanner

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class SlTripPlanner(TripPlanner):
    """Adapter for regional trips in Stockholm via the SL journey planner."""

    def __init__(
        self,
        session: "ClientSession",
        tz: ZoneInfo,
        language: str = "sv",
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with an aiohttp session and the timezone for parsed times."""
        self._client = SlHttpClient(session, timeout_seconds)
        self._tz = tz
        self._language = language

    async def search_stops(self, query: str) -> list[StopCandidate]:
        locations = await self._client.find_stops(query)
        candidates = JourneyParser.parse_stop_candidates(locations)
        logger.debug(f"SL stop search '{query}' returned {len(candidates)} candidate(s)")
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
        """Plan trips between two stops found by search_stops."""
        params = {
            "type_origin": "any",
            "name_origin": origin.id,
            "type_destination": "any",
            "name_destination": destination.id,
            "calc_number_of_trips": str(count),
            "itd_trip_date_time_dep_arr": "arr" if arrive_by else "dep",
        }
        if self._language:
            params["language"] = self._language
        if when is not None:
            local = when.astimezone(self._tz) if when.tzinfo else when
            params["itd_date"] = local.strftime("%Y%m%d")
            params["itd_time"] = local.strftime("%H%M")
        if max_changes is not None and max_changes >= 0:
            params["maxChanges"] = str(max_changes)

        journeys = await self._client.get_trips(params)
        return JourneyParser.parse_journeys(journeys, self._tz)
