"""Road router backed by the public OSRM demo server.

API Documentation: https://project-osrm.org/docs/v5.24.0/api/#route-service
"""

import logging
from typing import TYPE_CHECKING

from se_transport.adapters.http_json import fetch_json
from se_transport.domain.exceptions import UpstreamError
from se_transport.domain.models.location import GeoLocation, RoadRoute
from se_transport.domain.ports.road_router import RoadRouter

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

OSRM_ROUTE_URL = "https://router.project-osrm.org/route/v1/driving"


class OsrmRoadRouter(RoadRouter):
    """Driving distance and duration between two points."""

    def __init__(self, session: "ClientSession", timeout_seconds: float = 10) -> None:
        self._session = session
        self._timeout = timeout_seconds

    async def route(self, origin: GeoLocation, destination: GeoLocation) -> RoadRoute:
        # OSRM wants lon,lat pairs
        url = (
            f"{OSRM_ROUTE_URL}/{origin.longitude},{origin.latitude};"
            f"{destination.longitude},{destination.latitude}"
        )
        data = await fetch_json(
            self._session,
            url,
            "OSRM",
            params={"overview": "false"},
            timeout_seconds=self._timeout,
        )
        if not isinstance(data, dict) or data.get("code") != "Ok":
            code = data.get("code") if isinstance(data, dict) else None
            raise UpstreamError(f"OSRM routing failed: {code or 'unexpected response'}")
        routes = data.get("routes") or []
        if not routes:
            raise UpstreamError("OSRM returned no routes")

        best = routes[0]
        logger.debug(
            f"OSRM route {origin.name} -> {destination.name}: "
            f"{best.get('distance')} m, {best.get('duration')} s"
        )
        return RoadRoute(
            origin=origin,
            destination=destination,
            distance_meters=float(best.get("distance") or 0.0),
            duration_seconds=float(best.get("duration") or 0.0),
        )
