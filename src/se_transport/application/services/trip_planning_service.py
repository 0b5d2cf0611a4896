"""Trip planning use case: resolve both ends, then plan."""

import logging
from datetime import datetime

from se_transport.domain.exceptions import StopNotFoundError
from se_transport.domain.models.site import StopCandidate
from se_transport.domain.models.trip import Trip
from se_transport.domain.ports.trip_planner import TripPlanner

logger = logging.getLogger(__name__)


class TripPlanningService:
    """Plans trips between two place names with one transit provider."""

    def __init__(self, trip_planner: TripPlanner) -> None:
        """Initialize with the provider's trip planner."""
        self._trip_planner = trip_planner

    async def resolve_stop(self, name: str, role: str) -> StopCandidate:
        """Best stop match for a place name.

        Raises:
            StopNotFoundError: If the provider returns no candidates.
        """
        candidates = await self._trip_planner.search_stops(name)
        if not candidates:
            raise StopNotFoundError(name, role)
        best = candidates[0]
        logger.debug(f"Resolved {role} '{name}' to '{best.name}' ({best.id})")
        return best

    async def plan(
        self,
        origin: str,
        destination: str,
        when: datetime | None = None,
        arrive_by: bool = False,
        count: int = 3,
        max_changes: int | None = None,
    ) -> list[Trip]:
        """Resolve origin, then destination, then plan.

        The calls run strictly one after another.
        """
        origin_stop = await self.resolve_stop(origin, "origin")
        destination_stop = await self.resolve_stop(destination, "destination")
        trips = await self._trip_planner.plan_trips(
            origin_stop,
            destination_stop,
            when=when,
            arrive_by=arrive_by,
            count=count,
            max_changes=max_changes,
        )
        logger.info(f"Found {len(trips)} trip(s) from '{origin}' to '{destination}'")
        return trips
