"""Trip planner port."""

from datetime import datetime
from typing import Protocol

from se_transport.domain.models.site import StopCandidate
from se_transport.domain.models.trip import Trip


class TripPlanner(Protocol):
    """Port for journey planning against a transit provider."""

    async def search_stops(self, query: str) -> list[StopCandidate]:
        """Find stops matching a free-text name, best match first."""
        ...

    async def plan_trips(
        self,
        origin: StopCandidate,
        destination: StopCandidate,
        when: datetime | None = None,
        arrive_by: bool = False,
        count: int = 3,
        max_changes: int | None = None,
    ) -> list[Trip]:
        """Plan trips between two resolved stops."""
        ...
