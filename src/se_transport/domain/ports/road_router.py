"""Road router port."""

from typing import Protocol

from se_transport.domain.models.location import GeoLocation, RoadRoute


class RoadRouter(Protocol):
    """Port for driving distance and duration between two points."""

    async def route(self, origin: GeoLocation, destination: GeoLocation) -> RoadRoute:
        """Driving route between two geocoded locations."""
        ...
