"""Geocoder port."""

from typing import Protocol

from se_transport.domain.models.location import GeoLocation


class Geocoder(Protocol):
    """Port for turning a free-text address into coordinates."""

    async def geocode(self, address: str) -> GeoLocation:
        """Best match for an address; raises StopNotFoundError if none."""
        ...
