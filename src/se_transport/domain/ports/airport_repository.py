"""Airport repository port."""

from typing import Protocol

from se_transport.domain.models.airport import Airport


class AirportRepository(Protocol):
    """Port for the static airport dataset."""

    async def get_airports(self, country: str = "SE") -> list[Airport]:
        """All airports in a country, in dataset order."""
        ...
