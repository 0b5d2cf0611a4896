"""Departure repository port."""

from typing import Protocol

from se_transport.domain.models.departure import Departure
from se_transport.domain.models.site import Site


class DepartureRepository(Protocol):
    """Port for departure-board sites and their departures."""

    async def search_sites(self, query: str) -> list[Site]:
        """Sites matching a query, exact matches first."""
        ...

    async def get_all_sites(self) -> list[Site]:
        """Every site known to the provider."""
        ...

    async def get_departures(self, site_id: int) -> list[Departure]:
        """Upcoming departures for a site, in provider order."""
        ...
