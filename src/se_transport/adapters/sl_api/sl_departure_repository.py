"""SL transport API departure repository adapter."""

import logging
from typing import TYPE_CHECKING

from se_transport.adapters.sl_api.departure_parser import DepartureParser
from se_transport.adapters.sl_api.http_client import SlHttpClient
from se_transport.domain.models.departure import Departure
from se_transport.domain.models.site import Site
from se_transport.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class SlDepartureRepository(DepartureRepository):
    """Adapter for SL departure boards."""

    def __init__(self, session: "ClientSession", timeout_seconds: float = 10) -> None:
        """Initialize with an aiohttp session."""
        self._client = SlHttpClient(session, timeout_seconds)

    async def get_all_sites(self) -> list[Site]:
        raw_sites = await self._client.get_sites()
        sites = DepartureParser.parse_sites(raw_sites)
        logger.debug(f"Loaded {len(sites)} SL sites")
        return sites

    async def search_sites(self, query: str) -> list[Site]:
        """Sites matching the query; exact name matches first, then exact aliases."""
        sites = await self.get_all_sites()
        matches = [site for site in sites if site.matches_query(query)]
        query_lower = query.lower()

        def rank(site: Site) -> int:
            if site.name.lower() == query_lower:
                return 0
            if any(alias.lower() == query_lower for alias in site.aliases):
                return 1
            return 2

        return sorted(matches, key=rank)

    async def get_departures(self, site_id: int) -> list[Departure]:
        raw = await self._client.get_departures(site_id)
        return DepartureParser.parse_departures(raw)
