"""Departure board use case: resolve a site, fetch and filter departures."""

import logging

from se_transport.domain.exceptions import StopNotFoundError
from se_transport.domain.models.departure import Departure, DepartureBoard
from se_transport.domain.models.site import Site
from se_transport.domain.models.transport_mode import TransportMode
from se_transport.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3


class DepartureBoardService:
    """Next departures from a named stop, with optional mode and direction filters."""

    def __init__(self, departure_repository: DepartureRepository) -> None:
        """Initialize with a departure repository."""
        self._departure_repository = departure_repository

    async def get_board(
        self,
        location: str,
        mode: TransportMode | None = None,
        towards: str = "",
        count: int = 3,
    ) -> DepartureBoard:
        """Departures from the best-matching site.

        Raises:
            StopNotFoundError: If no site matches ``location``.
        """
        sites = await self._departure_repository.search_sites(location)
        if not sites:
            raise StopNotFoundError(location, "site")
        site = sites[0]

        departures = await self._departure_repository.get_departures(site.id)
        filtered = filter_departures(departures, mode, towards, count)
        logger.debug(
            f"{len(filtered)} of {len(departures)} departure(s) from '{site.name}' kept "
            f"(mode={mode.value if mode else 'any'}, towards='{towards}')"
        )
        return DepartureBoard(site=site, departures=tuple(filtered), mode=mode, towards=towards)

    async def suggest_sites(self, query: str) -> list[str]:
        """Up to three site names starting with the query's first word."""
        sites = await self._departure_repository.get_all_sites()
        return suggest_site_names(sites, query)


def filter_departures(
    departures: list[Departure],
    mode: TransportMode | None,
    towards: str,
    count: int,
) -> list[Departure]:
    """First ``count`` departures matching mode and destination, in upstream order.

    ``towards`` matches as a case-insensitive substring of the destination.
    """
    towards_lower = towards.lower()
    result = []
    for departure in departures:
        if mode is not None and departure.mode != mode:
            continue
        if towards_lower and towards_lower not in departure.destination.lower():
            continue
        result.append(departure)
        if len(result) >= count:
            break
    return result


def suggest_site_names(sites: list[Site], query: str, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Names of sites whose name starts with the first word of ``query``.

    An exact first-word match ranks first, then shorter names.
    """
    words = query.lower().split()
    if not words:
        return []
    first_word = words[0]

    matches = []
    for site in sites:
        name_lower = site.name.lower()
        if not name_lower.startswith(first_word):
            continue
        score = 0 if name_lower == first_word else len(site.name)
        matches.append((score, site.name))

    matches.sort(key=lambda match: match[0])
    return [name for _, name in matches[:limit]]
