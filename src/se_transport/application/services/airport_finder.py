"""Nearby-airport search over the static airport dataset."""

import logging
from dataclasses import dataclass

from se_transport.domain.geo import haversine_km
from se_transport.domain.models.airport import Airport, NearbyAirport
from se_transport.domain.ports.airport_repository import AirportRepository
from se_transport.domain.ports.geocoder import Geocoder
from se_transport.domain.reference_data.city_coordinates import lookup_coordinates

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 100.0
DEFAULT_LOCATION = "Stockholm"


def find_nearby_airports(
    airports: list[Airport],
    latitude: float,
    longitude: float,
    radius_km: float,
    scheduled_only: bool = False,
) -> list[NearbyAirport]:
    """Open airports within ``radius_km``, nearest first.

    Airports at equal distance keep their dataset order.
    """
    nearby = []
    for airport in airports:
        if airport.closed:
            continue
        if scheduled_only and not airport.scheduled_service:
            continue
        distance = haversine_km(latitude, longitude, airport.latitude, airport.longitude)
        if distance <= radius_km:
            nearby.append(NearbyAirport(airport=airport, distance_km=distance))

    nearby.sort(key=lambda item: item.distance_km)
    return nearby


def partition_by_service(
    nearby: list[NearbyAirport],
) -> tuple[list[NearbyAirport], list[NearbyAirport]]:
    """Split into (scheduled service, other), keeping order within each group."""
    scheduled = [item for item in nearby if item.airport.scheduled_service]
    other = [item for item in nearby if not item.airport.scheduled_service]
    return scheduled, other


@dataclass(frozen=True)
class NearbyAirportsResult:
    location: str
    radius_km: float
    airports: tuple[NearbyAirport, ...]


class AirportFinderService:
    """Resolves a place and lists the airports around it."""

    def __init__(self, airport_repository: AirportRepository, geocoder: Geocoder) -> None:
        self._airport_repository = airport_repository
        self._geocoder = geocoder

    async def resolve_coordinates(self, location: str) -> tuple[float, float]:
        """Coordinates from the city table, falling back to geocoding."""
        coordinates = lookup_coordinates(location)
        if coordinates is not None:
            return coordinates
        logger.debug(f"'{location}' not in the city table, geocoding")
        geo = await self._geocoder.geocode(location)
        return geo.coordinates

    async def find(
        self,
        location: str = DEFAULT_LOCATION,
        radius_km: float = DEFAULT_RADIUS_KM,
        scheduled_only: bool = False,
    ) -> NearbyAirportsResult:
        latitude, longitude = await self.resolve_coordinates(location)
        airports = await self._airport_repository.get_airports("SE")
        nearby = find_nearby_airports(airports, latitude, longitude, radius_km, scheduled_only)
        logger.info(f"{len(nearby)} airport(s) within {radius_km:.0f} km of {location}")
        return NearbyAirportsResult(location=location, radius_km=radius_km, airports=tuple(nearby))
