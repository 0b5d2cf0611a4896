"""Fuel and cost planning for a car trip."""

import logging

from se_transport.domain.deep_links import driving_directions_url, fuel_station_search_url
from se_transport.domain.exceptions import InvalidInputError, TransportError
from se_transport.domain.models.car_trip import CarTripPlan
from se_transport.domain.models.location import RoadRoute
from se_transport.domain.models.vehicle import VehicleProfile
from se_transport.domain.ports.geocoder import Geocoder
from se_transport.domain.ports.road_router import RoadRouter

logger = logging.getLogger(__name__)

DEFAULT_FUEL_PRICE_SEK = 19.5
DEFAULT_AVERAGE_SPEED_KMH = 80.0


class CarTripService:
    """Plans fuel, cost and refuelling stops for a drive.

    Without an explicit distance both ends are geocoded and routed. When that
    fails the plan carries no distance and only the vehicle profile applies.
    """

    def __init__(
        self,
        profile: VehicleProfile,
        geocoder: Geocoder | None = None,
        road_router: RoadRouter | None = None,
        fuel_price_sek_per_liter: float = DEFAULT_FUEL_PRICE_SEK,
        average_speed_kmh: float = DEFAULT_AVERAGE_SPEED_KMH,
    ) -> None:
        self._profile = profile
        self._geocoder = geocoder
        self._road_router = road_router
        self._fuel_price = fuel_price_sek_per_liter
        self._average_speed = average_speed_kmh

    async def _route(self, origin: str, destination: str) -> RoadRoute | None:
        if self._geocoder is None or self._road_router is None:
            return None
        try:
            start = await self._geocoder.geocode(origin)
            end = await self._geocoder.geocode(destination)
            return await self._road_router.route(start, end)
        except TransportError as e:
            logger.warning(f"Could not route {origin} -> {destination}: {e}")
            return None

    async def plan(
        self,
        origin: str,
        destination: str,
        distance_km: float | None = None,
        fuel_percent: float = 100,
    ) -> CarTripPlan:
        if distance_km is not None and distance_km < 0:
            raise InvalidInputError("distance must not be negative")
        if fuel_percent <= 0 or fuel_percent > 100:
            fuel_percent = 100

        routed_minutes: float | None = None
        if distance_km is None:
            route = await self._route(origin, destination)
            if route is not None:
                distance_km = route.distance_km
                routed_minutes = route.duration_minutes

        maps_url = driving_directions_url(origin, destination)
        if distance_km is None:
            return CarTripPlan(
                origin=origin,
                destination=destination,
                profile=self._profile,
                starting_fuel_percent=fuel_percent,
                maps_url=maps_url,
            )

        return self.plan_for_distance(
            origin, destination, distance_km, fuel_percent, routed_minutes, maps_url
        )

    def plan_for_distance(
        self,
        origin: str,
        destination: str,
        distance_km: float,
        fuel_percent: float = 100,
        routed_minutes: float | None = None,
        maps_url: str = "",
    ) -> CarTripPlan:
        """Plan for a known distance, without any I/O."""
        fuel_needed = self._profile.calculate_fuel(distance_km)
        if routed_minutes is not None:
            duration = int(routed_minutes)
        else:
            duration = int(distance_km / self._average_speed * 60)
        stops = self._profile.calculate_fuel_stops(distance_km, fuel_percent)
        fuel_search_url = ""
        if stops:
            fuel_search_url = fuel_station_search_url(
                f"E4 mot {destination}", self._profile.fuel_type
            )

        return CarTripPlan(
            origin=origin,
            destination=destination,
            profile=self._profile,
            distance_km=distance_km,
            duration_minutes=duration,
            starting_fuel_percent=fuel_percent,
            fuel_needed_liters=fuel_needed,
            fuel_cost_sek=fuel_needed * self._fuel_price,
            fuel_stops=tuple(stops),
            maps_url=maps_url or driving_directions_url(origin, destination),
            fuel_search_url=fuel_search_url,
        )
