"""Taxi fare estimation for a geocoded and routed trip."""

import logging
from urllib.parse import urlencode

from se_transport.domain.models.location import GeoLocation, RoadRoute
from se_transport.domain.models.taxi import FareEstimate, TaxiCompany, TaxiQuote
from se_transport.domain.ports.geocoder import Geocoder
from se_transport.domain.ports.road_router import RoadRouter
from se_transport.domain.reference_data.taxi_companies import TAXI_COMPANIES

logger = logging.getLogger(__name__)

UBER_LINK_URL = "https://m.uber.com/ul/"
FIXED_PRICE_KEYWORD = "arlanda"


def touches_arlanda(route: RoadRoute, origin_address: str, destination_address: str) -> bool:
    """Whether either end names Arlanda, in the resolved name or the typed address."""
    texts = (
        route.origin.name,
        route.destination.name,
        origin_address,
        destination_address,
    )
    return any(FIXED_PRICE_KEYWORD in text.lower() for text in texts)


def uber_deep_link(destination: GeoLocation) -> str:
    """Uber app link with pickup at the current location."""
    params = {
        "action": "setPickup",
        "pickup": "my_location",
        "dropoff[latitude]": f"{destination.latitude:f}",
        "dropoff[longitude]": f"{destination.longitude:f}",
        "dropoff[nickname]": destination.name,
    }
    return f"{UBER_LINK_URL}?{urlencode(params)}"


def estimate_fares(
    route: RoadRoute,
    origin_address: str = "",
    destination_address: str = "",
    companies: tuple[TaxiCompany, ...] = TAXI_COMPANIES,
) -> list[FareEstimate]:
    """One metered estimate per company, in table order.

    Companies with an Arlanda fixed price also report it when the trip
    touches Arlanda.
    """
    arlanda = touches_arlanda(route, origin_address, destination_address)
    estimates = []
    for company in companies:
        fixed_price = company.arlanda_fixed_price if arlanda else None
        estimates.append(
            FareEstimate(
                company=company.name,
                estimated_sek=company.calculate_fare(route.distance_km, route.duration_minutes),
                fixed_price_sek=fixed_price,
                booking_url=company.booking_url,
                deep_link=uber_deep_link(route.destination) if company.has_app_deep_link else "",
            )
        )
    return estimates


class TaxiFareService:
    """Geocodes both addresses, routes between them and prices the trip."""

    def __init__(self, geocoder: Geocoder, road_router: RoadRouter) -> None:
        self._geocoder = geocoder
        self._road_router = road_router

    async def quote(self, origin_address: str, destination_address: str) -> TaxiQuote:
        origin = await self._geocoder.geocode(origin_address)
        destination = await self._geocoder.geocode(destination_address)
        route = await self._road_router.route(origin, destination)
        logger.info(
            f"Taxi route {origin.name} -> {destination.name}: "
            f"{route.distance_km:.1f} km, {route.duration_minutes:.0f} min"
        )
        return TaxiQuote(
            origin_address=origin_address,
            destination_address=destination_address,
            route=route,
            estimates=tuple(estimate_fares(route, origin_address, destination_address)),
        )
