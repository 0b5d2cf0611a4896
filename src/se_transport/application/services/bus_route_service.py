"""Long-distance bus offers from the static operator tables."""

import logging
from datetime import date
from types import MappingProxyType
from urllib.parse import urlencode

from se_transport.domain.exceptions import InvalidInputError
from se_transport.domain.models.bus import BusCity, BusRoute, BusSearchResult
from se_transport.domain.reference_data.bus_network import lookup_city, lookup_route_info

logger = logging.getLogger(__name__)

FLIXBUS_SEARCH_URL = "https://shop.flixbus.se/search"
VY_BUSES_URL = "https://www.vy.se/en/traffic-and-routes/buses"
OMIO_SEARCH_URL = "https://www.omio.com/search-frontend/results"
FLYGBUSSARNA_URL = "https://www.flygbussarna.se/en"
FLYGBUSSARNA_AIRPORT_PATHS = MappingProxyType(
    {"ARN": "arlanda", "GOT": "landvetter", "BMA": "bromma", "MMX": "sturup"}
)

# Placeholder offer for FlixBus city pairs without route info
UNKNOWN_ROUTE_DURATION = "Varierande"
UNKNOWN_ROUTE_FREQUENCY = "Se hemsida"
UNKNOWN_ROUTE_PRICE = (99, 399)

# Vy is typically a little more expensive than the route baseline
VY_PRICE_MARKUP = (50, 100)

KNOWN_CITIES_HINT = "Stockholm, Göteborg, Malmö, Uppsala, Linköping"


def flixbus_url(origin: BusCity, destination: BusCity, ride_date: date | None = None) -> str:
    params = {
        "departureCity": origin.flixbus_id,
        "arrivalCity": destination.flixbus_id,
        "route": f"{origin.name}-{destination.name}",
    }
    if ride_date is not None:
        params["rideDate"] = ride_date.strftime("%d.%m.%Y")
    params.update(
        {
            "adult": "1",
            "_locale": "sv",
            "departureCountryCode": "SE",
            "arrivalCountryCode": "SE",
        }
    )
    return f"{FLIXBUS_SEARCH_URL}?{urlencode(params)}"


def flygbussarna_url(airport_code: str) -> str:
    path = FLYGBUSSARNA_AIRPORT_PATHS.get(airport_code)
    return f"{FLYGBUSSARNA_URL}/{path}" if path else FLYGBUSSARNA_URL


def omio_url(origin: str, destination: str) -> str:
    params = {"departurePosition": origin, "arrivalPosition": destination}
    return f"{OMIO_SEARCH_URL}?{urlencode(params)}"


def get_bus_routes(
    origin: BusCity, destination: BusCity, ride_date: date | None = None
) -> list[BusRoute]:
    """One offer per operator able to serve the pair: FlixBus, Vy, Flygbussarna."""
    info = lookup_route_info(origin, destination)
    routes = []

    if origin.flixbus_id and destination.flixbus_id:
        if info is not None:
            duration, frequency = info.duration, info.frequency
            price_from, price_to = info.price_from, info.price_to
        else:
            duration, frequency = UNKNOWN_ROUTE_DURATION, UNKNOWN_ROUTE_FREQUENCY
            price_from, price_to = UNKNOWN_ROUTE_PRICE
        routes.append(
            BusRoute(
                operator="FlixBus",
                origin=origin.name,
                destination=destination.name,
                duration=duration,
                price_from=price_from,
                price_to=price_to,
                frequency=frequency,
                booking_url=flixbus_url(origin, destination, ride_date),
            )
        )

    if info is not None and info.has_vy:
        routes.append(
            BusRoute(
                operator="Vy Bus4You",
                origin=origin.name,
                destination=destination.name,
                duration=info.duration,
                price_from=info.price_from + VY_PRICE_MARKUP[0],
                price_to=info.price_to + VY_PRICE_MARKUP[1],
                frequency=info.frequency,
                booking_url=VY_BUSES_URL,
            )
        )

    airport = origin if origin.is_airport else destination if destination.is_airport else None
    if airport is not None:
        routes.append(
            BusRoute(
                operator="Flygbussarna",
                origin=origin.name,
                destination=destination.name,
                duration="30-45 min",
                price_from=99,
                price_to=139,
                frequency="Var 10-15 min",
                booking_url=flygbussarna_url(airport.airport_code),
                has_toilet=False,
            )
        )

    return routes


def resolve_city(name: str) -> BusCity:
    """City record for a name.

    Raises:
        InvalidInputError: If the city is not in the bus network table.
    """
    city = lookup_city(name)
    if city is None:
        raise InvalidInputError(f"unknown city '{name}' (known: {KNOWN_CITIES_HINT}, ...)")
    return city


def search_bus_routes(
    origin: str, destination: str, ride_date: date | None = None
) -> BusSearchResult:
    origin_city = resolve_city(origin)
    destination_city = resolve_city(destination)
    routes = get_bus_routes(origin_city, destination_city, ride_date)
    logger.debug(f"{len(routes)} bus offer(s) for {origin_city.name} -> {destination_city.name}")
    return BusSearchResult(
        origin=origin_city,
        destination=destination_city,
        routes=tuple(routes),
        comparison_url=omio_url(origin_city.name, destination_city.name),
    )
