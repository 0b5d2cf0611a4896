"""Domain models for Swedish transport planning."""

from se_transport.domain.models.airport import Airport, NearbyAirport
from se_transport.domain.models.bus import BusCity, BusRoute, BusSearchResult, RouteInfo
from se_transport.domain.models.car_trip import CarTripPlan
from se_transport.domain.models.departure import Departure, DepartureBoard
from se_transport.domain.models.flight import BookingLink, FlightSearch
from se_transport.domain.models.location import GeoLocation, RoadRoute
from se_transport.domain.models.site import Site, StopCandidate
from se_transport.domain.models.taxi import FareEstimate, TaxiCompany, TaxiQuote
from se_transport.domain.models.transport_mode import TransportMode
from se_transport.domain.models.trip import Leg, StopRef, Trip
from se_transport.domain.models.vehicle import FuelStop, VehicleProfile

__all__ = [
    "Airport",
    "BookingLink",
    "BusCity",
    "BusRoute",
    "BusSearchResult",
    "CarTripPlan",
    "Departure",
    "DepartureBoard",
    "FareEstimate",
    "FlightSearch",
    "FuelStop",
    "GeoLocation",
    "Leg",
    "NearbyAirport",
    "RoadRoute",
    "RouteInfo",
    "Site",
    "StopCandidate",
    "StopRef",
    "TaxiCompany",
    "TaxiQuote",
    "TransportMode",
    "Trip",
    "VehicleProfile",
]
