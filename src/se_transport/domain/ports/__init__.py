"""Domain ports (interfaces) for transport data providers."""

from se_transport.domain.ports.airport_repository import AirportRepository
from se_transport.domain.ports.departure_repository import DepartureRepository
from se_transport.domain.ports.geocoder import Geocoder
from se_transport.domain.ports.road_router import RoadRouter
from se_transport.domain.ports.trip_planner import TripPlanner

__all__ = [
    "AirportRepository",
    "DepartureRepository",
    "Geocoder",
    "RoadRouter",
    "TripPlanner",
]
