"""Application services composing the domain ports."""

from se_transport.application.services.airport_finder import AirportFinderService
from se_transport.application.services.car_trip_service import CarTripService
from se_transport.application.services.departure_board_service import DepartureBoardService
from se_transport.application.services.taxi_fare_service import TaxiFareService
from se_transport.application.services.trip_planning_service import TripPlanningService

__all__ = [
    "AirportFinderService",
    "CarTripService",
    "DepartureBoardService",
    "TaxiFareService",
    "TripPlanningService",
]
