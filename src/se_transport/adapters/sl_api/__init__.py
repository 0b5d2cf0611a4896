"""SL (Stockholm regional transit) API adapters."""

from se_transport.adapters.sl_api.sl_departure_repository import SlDepartureRepository
from se_transport.adapters.sl_api.sl_trip_planner import SlTripPlanner

__all__ = ["SlDepartureRepository", "SlTripPlanner"]
