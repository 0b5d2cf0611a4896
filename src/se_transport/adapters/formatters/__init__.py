"""Text and JSON renderings of planning results."""

from se_transport.adapters.formatters.airports_text import format_nearby_airports
from se_transport.adapters.formatters.bus_text import format_bus_search
from se_transport.adapters.formatters.car_text import format_car_trip
from se_transport.adapters.formatters.departures_text import format_departure_board
from se_transport.adapters.formatters.flight_text import format_flight_search
from se_transport.adapters.formatters.json_output import JsonFormatter, format_error
from se_transport.adapters.formatters.taxi_text import format_taxi_quote
from se_transport.adapters.formatters.trip_text import TripTextFormatter

__all__ = [
    "JsonFormatter",
    "TripTextFormatter",
    "format_bus_search",
    "format_car_trip",
    "format_departure_board",
    "format_error",
    "format_flight_search",
    "format_nearby_airports",
    "format_taxi_quote",
]
