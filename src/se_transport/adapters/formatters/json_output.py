"""JSON envelope and payload models for machine-readable output."""

from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from se_transport.domain.deep_links import transit_directions_url
from se_transport.domain.models.bus import BusSearchResult
from se_transport.domain.models.car_trip import CarTripPlan
from se_transport.domain.models.departure import DepartureBoard, clock_time
from se_transport.domain.models.flight import BookingLink, FlightSearch
from se_transport.domain.models.taxi import TaxiQuote
from se_transport.domain.models.trip import Leg, StopRef, Trip

# Links reported as flight options, and whether they sell direct flights
FLIGHT_OPTIONS = (("SAS", True), ("Norwegian", True), ("Google Flights", False))


class JsonEnvelope(BaseModel):
    """Common wrapper for every JSON result."""

    model_config = ConfigDict(frozen=True)

    type: str
    timestamp: str
    origin: str | None = None
    destination: str | None = None
    data: Any


class StopInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    platform: str | None = None
    lat: float | None = None
    lon: float | None = None


class LegInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode: str
    line: str | None = None
    direction: str | None = None
    from_stop: StopInfo = Field(alias="from")
    to_stop: StopInfo = Field(alias="to")
    departure: str
    arrival: str
    duration_minutes: int


class TripInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    departure: str
    arrival: str
    duration_minutes: int
    changes: int
    legs: list[LegInfo]
    google_maps_url: str | None = None


class TripResult(BaseModel):
    trips: list[TripInfo]


class DepartureInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: str
    destination: str
    departure: str
    expected: str
    minutes_away: int
    platform: str | None = None
    mode: str
    delayed: bool


class DeparturesResult(BaseModel):
    stop_name: str
    departures: list[DepartureInfo]


class FuelStopInfo(BaseModel):
    name: str
    at_km: float
    fuel_level_percent: float


class CarResult(BaseModel):
    distance_km: float
    duration_minutes: int
    fuel_needed_liters: float
    fuel_cost_sek: float
    google_maps_url: str
    fuel_stops: list[FuelStopInfo] | None = None


class FlightOption(BaseModel):
    airline: str
    from_airport: str
    to_airport: str
    booking_url: str
    direct: bool


class FlightResult(BaseModel):
    flights: list[FlightOption]


class TaxiEstimateInfo(BaseModel):
    company: str
    estimated_sek: float
    fixed_price_sek: float | None = None
    booking_url: str | None = None
    deep_link: str | None = None


class TaxiResult(BaseModel):
    distance_km: float
    duration_minutes: int
    estimates: list[TaxiEstimateInfo]


class BusRouteInfo(BaseModel):
    operator: str
    departure: str = ""
    arrival: str = ""
    duration: str
    price: str
    booking_url: str


class BusResult(BaseModel):
    routes: list[BusRouteInfo]


class JsonFormatter:
    """Builds JSON documents in the common envelope.

    Times are rendered as local "HH:MM" strings in the configured timezone.
    """

    def __init__(self, tz: ZoneInfo) -> None:
        self._tz = tz

    def _clock(self, value: datetime | None) -> str:
        return value.astimezone(self._tz).strftime("%H:%M") if value else ""

    def _envelope(
        self,
        result_type: str,
        data: BaseModel,
        now: datetime,
        origin: str | None = None,
        destination: str | None = None,
    ) -> str:
        envelope = JsonEnvelope(
            type=result_type,
            timestamp=now.astimezone(self._tz).isoformat(timespec="seconds"),
            origin=origin or None,
            destination=destination or None,
            data=data.model_dump(by_alias=True, exclude_none=True),
        )
        return envelope.model_dump_json(indent=2, exclude_none=True)

    @staticmethod
    def _stop(stop: StopRef) -> StopInfo:
        lat, lon = stop.coordinates if stop.coordinates else (None, None)
        return StopInfo(name=stop.name, platform=stop.current_platform, lat=lat, lon=lon)

    def _leg(self, leg: Leg) -> LegInfo:
        return LegInfo(
            mode=leg.mode.value,
            line=leg.line or None,
            direction=leg.direction or None,
            from_stop=self._stop(leg.origin),
            to_stop=self._stop(leg.destination),
            departure=self._clock(leg.scheduled_departure),
            arrival=self._clock(leg.scheduled_arrival),
            duration_minutes=leg.duration_minutes,
        )

    def trip_info(self, trip: Trip, include_maps_url: bool = True) -> TripInfo:
        first = trip.legs[0] if trip.legs else None
        last = trip.legs[-1] if trip.legs else None
        return TripInfo(
            departure=self._clock(first.scheduled_departure) if first else "",
            arrival=self._clock(last.scheduled_arrival) if last else "",
            duration_minutes=trip.duration_minutes,
            changes=trip.interchange_count,
            legs=[self._leg(leg) for leg in trip.legs],
            google_maps_url=(transit_directions_url(trip) or None) if include_maps_url else None,
        )

    def format_trips(
        self, origin: str, destination: str, trips: list[Trip], now: datetime
    ) -> str:
        result = TripResult(trips=[self.trip_info(trip) for trip in trips])
        return self._envelope("trip", result, now, origin, destination)

    def format_departures(self, board: DepartureBoard, now: datetime) -> str:
        departures = [
            DepartureInfo(
                line=departure.line,
                destination=departure.destination,
                departure=clock_time(departure.scheduled),
                expected=clock_time(departure.expected),
                minutes_away=departure.minutes_away(now, self._tz),
                platform=departure.platform,
                mode=departure.mode.value,
                delayed=departure.delayed,
            )
            for departure in board.departures
        ]
        result = DeparturesResult(stop_name=board.site.name, departures=departures)
        return self._envelope("departures", result, now, origin=board.site.name)

    def format_car(self, plan: CarTripPlan, now: datetime, language: str = "sv") -> str:
        tank = plan.profile.tank_size_liters
        stops = [
            FuelStopInfo(
                name=stop.label(language),
                at_km=stop.at_km,
                fuel_level_percent=stop.fuel_remaining / tank * 100,
            )
            for stop in plan.fuel_stops
        ]
        result = CarResult(
            distance_km=plan.distance_km or 0.0,
            duration_minutes=plan.duration_minutes,
            fuel_needed_liters=plan.fuel_needed_liters,
            fuel_cost_sek=plan.fuel_cost_sek,
            google_maps_url=plan.maps_url,
            fuel_stops=stops or None,
        )
        return self._envelope("car", result, now, plan.origin, plan.destination)

    def format_flight(self, search: FlightSearch, links: list[BookingLink], now: datetime) -> str:
        urls = {link.name: link.url for link in links}
        flights = [
            FlightOption(
                airline=name,
                from_airport=search.origin_code,
                to_airport=search.destination_code,
                booking_url=urls[name],
                direct=direct,
            )
            for name, direct in FLIGHT_OPTIONS
            if name in urls
        ]
        return self._envelope(
            "flight",
            FlightResult(flights=flights),
            now,
            search.origin_code,
            search.destination_code,
        )

    def format_taxi(self, quote: TaxiQuote, now: datetime) -> str:
        estimates = [
            TaxiEstimateInfo(
                company=estimate.company,
                estimated_sek=estimate.estimated_sek,
                fixed_price_sek=estimate.fixed_price_sek if estimate.has_fixed_price else None,
                booking_url=estimate.booking_url or None,
                deep_link=estimate.deep_link or None,
            )
            for estimate in quote.estimates
        ]
        result = TaxiResult(
            distance_km=quote.route.distance_km,
            duration_minutes=int(quote.route.duration_minutes),
            estimates=estimates,
        )
        return self._envelope(
            "taxi", result, now, quote.origin_address, quote.destination_address
        )

    def format_bus(self, search: BusSearchResult, now: datetime) -> str:
        routes = [
            BusRouteInfo(
                operator=route.operator,
                duration=route.duration,
                price=route.price_range,
                booking_url=route.booking_url,
            )
            for route in search.routes
        ]
        return self._envelope(
            "bus", BusResult(routes=routes), now, search.origin.name, search.destination.name
        )


class ErrorResult(BaseModel):
    error: str


def format_error(message: str) -> str:
    return ErrorResult(error=message).model_dump_json()
