"""Tests for the terminal and JSON formatters."""

import json
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from se_transport.adapters.formatters import (
    JsonFormatter,
    TripTextFormatter,
    format_bus_search,
    format_car_trip,
    format_departure_board,
    format_error,
    format_flight_search,
    format_nearby_airports,
    format_taxi_quote,
)
from se_transport.adapters.formatters.departures_text import format_time_until
from se_transport.adapters.formatters.layout import truncate
from se_transport.adapters.formatters.trip_text import format_duration
from se_transport.domain.models import (
    Airport,
    BookingLink,
    CarTripPlan,
    Departure,
    DepartureBoard,
    FareEstimate,
    FlightSearch,
    FuelStop,
    GeoLocation,
    Leg,
    NearbyAirport,
    RoadRoute,
    Site,
    StopRef,
    TaxiQuote,
    TransportMode,
    Trip,
    VehicleProfile,
)
from se_transport.domain.models.bus import BusCity, BusRoute, BusSearchResult

TZ = ZoneInfo("Europe/Stockholm")
NOW = datetime(2026, 3, 2, 7, 55, tzinfo=TZ)
START = datetime(2026, 3, 2, 8, 0, tzinfo=TZ)


@pytest.fixture
def trip() -> Trip:
    return Trip(
        legs=(
            Leg(
                origin=StopRef(name="Kista", platform="A", coordinates=(59.403, 17.944)),
                destination=StopRef(name="T-Centralen"),
                mode=TransportMode.METRO,
                scheduled_departure=START,
                scheduled_arrival=START + timedelta(minutes=16),
                realtime_departure=START + timedelta(minutes=2),
                line="11",
                direction="Kungsträdgården",
                operator="MTR",
            ),
            Leg(
                origin=StopRef(name="T-Centralen"),
                destination=StopRef(name="Stockholm City"),
                mode=TransportMode.WALK,
                scheduled_departure=START + timedelta(minutes=16),
                scheduled_arrival=START + timedelta(minutes=20),
                distance_meters=300,
            ),
            Leg(
                origin=StopRef(name="Stockholm City", platform="2"),
                destination=StopRef(name="Flemingsberg", platform="3"),
                mode=TransportMode.TRAIN,
                scheduled_departure=START + timedelta(minutes=22),
                scheduled_arrival=START + timedelta(minutes=40),
                line="41",
                direction="Södertälje centrum",
            ),
        ),
        total_duration=timedelta(minutes=40),
        provider="sl",
    )


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(5, "5 min"), (60, "1 h"), (135, "2 h 15 min")],
)
def test_format_duration(minutes: int, expected: str) -> None:
    """Given minute counts, when formatting duration, then hours appear from 60 minutes."""
    assert format_duration(minutes) == expected


def test_format_time_until_is_fixed_width() -> None:
    """Given various waits, when formatting, then every label has the same width."""
    labels = [format_time_until(m) for m in (0, 1, 9, 45, 60, 75)]
    assert labels[0].strip() == "Nu"
    assert labels[3] == "om 45 min"
    assert labels[5] == "om 1h15m "
    assert len({len(label) for label in labels}) == 1


def test_truncate() -> None:
    """Given a long text, when truncating, then the ellipsis fits within the limit."""
    assert truncate("Karolinska institutet", 10) == "Karolin..."
    assert truncate("Kista", 10) == "Kista"


def test_regional_text(trip: Trip) -> None:
    """Given an SL trip, when rendering regionally, then legs, changes and maps link appear."""
    text = TripTextFormatter(TZ).format_regional("Kista", "Flemingsberg", [trip], NOW)

    assert "Kista → Flemingsberg" in text
    assert "Resa 1" in text
    assert "40 min │ 1 byte" in text
    assert "🚇 11 → Kungsträdgården" in text
    assert "🚶 Gång 4 min" in text
    assert "Spår 3" in text
    assert "https://www.google.com/maps/dir/" in text


def test_regional_text_in_english(trip: Trip) -> None:
    """Given the English language, when rendering, then English labels are used."""
    text = TripTextFormatter(TZ, "en").format_regional("Kista", "Flemingsberg", [trip], NOW)
    assert "Trip 1" in text
    assert "1 change" in text


def test_nationwide_text(trip: Trip) -> None:
    """Given a trip, when rendering nationwide, then delays and walking distance appear."""
    text = TripTextFormatter(TZ).format_nationwide("Kista", "Flemingsberg", [trip])

    assert "08:00 (+2) → 08:40" in text
    assert "(40 min, 1 byte)" in text
    assert "🚶 Gå 300 m (4 min)" in text
    assert "[spår 2]" in text
    assert "(MTR)" in text
    assert "google.com/maps" not in text


def test_nationwide_text_prefers_realtime_track() -> None:
    """Given a changed track, when rendering nationwide, then the real-time track is shown."""
    leg = Leg(
        origin=StopRef(name="Stockholm Central", platform="3", realtime_platform="7"),
        destination=StopRef(name="Göteborg Central"),
        mode=TransportMode.TRAIN,
        scheduled_departure=START,
        scheduled_arrival=START + timedelta(hours=3),
        line="SJ 421",
        direction="Göteborg Central",
    )
    text = TripTextFormatter(TZ).format_nationwide("Stockholm", "Göteborg", [Trip(legs=(leg,))])

    assert "[spår 7]" in text
    assert "[spår 3]" not in text


def test_nationwide_text_without_trips() -> None:
    """Given no trips, when rendering nationwide, then a not-found line is shown."""
    text = TripTextFormatter(TZ).format_nationwide("A", "B", [Trip(legs=())])
    assert "Inga resor hittades." in text


def test_departure_board_text() -> None:
    """Given a filtered board, when rendering, then the mode name and platform appear."""
    board = DepartureBoard(
        site=Site(id=9192, name="Slussen"),
        departures=(
            Departure("17", "Skarpnäck", "08:00:00", "08:03:00", TransportMode.METRO, "2"),
        ),
        mode=TransportMode.METRO,
        towards="skarp",
    )
    text = format_departure_board(board, NOW, TZ)

    assert "Nästa tunnelbana från Slussen mot skarp" in text
    assert "om  8 min (08:03)" in text
    assert "Läge 2" in text


def test_empty_departure_board_text() -> None:
    """Given a board without departures, when rendering, then a not-found line is shown."""
    board = DepartureBoard(site=Site(id=1, name="Slussen"), departures=())
    text = format_departure_board(board, NOW, TZ)

    assert "Nästa avgång från Slussen" in text
    assert "Inga avgångar hittades." in text


def test_car_text_with_stops() -> None:
    """Given a plan with a fuel stop, when rendering, then the stop and search link appear."""
    plan = CarTripPlan(
        origin="Stockholm",
        destination="Malmö",
        profile=VehicleProfile(),
        distance_km=650,
        fuel_needed_liters=45.5,
        fuel_stops=(FuelStop(598.6, "three_quarters", 41.9, 8.7),),
        maps_url="https://maps.example/dir",
        fuel_search_url="https://maps.example/search",
    )
    text = format_car_trip(plan)

    assert "Avstånd:       650 km" in text
    assert "Tankstopp behövs (1 st)" in text
    assert "Efter ~599 km (ca 3/4 av vägen)" in text
    assert "https://maps.example/search" in text


def test_car_text_without_distance() -> None:
    """Given a plan without distance, when rendering, then consumption hints are shown."""
    plan = CarTripPlan(origin="A", destination="B", profile=VehicleProfile(), maps_url="x")
    text = format_car_trip(plan)

    assert "9.0 L/100km (< 20 km)" in text
    assert "Ange avstånd med -d <km>" in text


def test_taxi_text() -> None:
    """Given a quote, when rendering, then fixed prices and booking links appear."""
    here = GeoLocation("Kista", 59.40, 17.94)
    there = GeoLocation("Arlanda", 59.65, 17.92)
    quote = TaxiQuote(
        origin_address="Kista",
        destination_address="Arlanda",
        route=RoadRoute(here, there, 30000, 1500),
        estimates=(
            FareEstimate("Taxi Stockholm", 740.0, 700, "https://taxi.example"),
            FareEstimate("Uber", 400.0, deep_link="https://m.uber.com/ul/?x=1"),
        ),
    )
    text = format_taxi_quote(quote)

    assert "Avstånd:    30.0 km" in text
    assert "(fast pris: 700 kr)" in text
    assert "📱 Uber (app):" in text
    assert "🌐 Taxi Stockholm:" in text


def test_nearby_airports_text() -> None:
    """Given scheduled and other airports, when rendering, then both sections appear."""
    bromma = Airport(
        "1", "ESSB", "medium_airport", "Bromma", 59.35, 17.94, True, "BMA", municipality="Stockholm"
    )
    airports = [
        NearbyAirport(bromma, 7.2),
        NearbyAirport(Airport("2", "ESKS", "heliport", "Sabbatsberg", 59.34, 18.04), 1.1),
    ]
    text = format_nearby_airports("Stockholm", 100, airports)

    assert "Flygplatser inom 100 km från Stockholm" in text
    assert "Med reguljär trafik:" in text
    assert "BMA" in text
    assert "(Heliport)" in text


def test_flight_text_groups_links() -> None:
    """Given booking links, when rendering, then the route and every link appear."""
    search = FlightSearch("ARN", "GOT", "Stockholm", "Göteborg", date(2026, 12, 20))
    links = [
        BookingLink("Google Flights", "https://flights.example", "search"),
        BookingLink("SAS", "https://sas.example", "airline"),
    ]
    text = format_flight_search(search, links)

    assert "Stockholm (ARN)" in text
    assert "https://flights.example" in text
    assert "https://sas.example" in text


def test_bus_text() -> None:
    """Given bus offers, when rendering, then operators and prices appear."""
    origin = BusCity("stockholm", "Stockholm")
    destination = BusCity("göteborg", "Göteborg")
    route = BusRoute("FlixBus", "Stockholm", "Göteborg", "4-5 tim", 99, 299, "8-12/dag", "u")
    text = format_bus_search(BusSearchResult(origin, destination, (route,), "https://omio"))

    assert "FlixBus" in text
    assert " 99-299 kr" in text
    assert "Avgångar: 8-12/dag" in text


def test_json_trips_match_the_trip(trip: Trip) -> None:
    """Given a trip, when rendering JSON, then duration, changes and legs match it."""
    document = json.loads(JsonFormatter(TZ).format_trips("Kista", "Flemingsberg", [trip], NOW))

    assert document["type"] == "trip"
    assert document["timestamp"] == "2026-03-02T07:55:00+01:00"
    assert document["origin"] == "Kista"
    info = document["data"]["trips"][0]
    assert info["duration_minutes"] == trip.duration_minutes
    assert info["changes"] == trip.interchange_count
    assert len(info["legs"]) == len(trip.legs)
    assert info["departure"] == "08:00"
    assert info["legs"][0]["from"] == {
        "name": "Kista",
        "platform": "A",
        "lat": 59.403,
        "lon": 17.944,
    }
    assert "line" not in info["legs"][1]


def test_json_departures() -> None:
    """Given a board, when rendering JSON, then times are HH:MM and delay is flagged."""
    board = DepartureBoard(
        site=Site(id=9192, name="Slussen"),
        departures=(Departure("17", "Skarpnäck", "08:00:00", "08:03:00", TransportMode.METRO),),
    )
    document = json.loads(JsonFormatter(TZ).format_departures(board, NOW))

    departure = document["data"]["departures"][0]
    assert document["data"]["stop_name"] == "Slussen"
    assert departure["expected"] == "08:03"
    assert departure["minutes_away"] == 8
    assert departure["delayed"] is True
    assert "platform" not in departure


def test_json_car_without_stops() -> None:
    """Given a plan without stops, when rendering JSON, then fuel_stops is omitted."""
    plan = CarTripPlan("A", "B", VehicleProfile(), distance_km=10, maps_url="m")
    document = json.loads(JsonFormatter(TZ).format_car(plan, NOW))

    assert document["type"] == "car"
    assert document["data"]["distance_km"] == 10
    assert "fuel_stops" not in document["data"]


def test_json_flight_options() -> None:
    """Given all booking links, when rendering JSON, then the three flight options are listed."""
    search = FlightSearch("ARN", "GOT")
    links = [
        BookingLink(name, f"https://{name}.example", "x")
        for name in ("Google Flights", "SAS", "Norwegian", "TUI")
    ]
    document = json.loads(JsonFormatter(TZ).format_flight(search, links, NOW))

    flights = document["data"]["flights"]
    assert [f["airline"] for f in flights] == ["SAS", "Norwegian", "Google Flights"]
    assert [f["direct"] for f in flights] == [True, True, False]


def test_format_error() -> None:
    """Given a message, when rendering an error, then it is a single JSON object."""
    assert json.loads(format_error("no stops found")) == {"error": "no stops found"}
