"""Tests for flight search resolution and booking links."""

from datetime import date

import pytest

from se_transport.application.services.flight_links import (
    booking_links,
    build_flight_search,
    google_flights_url,
    norwegian_url,
    resolve_airport,
    skyscanner_url,
)
from se_transport.domain.exceptions import InvalidInputError
from se_transport.domain.models import FlightSearch

ROUND_TRIP = FlightSearch(
    origin_code="ARN",
    destination_code="GOT",
    departure_date=date(2026, 12, 20),
    return_date=date(2026, 12, 27),
)


def test_resolve_airport_by_city_or_code() -> None:
    """Given a city name or a code, when resolving, then an IATA code is returned."""
    assert resolve_airport("Stockholm") == "ARN"
    assert resolve_airport(" bromma ") == "BMA"
    assert resolve_airport("lhr") == "LHR"


def test_resolve_airport_unknown() -> None:
    """Given a place without an airport, when resolving, then InvalidInputError is raised."""
    with pytest.raises(InvalidInputError, match="unknown airport"):
        resolve_airport("Ankeborg")


def test_build_flight_search() -> None:
    """Given cities and dates, when building a search, then codes and names are set."""
    search = build_flight_search("stockholm", "göteborg", "2026-12-20", "2026-12-27")

    assert search.origin_code == "ARN"
    assert search.destination_code == "GOT"
    assert search.origin_city == "Stockholm"
    assert search.destination_city == "Göteborg"
    assert search.is_round_trip
    assert search.show_private is False


def test_build_flight_search_rejects_return_before_departure() -> None:
    """Given a return date before departure, when building, then InvalidInputError is raised."""
    with pytest.raises(InvalidInputError, match="return date"):
        build_flight_search("Stockholm", "Göteborg", "2026-12-27", "2026-12-20")


def test_google_flights_query() -> None:
    """Given a dated search, when building the Google link, then the query names the date."""
    url = google_flights_url(ROUND_TRIP)
    assert url.startswith("https://www.google.com/travel/flights?q=")
    assert url.endswith("flights%20from%20ARN%20to%20GOT%20on%20Dec%2020")


def test_skyscanner_round_trip_path() -> None:
    """Given a round trip, when building the Skyscanner link, then both dates are in the path."""
    assert skyscanner_url(ROUND_TRIP) == (
        "https://www.skyscanner.se/transport/flights/arn/got/261220/261227/"
    )


def test_norwegian_trip_type() -> None:
    """Given one-way and round trips, when building Norwegian links, then TripType differs."""
    one_way = FlightSearch(origin_code="ARN", destination_code="OSL")
    assert "TripType=1" in norwegian_url(one_way)
    assert "TripType=2" in norwegian_url(ROUND_TRIP)
    assert "D_Month=202612" in norwegian_url(ROUND_TRIP)


def test_booking_links_without_private() -> None:
    """Given a regular search, when listing links, then private operators are left out."""
    links = booking_links(ROUND_TRIP)

    assert {link.group for link in links} == {"search", "airline", "charter"}
    assert [link.name for link in links][:4] == ["Google Flights", "Skyscanner", "Momondo", "Kayak"]


def test_booking_links_with_private() -> None:
    """Given a search asking for private flights, when listing, then six more links appear."""
    search = FlightSearch(origin_code="BMA", destination_code="VBY", show_private=True)
    private = [link for link in booking_links(search) if link.group == "private"]

    assert [link.name for link in private] == [
        "Grafair (Bromma)",
        "PrivateFly",
        "Victor",
        "LunaJets",
        "HeliAir Sweden",
        "Helipady",
    ]
