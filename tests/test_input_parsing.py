"""Tests for parsing user-typed dates, times and routes."""

from datetime import date, datetime, time
from zoneinfo import ZoneInfo

import pytest

from se_transport.application.services.input_parsing import (
    build_search_time,
    capitalize_words,
    parse_clock,
    parse_date,
    parse_route,
)
from se_transport.domain.exceptions import InvalidInputError

TZ = ZoneInfo("Europe/Stockholm")
NOW = datetime(2026, 3, 2, 14, 37, 12, 500, tzinfo=TZ)


def test_parse_date_and_clock() -> None:
    """Given valid strings, when parsing, then date and time objects are returned."""
    assert parse_date("2026-12-24") == date(2026, 12, 24)
    assert parse_clock("07:45") == time(7, 45)


@pytest.mark.parametrize("value", ["24/12/2026", "2026-13-01", ""])
def test_parse_date_rejects_bad_input(value: str) -> None:
    """Given a malformed date, when parsing, then InvalidInputError is raised."""
    with pytest.raises(InvalidInputError, match="YYYY-MM-DD"):
        parse_date(value)


def test_parse_clock_rejects_bad_input() -> None:
    """Given a malformed time, when parsing, then InvalidInputError is raised."""
    with pytest.raises(InvalidInputError, match="HH:MM"):
        parse_clock("25:00")


def test_build_search_time_defaults_to_now() -> None:
    """Given no date or time, when building, then now is used without seconds."""
    assert build_search_time(NOW, None, None) == datetime(2026, 3, 2, 14, 37, tzinfo=TZ)


def test_build_search_time_date_keeps_time_of_day() -> None:
    """Given only a date, when building, then the current time of day is kept."""
    assert build_search_time(NOW, "2026-03-05", None) == datetime(2026, 3, 5, 14, 37, tzinfo=TZ)


def test_build_search_time_time_keeps_today() -> None:
    """Given only a time, when building, then today's date is kept."""
    assert build_search_time(NOW, None, "08:10") == datetime(2026, 3, 2, 8, 10, tzinfo=TZ)


def test_parse_route_plain_pair() -> None:
    """Given two words, when parsing a route, then they are origin and destination."""
    assert parse_route(["Stockholm", "Göteborg"]) == ("Stockholm", "Göteborg")


def test_parse_route_with_keywords() -> None:
    """Given from/to keywords in either language, when parsing, then multi-word names work."""
    assert parse_route(["från", "Stockholm", "C", "till", "Malmö"]) == ("Stockholm C", "Malmö")
    assert parse_route(["from", "Kista", "to", "Arlanda", "Terminal", "5"]) == (
        "Kista",
        "Arlanda Terminal 5",
    )


def test_parse_route_without_keywords_uses_first_and_last() -> None:
    """Given several words and no keywords, when parsing, then first and last are used."""
    assert parse_route(["Uppsala", "via", "Arlanda", "Stockholm"]) == ("Uppsala", "Stockholm")


def test_parse_route_needs_two_words() -> None:
    """Given a single word, when parsing a route, then InvalidInputError is raised."""
    with pytest.raises(InvalidInputError):
        parse_route(["Stockholm"])


def test_capitalize_words() -> None:
    """Given lower-case names and codes, when capitalizing, then codes are left alone."""
    assert capitalize_words("göteborg landvetter") == "Göteborg Landvetter"
    assert capitalize_words("ARN") == "ARN"
    assert capitalize_words("") == ""
