"""Booking and search links for a flight between two airports."""

import logging
from datetime import date
from urllib.parse import quote, urlencode

from se_transport.application.services.input_parsing import capitalize_words, parse_date
from se_transport.domain.exceptions import InvalidInputError
from se_transport.domain.models.flight import BookingLink, FlightSearch
from se_transport.domain.reference_data.iata_codes import lookup_airport_code

logger = logging.getLogger(__name__)

GROUP_SEARCH = "search"
GROUP_AIRLINE = "airline"
GROUP_CHARTER = "charter"
GROUP_PRIVATE = "private"

CHARTER_CATEGORIES = "FlightHotel,Flight"


def google_flights_url(search: FlightSearch) -> str:
    query = f"flights from {search.origin_code} to {search.destination_code}"
    if search.departure_date:
        query += f" on {search.departure_date:%b} {search.departure_date.day}"
    return f"https://www.google.com/travel/flights?q={quote(query)}"


def skyscanner_url(search: FlightSearch) -> str:
    url = (
        "https://www.skyscanner.se/transport/flights/"
        f"{search.origin_code.lower()}/{search.destination_code.lower()}/"
    )
    if search.departure_date:
        url += f"{search.departure_date:%y%m%d}/"
        if search.return_date:
            url += f"{search.return_date:%y%m%d}/"
    return url


def _dated_path(base: str, search: FlightSearch) -> str:
    url = f"{base}/{search.origin_code}-{search.destination_code}"
    if search.departure_date:
        url += f"/{search.departure_date.isoformat()}"
        if search.return_date:
            url += f"/{search.return_date.isoformat()}"
    return url


def momondo_url(search: FlightSearch) -> str:
    return _dated_path("https://www.momondo.se/flight-search", search)


def kayak_url(search: FlightSearch) -> str:
    return _dated_path("https://www.kayak.se/flights", search)


def tui_url(search: FlightSearch) -> str:
    params = {
        "departureAirportCodes": search.origin_code,
        "destinationCodes": search.destination_code,
        "flexibleDays": "3",
    }
    if search.departure_date:
        params["departureDate"] = search.departure_date.isoformat()
    return f"https://www.tui.se/resa/sok/?{urlencode(params)}"


def _travel_group_url(host: str, search: FlightSearch) -> str:
    params = {
        "DepartureAirportCode": search.origin_code,
        "DestinationAirportCodes": search.destination_code,
        "CategoryCodes": CHARTER_CATEGORIES,
        "Adults": str(search.passengers),
    }
    if search.departure_date:
        params["DepartureDate"] = search.departure_date.isoformat()
    return f"https://{host}/resor/searchresult?{urlencode(params)}"


def apollo_url(search: FlightSearch) -> str:
    return _travel_group_url("www.apollo.se", search)


def ving_url(search: FlightSearch) -> str:
    return _travel_group_url("www.ving.se", search)


def ticket_url(search: FlightSearch) -> str:
    params = {
        "from": search.origin_code,
        "to": search.destination_code,
        "adults": str(search.passengers),
    }
    if search.departure_date:
        params["outDate"] = search.departure_date.isoformat()
        if search.return_date:
            params["inDate"] = search.return_date.isoformat()
    return f"https://www.ticket.se/flight/search?{urlencode(params)}"


def grafair_url() -> str:
    return "https://www.grafair.se/offertforfragan/"


def privatefly_url(search: FlightSearch) -> str:
    params = {
        "departure": search.origin_code,
        "arrival": search.destination_code,
        "pax": str(search.passengers),
    }
    if search.departure_date:
        params["date"] = search.departure_date.strftime("%d/%m/%Y")
    return f"https://www.privatefly.com/sv/privat-jet-priser/priser-offert.html?{urlencode(params)}"


def victor_url(search: FlightSearch) -> str:
    params = {"from": search.origin_code, "to": search.destination_code}
    return f"https://www.flyvictor.com/en-gb/quote/?{urlencode(params)}"


def lunajets_url(search: FlightSearch) -> str:
    params = {"departure_1": search.origin_code, "arrival_1": search.destination_code}
    if search.departure_date:
        params["date_1"] = search.departure_date.isoformat()
    return f"https://www.lunajets.com/en/instant-estimate/?{urlencode(params)}"


def heliair_url() -> str:
    return "https://heliair.se/boka/"


def helipady_url(search: FlightSearch) -> str:
    params = {"from": search.origin_code, "to": search.destination_code}
    return f"https://www.helipady.com/search?{urlencode(params)}"


def norwegian_url(search: FlightSearch) -> str:
    params = {
        "D_City": search.origin_code,
        "A_City": search.destination_code,
        "AdultCount": str(search.passengers),
        "TripType": "2" if search.is_round_trip else "1",
    }
    if search.departure_date:
        params["D_Day"] = search.departure_date.strftime("%d")
        params["D_Month"] = search.departure_date.strftime("%Y%m")
    if search.return_date:
        params["R_Day"] = search.return_date.strftime("%d")
        params["R_Month"] = search.return_date.strftime("%Y%m")
    return f"https://www.norwegian.com/se/booking/fly/low-fare/?{urlencode(params)}"


def sas_url(search: FlightSearch) -> str:
    params = {
        "from": search.origin_code,
        "to": search.destination_code,
        "adt": str(search.passengers),
    }
    if search.departure_date:
        params["out"] = search.departure_date.isoformat()
    if search.return_date:
        params["in"] = search.return_date.isoformat()
    return f"https://www.flysas.com/se-sv/book/flights?{urlencode(params)}"


def booking_links(search: FlightSearch) -> list[BookingLink]:
    """All links for a search, grouped and in display order.

    Private jet and helicopter operators are only included when the search
    asks for them.
    """
    links = [
        BookingLink("Google Flights", google_flights_url(search), GROUP_SEARCH),
        BookingLink("Skyscanner", skyscanner_url(search), GROUP_SEARCH),
        BookingLink("Momondo", momondo_url(search), GROUP_SEARCH),
        BookingLink("Kayak", kayak_url(search), GROUP_SEARCH),
        BookingLink("SAS", sas_url(search), GROUP_AIRLINE),
        BookingLink("Norwegian", norwegian_url(search), GROUP_AIRLINE),
        BookingLink("TUI", tui_url(search), GROUP_CHARTER),
        BookingLink("Apollo", apollo_url(search), GROUP_CHARTER),
        BookingLink("Ving", ving_url(search), GROUP_CHARTER),
        BookingLink("Ticket", ticket_url(search), GROUP_CHARTER),
    ]
    if search.show_private:
        links.extend(
            [
                BookingLink("Grafair (Bromma)", grafair_url(), GROUP_PRIVATE),
                BookingLink("PrivateFly", privatefly_url(search), GROUP_PRIVATE),
                BookingLink("Victor", victor_url(search), GROUP_PRIVATE),
                BookingLink("LunaJets", lunajets_url(search), GROUP_PRIVATE),
                BookingLink("HeliAir Sweden", heliair_url(), GROUP_PRIVATE),
                BookingLink("Helipady", helipady_url(search), GROUP_PRIVATE),
            ]
        )
    return links


def resolve_airport(city: str) -> str:
    """IATA code for a city, airport name or code.

    Raises:
        InvalidInputError: If the place has no known airport.
    """
    code = lookup_airport_code(city)
    if code is None:
        raise InvalidInputError(f"unknown airport or city: '{city}'")
    return code


def build_flight_search(
    origin: str,
    destination: str,
    departure_date: str | None = None,
    return_date: str | None = None,
    show_private: bool = False,
) -> FlightSearch:
    """Resolve both ends and the optional dates into a FlightSearch."""
    outbound: date | None = parse_date(departure_date) if departure_date else None
    inbound: date | None = parse_date(return_date) if return_date else None
    if inbound is not None and outbound is not None and inbound < outbound:
        raise InvalidInputError("return date is before the departure date")

    search = FlightSearch(
        origin_code=resolve_airport(origin),
        destination_code=resolve_airport(destination),
        origin_city=capitalize_words(origin),
        destination_city=capitalize_words(destination),
        departure_date=outbound,
        return_date=inbound,
        show_private=show_private,
    )
    logger.debug(f"Flight search {search.origin_code} -> {search.destination_code}")
    return search
