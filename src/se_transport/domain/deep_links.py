"""Google Maps deep links for trips, drives and fuel searches."""

from urllib.parse import urlencode

from se_transport.domain.models.trip import StopRef, Trip

GOOGLE_MAPS_DIR_URL = "https://www.google.com/maps/dir/"
GOOGLE_MAPS_SEARCH_URL = "https://www.google.com/maps/search/"


def _stop_param(stop: StopRef) -> str:
    if stop.coordinates:
        lat, lon = stop.coordinates
        return f"{lat:f},{lon:f}"
    return stop.name


def transit_directions_url(trip: Trip) -> str:
    """Transit directions from the first leg's origin to the last leg's destination.

    Transfer points become waypoints. Returns "" for a trip without legs.
    """
    if not trip.legs:
        return ""
    params = {
        "api": "1",
        "origin": _stop_param(trip.legs[0].origin),
        "destination": _stop_param(trip.legs[-1].destination),
        "travelmode": "transit",
    }
    waypoints = [_stop_param(leg.destination) for leg in trip.legs[:-1]]
    waypoints = [waypoint for waypoint in waypoints if waypoint]
    if waypoints:
        params["waypoints"] = "|".join(waypoints)
    return f"{GOOGLE_MAPS_DIR_URL}?{urlencode(params)}"


def driving_directions_url(origin: str, destination: str) -> str:
    params = {
        "api": "1",
        "origin": origin,
        "destination": destination,
        "travelmode": "driving",
    }
    return f"{GOOGLE_MAPS_DIR_URL}?{urlencode(params)}"


def fuel_station_search_url(near: str, fuel_type: str) -> str:
    """Search for stations selling ``fuel_type`` near a place description."""
    params = {"api": "1", "query": f"{fuel_type} tankstation nära {near}"}
    return f"{GOOGLE_MAPS_SEARCH_URL}?{urlencode(params)}"
