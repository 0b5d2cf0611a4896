"""Parser for SL journey planner v2 trip responses."""

import logging
from datetime import timedelta
from typing import Any
from zoneinfo import ZoneInfo

from se_transport.adapters.line_designation import (
    extract_line_from_id,
    extract_trailing_number,
    parse_iso_timestamp,
)
from se_transport.adapters.sl_api.constants import (
    FOOTPATH_PRODUCT_NAME,
    PRODUCT_CLASS_FOOTPATH,
    PRODUCT_CLASS_MODES,
)
from se_transport.domain.models.site import StopCandidate
from se_transport.domain.models.transport_mode import TransportMode
from se_transport.domain.models.trip import Leg, StopRef, Trip

logger = logging.getLogger(__name__)

PROVIDER = "sl"


class JourneyParser:
    """Parses SL journey planner payloads into Trip objects."""

    @staticmethod
    def parse_journeys(journeys: list[dict[str, Any]], tz: ZoneInfo) -> list[Trip]:
        """Parse a list of raw journeys, keeping upstream order."""
        return [
            JourneyParser.parse_journey(journey, tz)
            for journey in journeys
            if isinstance(journey, dict)
        ]

    @staticmethod
    def parse_journey(journey: dict[str, Any], tz: ZoneInfo) -> Trip:
        """Parse one raw journey.

        The upstream interchange count is ignored; Trip derives its own.
        """
        raw_legs = journey.get("legs") or []
        legs = tuple(JourneyParser.parse_leg(leg, tz) for leg in raw_legs if isinstance(leg, dict))

        duration_seconds = _as_int(journey.get("tripRtDuration"))
        if duration_seconds <= 0:
            duration_seconds = max(_as_int(journey.get("tripDuration")), 0)
        return Trip(
            legs=legs,
            total_duration=timedelta(seconds=duration_seconds),
            provider=PROVIDER,
        )

    @staticmethod
    def parse_leg(leg: dict[str, Any], tz: ZoneInfo) -> Leg:
        """Parse one raw leg into a ride or walk Leg."""
        origin = leg.get("origin") or {}
        destination = leg.get("destination") or {}
        transportation = leg.get("transportation")

        is_walk = JourneyParser.is_walking(transportation)
        line = ""
        direction = ""
        category = ""
        operator = ""
        if is_walk:
            mode = TransportMode.WALK
        else:
            product = transportation.get("product") or {}
            mode = PRODUCT_CLASS_MODES.get(_as_int(product.get("class"), -1), TransportMode.UNKNOWN)
            line = JourneyParser.line_name(transportation)
            direction = JourneyParser.direction(transportation)
            category = product.get("name", "") or ""
            operator = (transportation.get("operator") or {}).get("name", "") or ""

        distance = leg.get("distance")
        return Leg(
            origin=JourneyParser.stop_ref(origin),
            destination=JourneyParser.stop_ref(destination),
            mode=mode,
            scheduled_departure=parse_iso_timestamp(origin.get("departureTimePlanned"), tz),
            scheduled_arrival=parse_iso_timestamp(destination.get("arrivalTimePlanned"), tz),
            realtime_departure=parse_iso_timestamp(origin.get("departureTimeEstimated"), tz),
            realtime_arrival=parse_iso_timestamp(destination.get("arrivalTimeEstimated"), tz),
            line=line,
            direction=direction,
            category=category,
            operator=operator,
            distance_meters=_as_int(distance) if is_walk and distance is not None else None,
            duration_seconds=_as_int(leg.get("duration")) if "duration" in leg else None,
        )

    @staticmethod
    def is_walking(transportation: dict[str, Any] | None) -> bool:
        """No vehicle, or a footpath product, means the leg is walked."""
        if not transportation:
            return True
        product = transportation.get("product")
        if not product:
            return False
        return (
            _as_int(product.get("class"), -1) == PRODUCT_CLASS_FOOTPATH
            or product.get("name") == FOOTPATH_PRODUCT_NAME
        )

    @staticmethod
    def line_name(transportation: dict[str, Any]) -> str:
        """Short line designator.

        Tries the trailing number of ``number``, then the structured id, then
        the product short name, the raw number and finally the full name.
        """
        number = transportation.get("number", "") or ""
        if number:
            line = extract_trailing_number(number)
            if line:
                return line

        line_id = transportation.get("id", "") or ""
        if line_id:
            line = extract_line_from_id(line_id)
            if line:
                return line

        short_name = (transportation.get("product") or {}).get("shortName", "")
        if short_name:
            return short_name
        if number:
            return number
        return transportation.get("name", "") or ""

    @staticmethod
    def direction(transportation: dict[str, Any]) -> str:
        """Destination text shown on the vehicle."""
        destination = transportation.get("destination") or {}
        return destination.get("disassembledName") or destination.get("name", "") or ""

    @staticmethod
    def stop_name(stop: dict[str, Any]) -> str:
        """Display name of a stop, using the parent stop for platforms."""
        parent = stop.get("parent")
        if stop.get("type") == "platform" and parent:
            return parent.get("disassembledName") or parent.get("name", "") or ""
        return stop.get("disassembledName") or stop.get("name", "") or ""

    @staticmethod
    def platform(stop: dict[str, Any]) -> str | None:
        """Platform from the stop properties, preferring the display name."""
        properties = stop.get("properties")
        if not isinstance(properties, dict):
            return None
        return properties.get("platformName") or properties.get("platform") or None

    @staticmethod
    def stop_ref(stop: dict[str, Any]) -> StopRef:
        return StopRef(
            name=JourneyParser.stop_name(stop),
            platform=JourneyParser.platform(stop),
            coordinates=_coordinates(stop.get("coord")),
        )

    @staticmethod
    def parse_stop_candidates(locations: list[dict[str, Any]]) -> list[StopCandidate]:
        """Parse stop-finder locations, keeping upstream relevance order."""
        candidates = []
        for location in locations:
            if not isinstance(location, dict) or not location.get("id"):
                continue
            candidates.append(
                StopCandidate(
                    id=str(location["id"]),
                    name=location.get("disassembledName") or location.get("name", ""),
                    coordinates=_coordinates(location.get("coord")),
                    weight=_as_int(location.get("matchQuality")),
                )
            )
        return candidates


def _coordinates(coord: Any) -> tuple[float, float] | None:
    """SL coordinates are [lat, lon]."""
    if not isinstance(coord, list) or len(coord) < 2:
        return None
    try:
        return (float(coord[0]), float(coord[1]))
    except (TypeError, ValueError):
        return None


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
