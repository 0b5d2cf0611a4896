"""Parser for ResRobot v2.1 trip and location responses."""

import logging
import re
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from se_transport.adapters.line_designation import (
    extract_trailing_number,
    parse_date_time,
    parse_iso_duration,
)
from se_transport.adapters.resrobot_api.constants import (
    CATEGORY_MODES,
    CATEGORY_NAMES,
    WALK_LEG_TYPES,
)
from se_transport.domain.models.site import StopCandidate
from se_transport.domain.models.transport_mode import TransportMode
from se_transport.domain.models.trip import Leg, StopRef, Trip

logger = logging.getLogger(__name__)

PROVIDER = "resrobot"

# "Sundsvall Centralstation (Sundsvall kn)" -> "Sundsvall Centralstation"
_MUNICIPALITY_SUFFIX = re.compile(r"\s*\([^)]+\)\s*$")


def clean_stop_name(name: str) -> str:
    """Strip the trailing municipality suffix from a stop name."""
    return _MUNICIPALITY_SUFFIX.sub("", name).strip()


class TripParser:
    """Parses ResRobot payloads into Trip objects."""

    @staticmethod
    def parse_trips(data: dict[str, Any], tz: ZoneInfo) -> list[Trip]:
        """Parse the ``Trip`` array of a trip response, keeping upstream order."""
        trips = data.get("Trip") or []
        return [TripParser.parse_trip(trip, tz) for trip in trips if isinstance(trip, dict)]

    @staticmethod
    def parse_trip(trip: dict[str, Any], tz: ZoneInfo) -> Trip:
        raw_legs = (trip.get("LegList") or {}).get("Leg") or []
        if isinstance(raw_legs, dict):
            raw_legs = [raw_legs]
        legs = tuple(TripParser.parse_leg(leg, tz) for leg in raw_legs if isinstance(leg, dict))
        return Trip(
            legs=legs,
            total_duration=parse_iso_duration(trip.get("duration")),
            provider=PROVIDER,
        )

    @staticmethod
    def parse_leg(leg: dict[str, Any], tz: ZoneInfo) -> Leg:
        """Parse one leg; real-time times and tracks are kept separately."""
        origin = leg.get("Origin") or {}
        destination = leg.get("Destination") or {}
        is_walk = leg.get("type") in WALK_LEG_TYPES

        line = ""
        direction = ""
        category = ""
        operator = ""
        if is_walk:
            mode = TransportMode.WALK
        else:
            product = _first_product(leg.get("Product"))
            if product:
                category_code = product.get("catOut", "") or ""
                operator = product.get("operator", "") or ""
                line = product.get("line") or product.get("num") or leg.get("number") or ""
            else:
                category_code = leg.get("category", "") or ""
                operator = leg.get("operator", "") or ""
                line = leg.get("number", "") or ""
            category_code = category_code.strip().upper()
            if not line:
                name = leg.get("name", "") or ""
                line = extract_trailing_number(name) or name
            mode = CATEGORY_MODES.get(category_code, TransportMode.UNKNOWN)
            category = CATEGORY_NAMES.get(category_code, category_code)
            direction = leg.get("direction", "") or ""

        distance = leg.get("dist")
        duration = parse_iso_duration(leg.get("duration")) if leg.get("duration") else None
        return Leg(
            origin=TripParser.stop_ref(origin),
            destination=TripParser.stop_ref(destination),
            mode=mode,
            scheduled_departure=parse_date_time(origin.get("date"), origin.get("time"), tz),
            scheduled_arrival=parse_date_time(
                destination.get("date"), destination.get("time"), tz
            ),
            realtime_departure=TripParser._realtime(origin, tz),
            realtime_arrival=TripParser._realtime(destination, tz),
            line=line,
            direction=direction,
            category=category,
            operator=operator,
            distance_meters=int(distance) if is_walk and distance else None,
            duration_seconds=int(duration.total_seconds()) if duration else None,
        )

    @staticmethod
    def _realtime(stop: dict[str, Any], tz: ZoneInfo) -> datetime | None:
        rt_time = stop.get("rtTime")
        if not rt_time:
            return None
        return parse_date_time(stop.get("rtDate") or stop.get("date"), rt_time, tz)

    @staticmethod
    def stop_ref(stop: dict[str, Any]) -> StopRef:
        coordinates = None
        if stop.get("lat") is not None and stop.get("lon") is not None:
            coordinates = (float(stop["lat"]), float(stop["lon"]))
        return StopRef(
            name=clean_stop_name(stop.get("name", "") or ""),
            platform=stop.get("track") or None,
            realtime_platform=stop.get("rtTrack") or None,
            coordinates=coordinates,
        )

    @staticmethod
    def parse_stop_candidates(data: dict[str, Any]) -> list[StopCandidate]:
        """Parse a location.name response, keeping upstream relevance order."""
        candidates = []
        for item in data.get("stopLocationOrCoordLocation") or []:
            stop = item.get("StopLocation") if isinstance(item, dict) else None
            if not stop or not stop.get("id"):
                continue
            coordinates = None
            if stop.get("lat") is not None and stop.get("lon") is not None:
                coordinates = (float(stop["lat"]), float(stop["lon"]))
            candidates.append(
                StopCandidate(
                    id=str(stop["id"]),
                    name=stop.get("name", "") or "",
                    coordinates=coordinates,
                    weight=int(stop.get("weight") or 0),
                )
            )
        return candidates


def _first_product(product: Any) -> dict[str, Any] | None:
    """Product may be a single object or a list of them."""
    if isinstance(product, list):
        product = product[0] if product else None
    return product if isinstance(product, dict) and product else None
