"""Parser for SL transport API sites and departures."""

import logging
from typing import Any

from se_transport.adapters.sl_api.constants import DEPARTURE_MODES
from se_transport.domain.models.departure import Departure
from se_transport.domain.models.site import Site
from se_transport.domain.models.transport_mode import TransportMode

logger = logging.getLogger(__name__)


class DepartureParser:
    """Parses SL transport API responses into Site and Departure objects."""

    @staticmethod
    def parse_departures(departures: list[dict[str, Any]]) -> list[Departure]:
        """Parse raw departures, keeping upstream order.

        Records with missing times are kept; their time strings stay empty.
        """
        results = []
        for dep in departures:
            if not isinstance(dep, dict):
                logger.debug(f"Skipping non-object departure record: {dep!r}")
                continue
            results.append(DepartureParser._parse_departure(dep))
        return results

    @staticmethod
    def _parse_departure(dep: dict[str, Any]) -> Departure:
        line = dep.get("line") or {}
        stop_point = dep.get("stop_point") or {}
        mode_code = str(line.get("transport_mode", "") or "").upper()

        messages = [
            str(deviation.get("message", ""))
            for deviation in dep.get("deviations") or []
            if isinstance(deviation, dict) and deviation.get("message")
        ]

        return Departure(
            line=str(line.get("designation", "") or ""),
            destination=dep.get("destination", "") or "",
            scheduled=dep.get("scheduled", "") or "",
            expected=dep.get("expected", "") or "",
            mode=DEPARTURE_MODES.get(mode_code, TransportMode.UNKNOWN),
            platform=stop_point.get("designation") or None,
            display=dep.get("display", "") or "",
            state=dep.get("state", "") or "",
            messages=tuple(messages),
        )

    @staticmethod
    def parse_sites(sites: list[dict[str, Any]]) -> list[Site]:
        """Parse the full site list."""
        results = []
        for raw in sites:
            if not isinstance(raw, dict) or raw.get("id") is None:
                continue
            try:
                site_id = int(raw["id"])
            except (TypeError, ValueError):
                logger.debug(f"Skipping site with non-numeric id: {raw.get('id')!r}")
                continue
            results.append(
                Site(
                    id=site_id,
                    name=raw.get("name", "") or "",
                    aliases=tuple(raw.get("alias") or ()),
                    abbreviation=raw.get("abbreviation", "") or "",
                    latitude=float(raw.get("lat") or 0.0),
                    longitude=float(raw.get("lon") or 0.0),
                )
            )
        return results
