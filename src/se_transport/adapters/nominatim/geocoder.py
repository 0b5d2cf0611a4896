"""Geocoder backed by the public Nominatim search API.

API Documentation: https://nominatim.org/release-docs/latest/api/Search/
"""

import logging
from typing import TYPE_CHECKING, Any

from se_transport import __version__
from se_transport.adapters.http_json import fetch_json
from se_transport.domain.exceptions import StopNotFoundError, UpstreamError
from se_transport.domain.models.location import GeoLocation
from se_transport.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
USER_AGENT = f"se-transport/{__version__}"
LOCALITY_SUFFIX = ", Stockholm, Sweden"
COUNTRY_NAMES = ("sweden", "sverige")
AIRPORT_NAME_HINTS = ("arlanda", "bromma", "skavsta")


class NominatimGeocoder(Geocoder):
    """Resolves free-text addresses, biased towards Stockholm."""

    def __init__(self, session: "ClientSession", timeout_seconds: float = 10) -> None:
        self._session = session
        self._timeout = timeout_seconds

    async def geocode(self, address: str) -> GeoLocation:
        """Best match for an address.

        Raises:
            StopNotFoundError: If Nominatim has no match.
            UpstreamError: On HTTP or decode failure.
        """
        params = {
            "q": self.build_query(address),
            "format": "json",
            "limit": "1",
            "countrycodes": "se",
        }
        data = await fetch_json(
            self._session,
            NOMINATIM_SEARCH_URL,
            "Nominatim",
            params=params,
            headers={"User-Agent": USER_AGENT},
            timeout_seconds=self._timeout,
        )
        if not isinstance(data, list):
            raise UpstreamError("unexpected Nominatim response format")
        if not data:
            raise StopNotFoundError(address)
        return self.parse_result(data[0], address)

    @staticmethod
    def build_query(address: str) -> str:
        lowered = address.lower()
        if any(country in lowered for country in COUNTRY_NAMES):
            return address
        return f"{address}{LOCALITY_SUFFIX}"

    @staticmethod
    def parse_result(result: dict[str, Any], address: str) -> GeoLocation:
        display_name = result.get("display_name", "") or ""
        name = result.get("name") or display_name.split(",")[0].strip() or address
        try:
            latitude = float(result["lat"])
            longitude = float(result["lon"])
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"Nominatim result without coordinates for '{address}'") from e

        is_airport = (
            (result.get("class") == "aeroway" and result.get("type") == "aerodrome")
            or any(hint in name.lower() for hint in AIRPORT_NAME_HINTS)
        )
        return GeoLocation(
            name=name,
            latitude=latitude,
            longitude=longitude,
            display_name=display_name,
            is_airport=is_airport,
        )
