"""Airport repository reading the OurAirports CSV dump.

Data: https://ourairports.com/data/ (public domain)
"""

import csv
import io
import logging
from typing import TYPE_CHECKING

from se_transport.adapters.http_json import fetch_text
from se_transport.domain.exceptions import UpstreamError
from se_transport.domain.models.airport import Airport
from se_transport.domain.ports.airport_repository import AirportRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

OURAIRPORTS_CSV_URL = "https://davidmegginson.github.io/ourairports-data/airports.csv"
REQUIRED_COLUMNS = (
    "id",
    "ident",
    "type",
    "name",
    "latitude_deg",
    "longitude_deg",
    "iso_country",
    "scheduled_service",
)


class OurAirportsRepository(AirportRepository):
    """Downloads the full dataset on each call and filters it by country."""

    def __init__(self, session: "ClientSession", timeout_seconds: float = 30) -> None:
        self._session = session
        self._timeout = timeout_seconds

    async def get_airports(self, country: str = "SE") -> list[Airport]:
        body = await fetch_text(
            self._session, OURAIRPORTS_CSV_URL, "OurAirports", timeout_seconds=self._timeout
        )
        airports = parse_airports_csv(body, country)
        logger.debug(f"Loaded {len(airports)} airport(s) for {country}")
        return airports


def parse_airports_csv(text: str, country: str = "SE") -> list[Airport]:
    """Parse the OurAirports CSV, keeping rows for one country in file order.

    Rows with unparseable coordinates are skipped.

    Raises:
        UpstreamError: If a required column is missing from the header.
    """
    reader = csv.DictReader(io.StringIO(text))
    missing = [column for column in REQUIRED_COLUMNS if column not in (reader.fieldnames or [])]
    if missing:
        raise UpstreamError(f"airports CSV is missing columns: {', '.join(missing)}")

    airports = []
    for row in reader:
        if row.get("iso_country") != country:
            continue
        try:
            latitude = float(row["latitude_deg"])
            longitude = float(row["longitude_deg"])
        except (TypeError, ValueError):
            logger.debug(f"Skipping airport {row.get('ident')!r} with bad coordinates")
            continue
        airports.append(
            Airport(
                id=row["id"],
                ident=row["ident"],
                type=row["type"],
                name=row["name"],
                latitude=latitude,
                longitude=longitude,
                scheduled_service=row["scheduled_service"] == "yes",
                iata_code=row.get("iata_code") or "",
                municipality=row.get("municipality") or "",
                country=row["iso_country"],
                region=row.get("iso_region") or "",
                elevation_ft=_as_int(row.get("elevation_ft")),
                gps_code=row.get("gps_code") or "",
                local_code=row.get("local_code") or "",
                home_link=row.get("home_link") or "",
                wikipedia_link=row.get("wikipedia_link") or "",
            )
        )
    return airports


def _as_int(value: str | None) -> int:
    try:
        return int(value) if value else 0
    except ValueError:
        return 0
