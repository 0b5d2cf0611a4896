"""Airport domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Airport:
    """One airport, heliport or seaplane base from the static dataset."""

    id: str
    ident: str  # ICAO, e.g. "ESSA"
    type: str  # large_airport, medium_airport, small_airport, heliport, seaplane_base, closed
    name: str
    latitude: float
    longitude: float
    scheduled_service: bool = False
    iata_code: str = ""
    municipality: str = ""
    country: str = ""
    region: str = ""
    elevation_ft: int = 0
    gps_code: str = ""
    local_code: str = ""
    home_link: str = ""
    wikipedia_link: str = ""

    @property
    def closed(self) -> bool:
        """Permanently closed airports are marked by their type."""
        return self.type == "closed"

    @property
    def code(self) -> str:
        """IATA code when the airport has one, otherwise the ICAO ident."""
        return self.iata_code or self.ident


@dataclass(frozen=True)
class NearbyAirport:
    """An airport together with its distance from a query point."""

    airport: Airport
    distance_km: float
