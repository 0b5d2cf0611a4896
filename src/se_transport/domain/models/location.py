"""Geocoded location and road route domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoLocation:
    """Best geocoding match for a free-text address."""

    name: str
    latitude: float
    longitude: float
    display_name: str = ""
    is_airport: bool = False

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class RoadRoute:
    """Driving route between two locations."""

    origin: GeoLocation
    destination: GeoLocation
    distance_meters: float
    duration_seconds: float

    @property
    def distance_km(self) -> float:
        return self.distance_meters / 1000

    @property
    def duration_minutes(self) -> float:
        return self.duration_seconds / 60
