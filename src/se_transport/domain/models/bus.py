"""Long-distance bus domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BusCity:
    """A city or airport served by long-distance bus operators."""

    key: str  # canonical lowercase key, e.g. "göteborg"
    name: str
    flixbus_id: str = ""
    vy_stop: str = ""
    is_airport: bool = False
    airport_code: str = ""


@dataclass(frozen=True)
class RouteInfo:
    """Typical duration, price and frequency for a city pair."""

    duration: str
    price_from: int
    price_to: int
    frequency: str
    has_vy: bool = False


@dataclass(frozen=True)
class BusRoute:
    """One operator's offer for a city pair."""

    operator: str
    origin: str
    destination: str
    duration: str
    price_from: int
    price_to: int
    frequency: str
    booking_url: str
    has_wifi: bool = True
    has_power: bool = True
    has_toilet: bool = True

    @property
    def price_range(self) -> str:
        return f"{self.price_from}-{self.price_to} SEK"


@dataclass(frozen=True)
class BusSearchResult:
    """Operator offers for a city pair, plus a comparison link."""

    origin: BusCity
    destination: BusCity
    routes: tuple[BusRoute, ...]
    comparison_url: str

    @property
    def involves_airport(self) -> bool:
        return self.origin.is_airport or self.destination.is_airport
