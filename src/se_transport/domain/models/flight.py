"""Flight search domain model."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FlightSearch:
    """A flight search between two airports, used to build booking links."""

    origin_code: str
    destination_code: str
    origin_city: str = ""
    destination_city: str = ""
    departure_date: date | None = None
    return_date: date | None = None
    passengers: int = 1
    show_private: bool = False

    @property
    def is_round_trip(self) -> bool:
        return self.return_date is not None


@dataclass(frozen=True)
class BookingLink:
    """A named deep link to a booking or search site."""

    name: str
    url: str
    group: str  # "search", "airline", "charter", "private"
