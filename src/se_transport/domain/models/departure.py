"""Departure and departure board domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from zoneinfo import ZoneInfo

from se_transport.domain.models.site import Site
from se_transport.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from a departure board.

    ``scheduled`` and ``expected`` are kept as the raw upstream strings,
    either "HH:MM:SS" or a full local ISO timestamp.
    """

    line: str
    destination: str
    scheduled: str
    expected: str
    mode: TransportMode
    platform: str | None = None
    display: str = ""
    state: str = ""
    messages: tuple[str, ...] = field(default_factory=tuple)

    @property
    def delayed(self) -> bool:
        """Whether the expected time string differs from the scheduled one."""
        return self.scheduled != self.expected

    def minutes_away(self, now: datetime, tz: ZoneInfo) -> int:
        """Whole minutes from ``now`` until the expected departure."""
        return minutes_until(self.expected, now, tz)


@dataclass(frozen=True)
class DepartureBoard:
    """Filtered departures for one resolved site."""

    site: Site
    departures: tuple[Departure, ...]
    mode: TransportMode | None = None
    towards: str = ""


def parse_departure_time(value: str, now: datetime, tz: ZoneInfo) -> datetime | None:
    """Parse an "HH:MM:SS" time-of-day (taken as today) or a local ISO timestamp."""
    if not value:
        return None
    if "T" in value:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=tz)
        return parsed.astimezone(tz)

    today = now.astimezone(tz).date()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            clock = datetime.strptime(value, fmt).time()
        except ValueError:
            continue
        return datetime.combine(today, clock, tzinfo=tz)
    return None


def minutes_until(expected: str, now: datetime, tz: ZoneInfo) -> int:
    """Minutes from now until ``expected``, clamped at 0.

    Unparseable input yields 0.
    """
    when = parse_departure_time(expected, now, tz)
    if when is None:
        return 0
    minutes = int((when - now).total_seconds() / 60)
    return max(0, minutes)


def clock_time(value: str) -> str:
    """Clock part ("HH:MM") of a departure time string, empty if there is none."""
    if "T" in value:
        return value[11:16] if len(value) >= 16 else ""
    return value[:5] if len(value) >= 5 else ""
