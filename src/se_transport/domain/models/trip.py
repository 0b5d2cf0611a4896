"""Trip, leg and stop reference domain models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from se_transport.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class StopRef:
    """A physical stop or platform a leg starts or ends at."""

    name: str
    platform: str | None = None
    realtime_platform: str | None = None
    coordinates: tuple[float, float] | None = None  # (lat, lon)

    @property
    def current_platform(self) -> str | None:
        """Real-time platform if reported, otherwise the scheduled one."""
        return self.realtime_platform or self.platform


@dataclass(frozen=True)
class Leg:
    """One uninterrupted segment of travel, either a ride or a walk.

    Times are None when the upstream value was missing or unparseable.
    Real-time times are None when the provider reported no live data,
    which is not the same as being on time.
    """

    origin: StopRef
    destination: StopRef
    mode: TransportMode
    scheduled_departure: datetime | None = None
    scheduled_arrival: datetime | None = None
    realtime_departure: datetime | None = None
    realtime_arrival: datetime | None = None
    line: str = ""
    direction: str = ""
    category: str = ""
    operator: str = ""
    distance_meters: int | None = None
    duration_seconds: int | None = None

    @property
    def is_walk(self) -> bool:
        """Whether this leg is walked rather than ridden."""
        return self.mode == TransportMode.WALK

    @property
    def departure(self) -> datetime | None:
        """Best known departure time (real-time first)."""
        return self.realtime_departure or self.scheduled_departure

    @property
    def arrival(self) -> datetime | None:
        """Best known arrival time (real-time first)."""
        return self.realtime_arrival or self.scheduled_arrival

    @property
    def departure_delay_minutes(self) -> int:
        """Real-time delay at departure in rounded minutes, 0 without live data."""
        if self.realtime_departure is None or self.scheduled_departure is None:
            return 0
        return round((self.realtime_departure - self.scheduled_departure).total_seconds() / 60)

    @property
    def arrival_delay_minutes(self) -> int:
        """Real-time delay at arrival in rounded minutes, 0 without live data."""
        if self.realtime_arrival is None or self.scheduled_arrival is None:
            return 0
        return round((self.realtime_arrival - self.scheduled_arrival).total_seconds() / 60)

    @property
    def duration(self) -> timedelta:
        """Leg duration, from upstream seconds or derived from the times."""
        if self.duration_seconds is not None:
            return timedelta(seconds=self.duration_seconds)
        if self.scheduled_departure and self.scheduled_arrival:
            return self.scheduled_arrival - self.scheduled_departure
        return timedelta(0)

    @property
    def duration_minutes(self) -> int:
        """Leg duration in whole minutes."""
        return int(self.duration.total_seconds() // 60)


@dataclass(frozen=True)
class Trip:
    """A complete journey from an origin to a destination."""

    legs: tuple[Leg, ...]
    total_duration: timedelta = timedelta(0)
    provider: str = ""
    notes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def interchange_count(self) -> int:
        """Transfers between non-walking legs, never trusted from upstream."""
        walks = sum(1 for leg in self.legs if leg.is_walk)
        return max(0, len(self.legs) - walks - 1)

    @property
    def origin(self) -> StopRef | None:
        """Where the first leg starts."""
        return self.legs[0].origin if self.legs else None

    @property
    def destination(self) -> StopRef | None:
        """Where the last leg ends."""
        return self.legs[-1].destination if self.legs else None

    @property
    def departure(self) -> datetime | None:
        """Best known departure time of the first leg."""
        return self.legs[0].departure if self.legs else None

    @property
    def arrival(self) -> datetime | None:
        """Best known arrival time of the last leg."""
        return self.legs[-1].arrival if self.legs else None

    @property
    def duration_minutes(self) -> int:
        """Total duration in whole minutes."""
        return int(self.total_duration.total_seconds() // 60)
