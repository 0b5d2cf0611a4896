"""Car trip plan domain model."""

from dataclasses import dataclass, field

from se_transport.domain.models.vehicle import FuelStop, VehicleProfile


@dataclass(frozen=True)
class CarTripPlan:
    """Fuel and cost plan for driving between two places.

    ``distance_km`` is None when no distance was given and none could be
    routed; only the vehicle profile can be shown then.
    """

    origin: str
    destination: str
    profile: VehicleProfile
    distance_km: float | None = None
    duration_minutes: int = 0
    starting_fuel_percent: float = 100
    fuel_needed_liters: float = 0.0
    fuel_cost_sek: float = 0.0
    fuel_stops: tuple[FuelStop, ...] = field(default_factory=tuple)
    maps_url: str = ""
    fuel_search_url: str = ""

    @property
    def fuel_rate(self) -> float:
        return self.profile.fuel_rate(self.distance_km or 0.0)
