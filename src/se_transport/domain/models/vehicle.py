"""Vehicle profile and fuel stop domain models."""

from dataclasses import dataclass

SAFETY_FACTOR = 0.85
COAST_IN_KM = 50.0

# Fraction-of-journey buckets: (upper percent bound, label key)
_LOCATION_BUCKETS = (
    (30.0, "quarter"),
    (45.0, "third"),
    (55.0, "half"),
    (70.0, "two_thirds"),
)
_LAST_BUCKET = "three_quarters"

LOCATION_LABELS = {
    "sv": {
        "quarter": "ca 1/4 av vägen",
        "third": "ca 1/3 av vägen",
        "half": "halvvägs",
        "two_thirds": "ca 2/3 av vägen",
        "three_quarters": "ca 3/4 av vägen",
    },
    "en": {
        "quarter": "about 1/4",
        "third": "about 1/3",
        "half": "halfway",
        "two_thirds": "about 2/3",
        "three_quarters": "about 3/4",
    },
}


@dataclass(frozen=True)
class FuelStop:
    """A recommended refuelling point along a route."""

    at_km: float
    location: str  # bucket key, see LOCATION_LABELS
    fuel_used: float
    fuel_remaining: float

    def label(self, language: str = "sv") -> str:
        """Human description of where along the route the stop is."""
        labels = LOCATION_LABELS.get(language, LOCATION_LABELS["sv"])
        return labels[self.location]


@dataclass(frozen=True)
class VehicleProfile:
    """Fuel consumption data for one vehicle."""

    name: str = "VW Tiguan Allspace 2018"
    fuel_type: str = "Diesel"
    short_distance_rate: float = 9.0  # L/100km below the threshold
    long_distance_rate: float = 7.0  # L/100km at or above the threshold
    short_distance_km: float = 20.0
    tank_size_liters: float = 58.0
    reserve_percent: float = 15.0

    def fuel_rate(self, distance_km: float) -> float:
        """Consumption rate (L/100km) used for a trip of this total distance."""
        if distance_km < self.short_distance_km:
            return self.short_distance_rate
        return self.long_distance_rate

    def calculate_fuel(self, distance_km: float) -> float:
        """Litres needed for a trip, bucketed by its total distance."""
        return distance_km * self.fuel_rate(distance_km) / 100

    @property
    def usable_tank(self) -> float:
        """Litres available above the reserve."""
        return self.tank_size_liters * (100 - self.reserve_percent) / 100

    @property
    def max_range(self) -> float:
        """Kilometres on a full usable tank at the long-distance rate."""
        return self.usable_tank / self.long_distance_rate * 100

    @property
    def reserve_liters(self) -> float:
        return self.tank_size_liters * self.reserve_percent / 100

    def calculate_fuel_stops(
        self, total_distance_km: float, starting_fuel_percent: float = 100
    ) -> list[FuelStop]:
        """Plan where to refuel on a trip.

        Every range is shortened by the safety factor, and a stop that would
        land within 50 km of the destination is skipped.
        """
        if starting_fuel_percent <= 0:
            starting_fuel_percent = 100

        usable_range = self.max_range
        starting_range = usable_range * starting_fuel_percent / 100

        stops: list[FuelStop] = []
        if total_distance_km <= starting_range * SAFETY_FACTOR:
            return stops

        current_km = starting_range * SAFETY_FACTOR
        segment_start = 0.0

        while current_km < total_distance_km:
            if total_distance_km - current_km < COAST_IN_KM:
                break

            stops.append(
                FuelStop(
                    at_km=current_km,
                    location=_location_bucket(current_km / total_distance_km * 100),
                    fuel_used=self.calculate_fuel(current_km - segment_start),
                    fuel_remaining=self.reserve_liters,
                )
            )

            segment_start = current_km
            current_km += usable_range * SAFETY_FACTOR

        return stops


def _location_bucket(percent_complete: float) -> str:
    for upper, key in _LOCATION_BUCKETS:
        if percent_complete < upper:
            return key
    return _LAST_BUCKET
