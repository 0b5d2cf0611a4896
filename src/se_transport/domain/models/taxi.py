"""Taxi fare domain models."""

from dataclasses import dataclass

from se_transport.domain.models.location import RoadRoute


@dataclass(frozen=True)
class TaxiCompany:
    """Published meter rates for one taxi company."""

    name: str
    base_fee: float
    per_km_rate: float
    per_hour_rate: float
    booking_url: str = ""
    arlanda_fixed_price: float | None = None
    has_app_deep_link: bool = False

    def calculate_fare(self, distance_km: float, duration_minutes: float) -> float:
        """Metered fare: base fee plus distance and time components."""
        return (
            self.base_fee
            + distance_km * self.per_km_rate
            + (duration_minutes / 60) * self.per_hour_rate
        )


@dataclass(frozen=True)
class FareEstimate:
    """Estimated fare from one company for one route."""

    company: str
    estimated_sek: float
    fixed_price_sek: float | None = None
    booking_url: str = ""
    deep_link: str = ""

    @property
    def has_fixed_price(self) -> bool:
        return self.fixed_price_sek is not None and self.fixed_price_sek > 0


@dataclass(frozen=True)
class TaxiQuote:
    """A routed taxi trip with one estimate per company."""

    origin_address: str
    destination_address: str
    route: RoadRoute
    estimates: tuple[FareEstimate, ...]
