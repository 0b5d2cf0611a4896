"""Vehicle profile loader."""

import logging

from se_transport.adapters.config.app_config import AppConfig
from se_transport.domain.models.vehicle import VehicleProfile

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = (
    "short_distance_rate",
    "long_distance_rate",
    "short_distance_km",
    "tank_size_liters",
    "reserve_percent",
)


class VehicleProfileLoader:
    """Builds the vehicle profile from the [vehicle] table of the config file."""

    @staticmethod
    def load(config: AppConfig) -> VehicleProfile:
        """Return the configured profile, or the default one if none is configured."""
        vehicle_data = config.load_toml_data().get("vehicle", {})
        if not isinstance(vehicle_data, dict) or not vehicle_data:
            return VehicleProfile()

        overrides: dict[str, str | float] = {}
        for key in ("name", "fuel_type"):
            if key in vehicle_data:
                overrides[key] = str(vehicle_data[key])

        for key in _NUMERIC_FIELDS:
            if key not in vehicle_data:
                continue
            try:
                value = float(vehicle_data[key])
            except (TypeError, ValueError) as e:
                raise ValueError(f"vehicle.{key} must be a number") from e
            if value <= 0 and key != "reserve_percent":
                raise ValueError(f"vehicle.{key} must be positive")
            overrides[key] = value

        if not 0 <= float(overrides.get("reserve_percent", 15.0)) < 100:
            raise ValueError("vehicle.reserve_percent must be between 0 and 100")

        profile = VehicleProfile(**overrides)  # type: ignore[arg-type]
        logger.debug(f"Loaded vehicle profile: {profile.name}")
        return profile
