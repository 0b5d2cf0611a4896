"""Configuration adapters."""

from se_transport.adapters.config.app_config import AppConfig
from se_transport.adapters.config.vehicle_profile_loader import VehicleProfileLoader

__all__ = ["AppConfig", "VehicleProfileLoader"]
