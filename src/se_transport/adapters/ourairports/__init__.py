"""OurAirports static dataset adapter."""

from se_transport.adapters.ourairports.airport_repository import OurAirportsRepository

__all__ = ["OurAirportsRepository"]
