"""OSRM road routing adapter."""

from se_transport.adapters.osrm.road_router import OsrmRoadRouter

__all__ = ["OsrmRoadRouter"]
