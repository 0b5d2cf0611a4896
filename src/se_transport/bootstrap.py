"""Wiring of configuration, HTTP session, gateways and services."""

import logging
from typing import TYPE_CHECKING

from se_transport.adapters.config import AppConfig, VehicleProfileLoader
from se_transport.adapters.nominatim import NominatimGeocoder
from se_transport.adapters.osrm import OsrmRoadRouter
from se_transport.adapters.ourairports import OurAirportsRepository
from se_transport.adapters.resrobot_api import ResRobotTripPlanner
from se_transport.adapters.sl_api import SlDepartureRepository, SlTripPlanner
from se_transport.application.services import (
    AirportFinderService,
    CarTripService,
    DepartureBoardService,
    TaxiFareService,
    TripPlanningService,
)
from se_transport.domain.exceptions import ConfigurationError
from se_transport.domain.models.vehicle import VehicleProfile

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def load_vehicle_profile(config: AppConfig) -> VehicleProfile:
    """Vehicle profile from the config file, as a ConfigurationError when invalid."""
    try:
        return VehicleProfileLoader.load(config)
    except (ValueError, OSError) as e:
        raise ConfigurationError(f"invalid vehicle configuration: {e}") from e


class ServiceFactory:
    """Builds services for one command, all sharing one aiohttp session."""

    def __init__(self, config: AppConfig, session: "ClientSession") -> None:
        self._config = config
        self._session = session

    @property
    def config(self) -> AppConfig:
        return self._config

    def _geocoder(self) -> NominatimGeocoder:
        return NominatimGeocoder(self._session, self._config.geocoding_timeout)

    def _road_router(self) -> OsrmRoadRouter:
        return OsrmRoadRouter(self._session, self._config.routing_timeout)

    def trip_planning(
        self, nationwide: bool = False, language: str | None = None
    ) -> TripPlanningService:
        """SL for the Stockholm region, ResRobot for the whole country.

        Raises:
            ConfigurationError: If nationwide search is requested without an API key.
        """
        if nationwide:
            planner = ResRobotTripPlanner(
                self._session,
                self._config.tz,
                self._config.resrobot_api_key,
                self._config.resrobot_api_timeout,
            )
            return TripPlanningService(planner)
        return TripPlanningService(
            SlTripPlanner(
                self._session,
                self._config.tz,
                language or self._config.language,
                self._config.sl_api_timeout,
            )
        )

    def departure_board(self) -> DepartureBoardService:
        repository = SlDepartureRepository(self._session, self._config.sl_api_timeout)
        return DepartureBoardService(repository)

    def taxi_fares(self) -> TaxiFareService:
        return TaxiFareService(self._geocoder(), self._road_router())

    def airport_finder(self) -> AirportFinderService:
        repository = OurAirportsRepository(self._session, self._config.airports_timeout)
        return AirportFinderService(repository, self._geocoder())

    def car_trips(self) -> CarTripService:
        return CarTripService(
            load_vehicle_profile(self._config),
            self._geocoder(),
            self._road_router(),
            fuel_price_sek_per_liter=self._config.fuel_price_sek_per_liter,
            average_speed_kmh=self._config.average_speed_kmh,
        )
