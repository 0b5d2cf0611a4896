"""MCP server exposing the transport planners as tools.

Uses FastMCP from the official MCP Python SDK. Every tool opens its own
aiohttp session, awaits its gateway calls in order and returns the Swedish
text rendering. Planning failures are raised as ToolError so the client
receives an error result.
"""

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import TypeVar

import aiohttp
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from se_transport.adapters.config import AppConfig
from se_transport.adapters.formatters import (
    TripTextFormatter,
    format_bus_search,
    format_car_trip,
    format_departure_board,
    format_nearby_airports,
    format_taxi_quote,
)
from se_transport.application.services.bus_route_service import search_bus_routes
from se_transport.application.services.input_parsing import build_search_time, parse_date
from se_transport.application.services.mode_aliases import normalize_mode
from se_transport.bootstrap import ServiceFactory
from se_transport.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

SERVER_NAME = "transport"

T = TypeVar("T")


def create_server(config: AppConfig) -> FastMCP:
    """Build the FastMCP server with all transport tools registered."""
    server = FastMCP(name=SERVER_NAME)

    async def with_factory(action: Callable[[ServiceFactory], Awaitable[T]]) -> T:
        async with aiohttp.ClientSession() as session:
            try:
                return await action(ServiceFactory(config, session))
            except TransportError as e:
                logger.info(f"Tool call failed: {e}")
                raise ToolError(str(e)) from e

    @server.tool()
    async def plan_trip(
        origin: str,
        destination: str,
        time: str | None = None,
        date: str | None = None,
        arrive_by: bool = False,
        nationwide: bool = False,
    ) -> str:
        """Plan a public transport trip in Sweden.

        Uses SL for the Stockholm region and ResRobot for nationwide trips.
        Time is HH:MM and date is YYYY-MM-DD; both default to now.
        """

        async def action(factory: ServiceFactory) -> str:
            now = datetime.now(config.tz)
            when = build_search_time(now, date, time)
            trips = await factory.trip_planning(nationwide=nationwide).plan(
                origin, destination, when=when, arrive_by=arrive_by
            )
            formatter = TripTextFormatter(config.tz, config.language)
            if nationwide:
                return formatter.format_nationwide(origin, destination, trips)
            if not trips:
                return "Inga resor hittades."
            return formatter.format_regional(origin, destination, trips, now)

        return await with_factory(action)

    @server.tool()
    async def next_departures(
        location: str,
        mode: str | None = None,
        towards: str | None = None,
        count: int = 3,
    ) -> str:
        """Real-time next departures from a stop in Stockholm (SL).

        Mode is one of bus, metro, train, tram or ship (Swedish names work too).
        """

        async def action(factory: ServiceFactory) -> str:
            transport_mode = normalize_mode(mode) if mode else None
            board = await factory.departure_board().get_board(
                location, transport_mode, towards or "", count
            )
            return format_departure_board(board, datetime.now(config.tz), config.tz)

        return await with_factory(action)

    @server.tool()
    async def taxi_estimate(from_address: str, to_address: str) -> str:
        """Estimate taxi fares between two addresses in Sweden."""

        async def action(factory: ServiceFactory) -> str:
            quote = await factory.taxi_fares().quote(from_address, to_address)
            return format_taxi_quote(quote)

        return await with_factory(action)

    @server.tool()
    async def car_directions(
        from_location: str,
        to_location: str,
        distance_km: float | None = None,
        fuel_percent: float = 100,
    ) -> str:
        """Car trip with fuel consumption and refuelling stops.

        Without distance_km the distance is routed via OpenStreetMap.
        """

        async def action(factory: ServiceFactory) -> str:
            plan = await factory.car_trips().plan(
                from_location, to_location, distance_km, fuel_percent
            )
            return format_car_trip(plan, config.language)

        return await with_factory(action)

    @server.tool()
    async def nearby_airports(
        location: str = "Stockholm",
        radius_km: float = 100,
        scheduled_only: bool = False,
    ) -> str:
        """Airports, heliports and seaplane bases near a Swedish location."""

        async def action(factory: ServiceFactory) -> str:
            result = await factory.airport_finder().find(location, radius_km, scheduled_only)
            return format_nearby_airports(result.location, result.radius_km, result.airports)

        return await with_factory(action)

    @server.tool()
    async def bus_routes(from_city: str, to_city: str, date: str | None = None) -> str:
        """Long-distance bus operators, prices and booking links between two cities."""
        try:
            ride_date = parse_date(date) if date else None
            return format_bus_search(search_bus_routes(from_city, to_city, ride_date))
        except TransportError as e:
            raise ToolError(str(e)) from e

    return server
