"""Command-line interface for planning trips in Sweden."""

import argparse
import asyncio
import logging
import sys
from datetime import datetime

import aiohttp

from se_transport import __version__
from se_transport.adapters.config import AppConfig
from se_transport.adapters.formatters import (
    JsonFormatter,
    TripTextFormatter,
    format_bus_search,
    format_car_trip,
    format_departure_board,
    format_error,
    format_flight_search,
    format_nearby_airports,
    format_taxi_quote,
)
from se_transport.application.services.bus_route_service import search_bus_routes
from se_transport.application.services.departure_board_service import DepartureBoardService
from se_transport.application.services.flight_links import booking_links, build_flight_search
from se_transport.application.services.input_parsing import (
    build_search_time,
    parse_date,
    parse_route,
)
from se_transport.application.services.mode_aliases import is_mode_alias, normalize_mode
from se_transport.bootstrap import ServiceFactory
from se_transport.domain.exceptions import (
    ConfigurationError,
    InvalidInputError,
    StopNotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_FLIGHT_LOCATION = "Stockholm"

COMMANDS = {
    "trip": ("resa",),
    "next": ("nästa",),
    "car": ("bil",),
    "flight": ("flights", "flyg", "flygplats", "airport", "airports"),
    "fly": ("ffly", "flyga"),
    "taxi": ("cab", "uber", "bolt"),
    "buss": ("bus", "flixbus", "vy"),
    "mcp": (),
}
KNOWN_COMMANDS = set(COMMANDS) | {alias for aliases in COMMANDS.values() for alias in aliases}
TOP_LEVEL_FLAGS = {"-h", "--help", "--version"}

EXIT_OK = 0
EXIT_FAILURE = 1


def normalize_argv(argv: list[str]) -> list[str]:
    """Route bare invocations to the trip command and ``--mcp`` to ``mcp``."""
    if not argv:
        return argv
    first = argv[0].lower()
    if first == "--mcp":
        return ["mcp", *argv[1:]]
    if first in KNOWN_COMMANDS:
        return [first, *argv[1:]]
    if first in TOP_LEVEL_FLAGS:
        return argv
    return ["trip", *argv]


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-j", "--json", action="store_true", help="Output as JSON")
    common.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    parser = argparse.ArgumentParser(
        prog="transport",
        description="Sweden public transport, car, taxi, bus and flight planner",
        epilog="Nationwide search (-s) requires RESROBOT_API_KEY.",
    )
    parser.add_argument("--version", action="version", version=f"transport {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    trip_parser = subparsers.add_parser(
        "trip",
        aliases=list(COMMANDS["trip"]),
        parents=[common],
        help="Plan a public transport trip (default command)",
    )
    trip_parser.add_argument("places", nargs="+", help="[origin] destination")
    trip_parser.add_argument("-t", "--time", help="Departure time (HH:MM)")
    trip_parser.add_argument("-d", "--date", help="Departure date (YYYY-MM-DD)")
    trip_parser.add_argument(
        "-a", "--arrive-by", action="store_true", help="Treat the time as arrival time"
    )
    trip_parser.add_argument("-c", "--changes", type=int, default=None, help="Maximum changes")
    trip_parser.add_argument("-n", "--count", type=int, default=3, help="Number of results")
    trip_parser.add_argument("-l", "--lang", choices=["sv", "en"], help="Output language")
    trip_parser.add_argument(
        "-s",
        "--se",
        "--nationwide",
        dest="nationwide",
        action="store_true",
        help="Search all of Sweden (ResRobot)",
    )
    trip_parser.add_argument(
        "-m", "--maps", action="store_true", help="Show a Google Maps link per trip"
    )

    next_parser = subparsers.add_parser(
        "next",
        aliases=list(COMMANDS["next"]),
        parents=[common],
        help="Show next departures from a stop",
    )
    next_parser.add_argument("words", nargs="+", help="[mode] location [towards]")
    next_parser.add_argument("-n", "--count", type=int, default=3, help="Number of departures")

    car_parser = subparsers.add_parser(
        "car", aliases=list(COMMANDS["car"]), parents=[common], help="Car trip with fuel plan"
    )
    car_parser.add_argument("words", nargs="+", help="from to")
    car_parser.add_argument("-d", "--distance", type=float, default=None, help="Distance in km")
    car_parser.add_argument(
        "-f", "--fuel", type=float, default=100.0, help="Starting fuel level in percent"
    )

    flight_parser = subparsers.add_parser(
        "flight", aliases=list(COMMANDS["flight"]), parents=[common], help="Find nearby airports"
    )
    flight_parser.add_argument("location", nargs="*", help="City name (default: Stockholm)")
    flight_parser.add_argument(
        "-r", "--radius", type=float, default=100.0, help="Search radius in km"
    )
    flight_parser.add_argument(
        "-s", "--scheduled", action="store_true", help="Only airports with scheduled service"
    )

    fly_parser = subparsers.add_parser(
        "fly", aliases=list(COMMANDS["fly"]), parents=[common], help="Flight search links"
    )
    fly_parser.add_argument("words", nargs="+", help="[from] origin [to] destination")
    fly_parser.add_argument("-d", "--date", help="Departure date (YYYY-MM-DD)")
    fly_parser.add_argument("-r", "--return", dest="return_date", help="Return date (YYYY-MM-DD)")
    fly_parser.add_argument(
        "-p", "--private", action="store_true", help="Include private jets and helicopters"
    )

    taxi_parser = subparsers.add_parser(
        "taxi", aliases=list(COMMANDS["taxi"]), parents=[common], help="Taxi fare estimate"
    )
    taxi_parser.add_argument("words", nargs="+", help="[from] origin [to] destination")

    bus_parser = subparsers.add_parser(
        "buss", aliases=list(COMMANDS["buss"]), parents=[common], help="Long-distance buses"
    )
    bus_parser.add_argument("words", nargs="+", help="[from] origin [to] destination")
    bus_parser.add_argument("-d", "--date", help="Travel date (YYYY-MM-DD)")

    subparsers.add_parser("mcp", help="Run as MCP server on stdio")
    return parser


def canonical_command(command: str) -> str:
    for name, aliases in COMMANDS.items():
        if command == name or command in aliases:
            return name
    return command


def progress(args: argparse.Namespace, message: str) -> None:
    """Status line on stderr, suppressed in JSON mode."""
    if not getattr(args, "json", False):
        print(message, file=sys.stderr)


def join_suggestions(names: list[str], language: str) -> str:
    """Join names as "A, B eller C", or "A, B or C" in English."""
    if len(names) <= 1:
        return "".join(names)
    conjunction = "or" if language == "en" else "eller"
    return f"{', '.join(names[:-1])} {conjunction} {names[-1]}"


async def run_trip(args: argparse.Namespace, factory: ServiceFactory) -> int:
    config = factory.config
    language = args.lang or config.language
    if len(args.places) > 2:
        raise InvalidInputError("give at most an origin and a destination")
    if len(args.places) == 1:
        if not config.default_location:
            raise ConfigurationError(
                "no origin specified and no default location set. "
                'Set one with: export TRANSPORT_DEFAULT_LOCATION="Slussen"'
            )
        origin, destination = config.default_location, args.places[0]
    else:
        origin, destination = args.places

    now = datetime.now(config.tz)
    when = build_search_time(now, args.date, args.time)
    service = factory.trip_planning(nationwide=args.nationwide, language=language)

    scope = " (hela Sverige)" if args.nationwide else ""
    progress(args, f"Söker resor från {origin} till {destination}{scope}...")
    trips = await service.plan(
        origin,
        destination,
        when=when,
        arrive_by=args.arrive_by,
        count=args.count,
        max_changes=args.changes,
    )
    if not trips:
        print("Inga resor hittades.", file=sys.stderr)
        return EXIT_FAILURE

    if args.json:
        print(JsonFormatter(config.tz).format_trips(origin, destination, trips, now))
    elif args.nationwide:
        formatter = TripTextFormatter(config.tz, language)
        print(formatter.format_nationwide(origin, destination, trips, args.maps), end="")
    else:
        formatter = TripTextFormatter(config.tz, language)
        print(formatter.format_regional(origin, destination, trips, now), end="")
    return EXIT_OK


async def run_next(args: argparse.Namespace, factory: ServiceFactory) -> int:
    words = list(args.words)
    mode = None
    if len(words) > 1 and is_mode_alias(words[0]):
        mode = normalize_mode(words.pop(0))
    location = words[0]
    towards = " ".join(words[1:])

    mode_label = mode.value if mode else "avgångar"
    suffix = f" mot {towards}" if towards else ""
    progress(args, f"Söker {mode_label} från {location}{suffix}...")

    config = factory.config
    board = await factory.departure_board().get_board(location, mode, towards, args.count)
    now = datetime.now(config.tz)
    if args.json:
        print(JsonFormatter(config.tz).format_departures(board, now))
    else:
        print(format_departure_board(board, now, config.tz), end="")
    return EXIT_OK


async def run_car(args: argparse.Namespace, factory: ServiceFactory) -> int:
    origin, destination = parse_route(args.words)
    if args.distance is None:
        progress(args, f"Söker rutt från {origin} till {destination}...")
    plan = await factory.car_trips().plan(origin, destination, args.distance, args.fuel)
    config = factory.config
    if args.json:
        now = datetime.now(config.tz)
        print(JsonFormatter(config.tz).format_car(plan, now, config.language))
    else:
        print(format_car_trip(plan, config.language), end="")
    return EXIT_OK


async def run_flight(args: argparse.Namespace, factory: ServiceFactory) -> int:
    location = " ".join(args.location) or DEFAULT_FLIGHT_LOCATION
    progress(args, f"Söker flygplatser nära {location}...")
    result = await factory.airport_finder().find(location, args.radius, args.scheduled)
    print(format_nearby_airports(result.location, result.radius_km, result.airports), end="")
    return EXIT_OK


def run_fly(args: argparse.Namespace, config: AppConfig) -> int:
    origin, destination = parse_route(args.words)
    search = build_flight_search(origin, destination, args.date, args.return_date, args.private)
    links = booking_links(search)
    if args.json:
        print(JsonFormatter(config.tz).format_flight(search, links, datetime.now(config.tz)))
    else:
        print(format_flight_search(search, links), end="")
    return EXIT_OK


async def run_taxi(args: argparse.Namespace, factory: ServiceFactory) -> int:
    origin, destination = parse_route(args.words)
    progress(args, f"Söker rutt från {origin} till {destination}...")
    quote = await factory.taxi_fares().quote(origin, destination)
    config = factory.config
    if args.json:
        print(JsonFormatter(config.tz).format_taxi(quote, datetime.now(config.tz)))
    else:
        print(format_taxi_quote(quote), end="")
    return EXIT_OK


def run_bus(args: argparse.Namespace, config: AppConfig) -> int:
    origin, destination = parse_route(args.words)
    ride_date = parse_date(args.date) if args.date else None
    result = search_bus_routes(origin, destination, ride_date)
    if args.json:
        print(JsonFormatter(config.tz).format_bus(result, datetime.now(config.tz)))
    else:
        print(format_bus_search(result), end="")
    return EXIT_OK


async def print_suggestions(
    error: StopNotFoundError, departure_board: DepartureBoardService, language: str
) -> None:
    """Print up to three similarly named stops, if any."""
    try:
        names = await departure_board.suggest_sites(error.location)
    except TransportError as e:
        logger.debug(f"No suggestions for '{error.location}': {e}")
        return
    if not names:
        return
    prefix = "Did you mean" if language == "en" else "Menade du"
    print(f"{prefix}: {join_suggestions(names, language)}", file=sys.stderr)


async def dispatch(args: argparse.Namespace, config: AppConfig) -> int:
    command = canonical_command(args.command)
    if command == "fly":
        return run_fly(args, config)
    if command == "buss":
        return run_bus(args, config)

    handlers = {
        "trip": run_trip,
        "next": run_next,
        "car": run_car,
        "flight": run_flight,
        "taxi": run_taxi,
    }
    language = getattr(args, "lang", None) or config.language
    async with aiohttp.ClientSession() as session:
        factory = ServiceFactory(config, session)
        try:
            return await handlers[command](args, factory)
        except StopNotFoundError as e:
            report_error(e, args, language)
            if not args.json:
                await print_suggestions(e, factory.departure_board(), language)
            return EXIT_FAILURE


def report_error(error: TransportError, args: argparse.Namespace, language: str) -> None:
    if getattr(args, "json", False):
        print(format_error(str(error)))
        return
    prefix = "Error" if language == "en" else "Fel"
    print(f"{prefix}: {error}", file=sys.stderr)


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(normalize_argv(sys.argv[1:] if argv is None else argv))
    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_FAILURE

    try:
        config = AppConfig()
    except ValueError as e:
        print(f"Fel: ogiltig konfiguration: {e}", file=sys.stderr)
        return EXIT_FAILURE

    level = logging.DEBUG if getattr(args, "verbose", False) else config.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    if args.command == "mcp":
        from se_transport.mcp_server import create_server

        logger.info("Starting transport MCP server on stdio")
        await create_server(config).run_stdio_async()
        return EXIT_OK

    try:
        return await dispatch(args, config)
    except TransportError as e:
        report_error(e, args, getattr(args, "lang", None) or config.language)
        return EXIT_FAILURE


def cli_main() -> None:
    """Entry point for the ``transport`` console script."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
