"""Tests for CLI helper functions and offline commands."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch
from zoneinfo import ZoneInfo

import pytest

from se_transport.cli import (
    EXIT_FAILURE,
    EXIT_OK,
    build_parser,
    canonical_command,
    join_suggestions,
    main,
    normalize_argv,
    print_suggestions,
    run_next,
)
from se_transport.domain.exceptions import StopNotFoundError
from se_transport.domain.models import Departure, DepartureBoard, Site, TransportMode

ENV_VARS = (
    "RESROBOT_API_KEY",
    "TRAFIKLAB_RESROBOT_KEY",
    "TRANSPORT_DEFAULT_LOCATION",
    "TRANSPORT_LANGUAGE",
    "TIMEZONE",
    "CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_normalize_argv_defaults_to_trip() -> None:
    """Given a bare place name, when normalizing argv, then the trip command is inserted."""
    assert normalize_argv(["Slussen", "Kista"]) == ["trip", "Slussen", "Kista"]


def test_normalize_argv_keeps_commands_and_flags() -> None:
    """Given known commands or top-level flags, when normalizing, then they pass through."""
    assert normalize_argv(["Bil", "A", "B"]) == ["bil", "A", "B"]
    assert normalize_argv(["--version"]) == ["--version"]
    assert normalize_argv([]) == []


def test_normalize_argv_mcp_flag() -> None:
    """Given --mcp, when normalizing argv, then the mcp command is used."""
    assert normalize_argv(["--mcp"]) == ["mcp"]


@pytest.mark.parametrize(
    ("alias", "command"),
    [
        ("resa", "trip"),
        ("nästa", "next"),
        ("flyg", "flight"),
        ("flyga", "fly"),
        ("uber", "taxi"),
        ("flixbus", "buss"),
        ("mcp", "mcp"),
    ],
)
def test_canonical_command(alias: str, command: str) -> None:
    """Given a command alias, when canonicalizing, then the primary name is returned."""
    assert canonical_command(alias) == command


def test_join_suggestions() -> None:
    """Given suggestion lists, when joining, then the last name uses the conjunction."""
    assert join_suggestions(["Slussen"], "sv") == "Slussen"
    assert join_suggestions(["A", "B", "C"], "sv") == "A, B eller C"
    assert join_suggestions(["A", "B"], "en") == "A or B"
    assert join_suggestions([], "sv") == ""


def test_parser_trip_options() -> None:
    """Given trip flags, when parsing, then every option lands on the namespace."""
    args = build_parser().parse_args(
        ["trip", "Kista", "Slussen", "-t", "08:15", "-a", "-c", "1", "-n", "5", "--se", "-m"]
    )

    assert args.places == ["Kista", "Slussen"]
    assert args.time == "08:15"
    assert args.arrive_by is True
    assert args.changes == 1
    assert args.count == 5
    assert args.nationwide is True
    assert args.maps is True
    assert args.json is False


def test_parser_fly_return_option() -> None:
    """Given fly flags, when parsing, then the return date and private flag are set."""
    args = build_parser().parse_args(["fly", "ARN", "LHR", "-r", "2026-06-10", "-p", "-j"])

    assert args.return_date == "2026-06-10"
    assert args.private is True
    assert args.json is True


@pytest.mark.asyncio
async def test_main_fly_prints_links(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a fly command, when running, then booking links are printed without network."""
    exit_code = await main(["fly", "från", "Stockholm", "till", "Göteborg", "-d", "2026-12-20"])

    out = capsys.readouterr().out
    assert exit_code == EXIT_OK
    assert "Stockholm (ARN) → Göteborg (GOT)" in out
    assert "skyscanner.se" in out
    assert "Grafair" not in out


@pytest.mark.asyncio
async def test_main_bus_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a bus command in JSON mode, when running, then a bus envelope is printed."""
    exit_code = await main(["buss", "Stockholm", "Göteborg", "-j"])

    document = json.loads(capsys.readouterr().out)
    assert exit_code == EXIT_OK
    assert document["type"] == "bus"
    assert document["data"]["routes"][0]["operator"] == "FlixBus"


@pytest.mark.asyncio
async def test_main_bus_unknown_city(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an unknown city, when running the bus command, then the error goes to stderr."""
    exit_code = await main(["bus", "Gotham", "Stockholm"])

    captured = capsys.readouterr()
    assert exit_code == EXIT_FAILURE
    assert captured.err.startswith("Fel: unknown city 'Gotham'")
    assert captured.out == ""


@pytest.mark.asyncio
async def test_main_invalid_date_in_json_mode(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a bad date in JSON mode, when running, then the error is printed as JSON."""
    exit_code = await main(["fly", "ARN", "GOT", "-d", "tomorrow", "-j"])

    assert exit_code == EXIT_FAILURE
    assert "YYYY-MM-DD" in json.loads(capsys.readouterr().out)["error"]


@pytest.mark.asyncio
async def test_main_trip_without_default_location(capsys: pytest.CaptureFixture[str]) -> None:
    """Given one place and no default location, when running, then a config error is shown."""
    exit_code = await main(["Kista"])

    assert exit_code == EXIT_FAILURE
    assert "TRANSPORT_DEFAULT_LOCATION" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no arguments, when running, then usage is printed and the exit code is 1."""
    assert await main([]) == EXIT_FAILURE
    assert "usage: transport" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_run_next_with_mode_and_direction(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a mode alias first, when running next, then mode and direction are passed on."""
    board = DepartureBoard(
        site=Site(id=9192, name="Slussen"),
        departures=(Departure("17", "Skarpnäck", "", "", TransportMode.METRO),),
        mode=TransportMode.METRO,
        towards="Skarpnäck",
    )
    departure_board = MagicMock()
    departure_board.get_board = AsyncMock(return_value=board)
    factory = MagicMock()
    factory.config.tz = ZoneInfo("Europe/Stockholm")
    factory.departure_board.return_value = departure_board
    args = build_parser().parse_args(["nästa", "tbana", "Slussen", "Skarpnäck"])

    assert await run_next(args, factory) == EXIT_OK

    departure_board.get_board.assert_awaited_once_with(
        "Slussen", TransportMode.METRO, "Skarpnäck", 3
    )
    captured = capsys.readouterr()
    assert "Nästa tunnelbana från Slussen mot Skarpnäck" in captured.out
    assert "Söker metro från Slussen mot Skarpnäck..." in captured.err


@pytest.mark.asyncio
async def test_print_suggestions(capsys: pytest.CaptureFixture[str]) -> None:
    """Given similar site names, when printing suggestions, then they go to stderr."""
    departure_board = MagicMock()
    departure_board.suggest_sites = AsyncMock(return_value=["Odenplan", "Odengatan"])

    await print_suggestions(StopNotFoundError("odenpaln"), departure_board, "sv")

    assert capsys.readouterr().err == "Menade du: Odenplan eller Odengatan\n"


@pytest.mark.asyncio
async def test_main_mcp_runs_stdio_server() -> None:
    """Given the --mcp flag, when running, then the MCP server is started on stdio."""
    server = MagicMock()
    server.run_stdio_async = AsyncMock()

    with patch("se_transport.mcp_server.create_server", return_value=server) as create:
        assert await main(["--mcp"]) == EXIT_OK

    create.assert_called_once()
    server.run_stdio_async.assert_awaited_once()
