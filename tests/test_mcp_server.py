"""Tests for the MCP server tool registration and offline tools."""

import tomllib
from pathlib import Path

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from se_transport.adapters.config import AppConfig
from se_transport.mcp_server import SERVER_NAME, create_server


@pytest.fixture
def config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> AppConfig:
    for name in ("RESROBOT_API_KEY", "TRAFIKLAB_RESROBOT_KEY", "CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return AppConfig()


def test_mcp_dependency_stays_on_the_fastmcp_major_version() -> None:
    """Given the project metadata, when reading the mcp requirement, then 2.x is excluded."""
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with pyproject.open("rb") as f:
        dependencies = tomllib.load(f)["project"]["dependencies"]

    mcp_requirement = next(dep for dep in dependencies if dep.startswith("mcp"))
    assert "<2" in mcp_requirement


def _text(result: object) -> str:
    # Newer SDKs return (content, structured output)
    content = result[0] if isinstance(result, tuple) else result
    return "".join(getattr(block, "text", "") for block in content)


@pytest.mark.asyncio
async def test_server_registers_all_tools(config: AppConfig) -> None:
    """Given a config, when creating the server, then every planner is exposed as a tool."""
    server = create_server(config)
    tools = {tool.name: tool for tool in await server.list_tools()}

    assert server.name == SERVER_NAME
    assert set(tools) == {
        "plan_trip",
        "next_departures",
        "taxi_estimate",
        "car_directions",
        "nearby_airports",
        "bus_routes",
    }
    assert "origin" in tools["plan_trip"].inputSchema["required"]
    assert "date" not in tools["bus_routes"].inputSchema.get("required", [])


@pytest.mark.asyncio
async def test_bus_routes_tool(config: AppConfig) -> None:
    """Given two known cities, when calling bus_routes, then the offers are rendered."""
    server = create_server(config)
    result = await server.call_tool(
        "bus_routes", {"from_city": "Stockholm", "to_city": "Göteborg", "date": "2026-12-20"}
    )

    text = _text(result)
    assert "FlixBus" in text
    assert "rideDate=20.12.2026" in text


@pytest.mark.asyncio
async def test_bus_routes_tool_error(config: AppConfig) -> None:
    """Given an unknown city, when calling bus_routes, then a tool error is raised."""
    server = create_server(config)

    with pytest.raises(ToolError, match="unknown city"):
        await server.call_tool("bus_routes", {"from_city": "Gotham", "to_city": "Stockholm"})


@pytest.mark.asyncio
async def test_car_directions_with_distance(config: AppConfig) -> None:
    """Given an explicit distance, when calling car_directions, then no routing is needed."""
    server = create_server(config)
    result = await server.call_tool(
        "car_directions",
        {"from_location": "Stockholm", "to_location": "Göteborg", "distance_km": 470},
    )

    assert "Avstånd:       470 km" in _text(result)
