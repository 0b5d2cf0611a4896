"""Shared building blocks for the boxed terminal layout."""

from datetime import datetime
from zoneinfo import ZoneInfo

from se_transport.domain.models.transport_mode import TransportMode

LINE_WIDTH = 70
HEAVY_RULE = "━" * LINE_WIDTH
SECTION_RULE = "  " + "─" * 65
EMPTY_CLOCK = "     "

MODE_ICONS = {
    TransportMode.BUS: "🚌",
    TransportMode.METRO: "🚇",
    TransportMode.TRAIN: "🚂",
    TransportMode.TRAM: "🚊",
    TransportMode.SHIP: "⛴️",
    TransportMode.WALK: "🚶",
}
DEFAULT_ICON = "🚍"


def mode_icon(mode: TransportMode | None) -> str:
    if mode is None:
        return DEFAULT_ICON
    return MODE_ICONS.get(mode, DEFAULT_ICON)


def header(title: str) -> list[str]:
    """Heavy rule, title line, heavy rule, blank line."""
    return [HEAVY_RULE, title, HEAVY_RULE, ""]


def section(title: str) -> list[str]:
    return [f"  {title}", SECTION_RULE]


def clock(value: datetime | None, tz: ZoneInfo) -> str:
    """Local "HH:MM", or blanks of the same width when unknown."""
    if value is None:
        return EMPTY_CLOCK
    return value.astimezone(tz).strftime("%H:%M")


def truncate(text: str, max_len: int, ellipsis: str = "...") -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - len(ellipsis)] + ellipsis


def render(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"
