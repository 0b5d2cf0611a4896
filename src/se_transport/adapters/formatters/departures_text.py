"""Terminal rendering of a departure board."""

from datetime import datetime
from zoneinfo import ZoneInfo

from se_transport.adapters.formatters.layout import (
    EMPTY_CLOCK,
    HEAVY_RULE,
    header,
    mode_icon,
    render,
    truncate,
)
from se_transport.domain.models.departure import Departure, DepartureBoard, clock_time
from se_transport.domain.models.transport_mode import TransportMode

MODE_NAMES = {
    TransportMode.BUS: "buss",
    TransportMode.METRO: "tunnelbana",
    TransportMode.TRAIN: "tåg",
    TransportMode.TRAM: "spårvagn",
    TransportMode.SHIP: "båt",
}


def format_time_until(minutes: int) -> str:
    """Fixed-width "om N min" label."""
    if minutes <= 0:
        return "   Nu    "
    if minutes == 1:
        return " om 1 min"
    if minutes < 60:
        return f"om {minutes:2d} min"
    hours, remainder = divmod(minutes, 60)
    if remainder == 0:
        return f"om {hours} h   "
    return f"om {hours}h{remainder:02d}m "


def format_departure(departure: Departure, now: datetime, tz: ZoneInfo) -> list[str]:
    time_until = format_time_until(departure.minutes_away(now, tz))
    expected = clock_time(departure.expected) or EMPTY_CLOCK
    lines = [
        f"  {mode_icon(departure.mode)} {departure.line:<4} "
        f"{truncate(departure.destination, 25, '…'):<25} {time_until} ({expected})"
    ]
    if departure.platform:
        lines.append(f"         Läge {departure.platform}")
    return lines


def format_departure_board(board: DepartureBoard, now: datetime, tz: ZoneInfo) -> str:
    mode_name = MODE_NAMES.get(board.mode, "avgång") if board.mode else "avgång"
    title = f" {mode_icon(board.mode)} Nästa {mode_name} från {board.site.name}"
    if board.towards:
        title += f" mot {board.towards}"

    lines = header(title)
    if not board.departures:
        lines.extend(["  Inga avgångar hittades.", "", HEAVY_RULE])
        return render(lines)

    for departure in board.departures:
        lines.extend(format_departure(departure, now, tz))
    lines.extend(["", HEAVY_RULE])
    return render(lines)
