"""Terminal rendering of planned trips."""

from datetime import datetime
from zoneinfo import ZoneInfo

from se_transport.adapters.formatters.layout import (
    HEAVY_RULE,
    LINE_WIDTH,
    clock,
    mode_icon,
    render,
)
from se_transport.domain.deep_links import transit_directions_url
from se_transport.domain.models.transport_mode import TransportMode
from se_transport.domain.models.trip import Leg, Trip

NATIONWIDE_ICONS = {
    TransportMode.TRAIN: "🚆",
    TransportMode.METRO: "🚇",
    TransportMode.BUS: "🚌",
    TransportMode.TRAM: "🚊",
    TransportMode.SHIP: "⛴️",
}
TRIP_SEPARATOR = "  " + "─" * 65

LABELS = {
    "sv": {
        "trip": "Resa",
        "walk": "Gång",
        "platform": "Spår",
        "direct": "direkt",
        "one_change": "1 byte",
        "changes": "byten",
    },
    "en": {
        "trip": "Trip",
        "walk": "Walk",
        "platform": "Platform",
        "direct": "direct",
        "one_change": "1 change",
        "changes": "changes",
    },
}


def format_duration(minutes: int) -> str:
    """Render minutes as "X min", "X h" or "X h Y min"."""
    if minutes < 60:
        return f"{minutes} min"
    hours, remainder = divmod(minutes, 60)
    if remainder == 0:
        return f"{hours} h"
    return f"{hours} h {remainder} min"


class TripTextFormatter:
    """Renders trips in the boxed terminal layout.

    SL trips use the regional layout with one block per trip. ResRobot trips
    use the compact nationwide layout.
    """

    def __init__(self, tz: ZoneInfo, language: str = "sv") -> None:
        self._tz = tz
        self._language = language if language in LABELS else "sv"
        self._labels = LABELS[self._language]

    def format_changes(self, count: int) -> str:
        if count == 0:
            return self._labels["direct"]
        if count == 1:
            return self._labels["one_change"]
        return f"{count} {self._labels['changes']}"

    def _platform(self, platform: str | None) -> str:
        return f"{self._labels['platform']} {platform}" if platform else ""

    def format_regional(
        self, origin: str, destination: str, trips: list[Trip], now: datetime
    ) -> str:
        today = now.astimezone(self._tz)
        date_label = f"{today:%a} {today.day} {today:%b}"
        title = f" {origin} → {destination}"
        padding = max(0, LINE_WIDTH - len(title) - len(date_label))

        lines = [HEAVY_RULE, f"{title}{' ' * padding}{date_label}", HEAVY_RULE, ""]
        for number, trip in enumerate(trips, start=1):
            lines.extend(self._regional_trip(number, trip))
            lines.append("")
        lines.append(HEAVY_RULE)
        return render(lines)

    def _regional_trip(self, number: int, trip: Trip) -> list[str]:
        title = f" {self._labels['trip']} {number}"
        changes = self.format_changes(trip.interchange_count)
        stats = f"{format_duration(trip.duration_minutes)} │ {changes}"
        padding = max(0, LINE_WIDTH - len(title) - len(stats) - 2)
        lines = [f"{title}{' ' * padding}{stats}", "─" * LINE_WIDTH]

        for index, leg in enumerate(trip.legs):
            lines.extend(self._regional_leg(leg, is_last=index == len(trip.legs) - 1))

        maps_url = transit_directions_url(trip)
        if maps_url:
            lines.append(f"  🗺️  {maps_url}")
        return lines

    def _regional_leg(self, leg: Leg, is_last: bool) -> list[str]:
        departure = clock(leg.scheduled_departure, self._tz)
        platform = self._platform(leg.origin.current_platform)
        lines = [f"  {departure}  {leg.origin.name:<30}  {platform}".rstrip()]
        if leg.is_walk:
            walk_minutes = max(1, leg.duration_minutes)
            lines.append(f"    │    🚶 {self._labels['walk']} {walk_minutes} min")
        else:
            direction = f" → {leg.direction}" if leg.direction else ""
            lines.append(f"    │    {mode_icon(leg.mode)} {leg.line}{direction}")

        if is_last:
            arrival = clock(leg.scheduled_arrival, self._tz)
            platform = self._platform(leg.destination.current_platform)
            lines.append(f"  {arrival}  {leg.destination.name:<30}  {platform}".rstrip())
        return lines

    def format_nationwide(
        self, origin: str, destination: str, trips: list[Trip], show_maps: bool = False
    ) -> str:
        lines = [HEAVY_RULE, f" 🚆 {origin} → {destination}", HEAVY_RULE, ""]
        trips = [trip for trip in trips if trip.legs]
        if not trips:
            lines.extend(["  Inga resor hittades.", HEAVY_RULE])
            return render(lines)

        for index, trip in enumerate(trips):
            if index > 0:
                lines.extend(["", TRIP_SEPARATOR, ""])
            lines.extend(self._nationwide_trip(trip))
            if show_maps:
                lines.append(f"  🗺️  {transit_directions_url(trip)}")

        lines.extend(["", HEAVY_RULE])
        return render(lines)

    def _nationwide_trip(self, trip: Trip) -> list[str]:
        first, last = trip.legs[0], trip.legs[-1]
        departure = clock(first.scheduled_departure, self._tz)
        if first.departure_delay_minutes > 0:
            departure += f" (+{first.departure_delay_minutes})"
        arrival = clock(last.scheduled_arrival, self._tz)
        if last.arrival_delay_minutes > 0:
            arrival += f" (+{last.arrival_delay_minutes})"

        hours, minutes = divmod(trip.duration_minutes, 60)
        duration = f"{hours} tim {minutes} min" if hours > 0 else f"{minutes} min"
        changes = self.format_changes(trip.interchange_count)
        lines = [f"  {departure} → {arrival}   ({duration}, {changes})", ""]

        for leg in trip.legs:
            if leg.is_walk:
                if leg.distance_meters:
                    lines.append(f"  🚶 Gå {leg.distance_meters} m ({leg.duration_minutes} min)")
                else:
                    lines.append(f"  🚶 Byte ({leg.duration_minutes} min)")
                continue

            icon = NATIONWIDE_ICONS.get(leg.mode, "🚍")
            line = leg.line or leg.category
            track = f" [spår {leg.origin.current_platform}]" if leg.origin.current_platform else ""
            lines.append(f"  {icon} {line} {leg.origin.name}{track}")
            lines.append(
                f"     {clock(leg.scheduled_departure, self._tz)} → "
                f"{clock(leg.scheduled_arrival, self._tz)} mot {leg.direction}"
            )
            if leg.operator and leg.operator != leg.line:
                lines.append(f"     ({leg.operator})")
        return lines
