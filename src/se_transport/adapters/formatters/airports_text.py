"""Terminal rendering of nearby airports."""

from collections.abc import Sequence
from types import MappingProxyType

from se_transport.adapters.formatters.layout import HEAVY_RULE, header, render, section, truncate
from se_transport.domain.models.airport import Airport, NearbyAirport

TYPE_ICONS = MappingProxyType({"heliport": "🚁", "seaplane_base": "🛩️"})
TYPE_LABELS = MappingProxyType(
    {
        "large_airport": "Stor flygplats",
        "medium_airport": "Mellanstor flygplats",
        "small_airport": "Liten flygplats",
        "heliport": "Heliport",
        "seaplane_base": "Sjöflygplats",
    }
)


def airport_icon(airport: Airport) -> str:
    if airport.scheduled_service:
        return "✈️"
    return TYPE_ICONS.get(airport.type, "🛫")


def type_label(airport_type: str) -> str:
    return TYPE_LABELS.get(airport_type, airport_type)


def format_nearby_airports(
    location: str, radius_km: float, airports: Sequence[NearbyAirport]
) -> str:
    """Airports grouped into scheduled service and the rest, nearest first."""
    lines = header(f" ✈️  Flygplatser inom {radius_km:.0f} km från {location}")

    if not airports:
        lines.append("  Inga flygplatser hittades inom angivet avstånd.")
    else:
        scheduled = [item for item in airports if item.airport.scheduled_service]
        other = [item for item in airports if not item.airport.scheduled_service]

        if scheduled:
            lines.extend(section("Med reguljär trafik:"))
            for item in scheduled:
                airport = item.airport
                lines.append(
                    f"  {airport_icon(airport)} {airport.code:<4}  "
                    f"{truncate(airport.name, 35):<35}  {item.distance_km:5.0f} km"
                )
                if airport.municipality:
                    lines.append(f"          {airport.municipality}")
            lines.append("")

        if other:
            lines.extend(section("Övriga flygplatser:"))
            for item in other:
                airport = item.airport
                lines.append(
                    f"  {airport_icon(airport)} {airport.code:<6}  "
                    f"{truncate(airport.name, 33):<33}  {item.distance_km:5.0f} km  "
                    f"({type_label(airport.type)})"
                )

    lines.extend(["", HEAVY_RULE])
    return render(lines)
