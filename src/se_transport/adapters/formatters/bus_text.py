"""Terminal rendering of long-distance bus offers."""

from se_transport.adapters.formatters.layout import HEAVY_RULE, header, render, section
from se_transport.domain.models.bus import BusRoute, BusSearchResult

FLIXBUS_HOME_URL = "https://www.flixbus.se/"
TIPS = (
    "Boka i förväg för lägsta pris",
    "FlixBus: ändra bokning upp till 15 min före avgång",
    'Vy Bus4You: "Sveriges nöjdaste kunder" 12 år i rad',
)


def amenities(route: BusRoute) -> str:
    icons = ""
    if route.has_wifi:
        icons += "📶"
    if route.has_power:
        icons += "🔌"
    if route.has_toilet:
        icons += "🚻"
    return icons


def format_bus_search(result: BusSearchResult) -> str:
    lines = header(f" 🚌 Buss: {result.origin.name} → {result.destination.name}")

    if not result.routes:
        lines.append("  Inga direktbokningar tillgängliga.")
        lines.append("")
        lines.append("  🔍 Sök på aggregatorer:")
        lines.append(f"     Omio:    {result.comparison_url}")
        lines.append(f"     FlixBus: {FLIXBUS_HOME_URL}")
        lines.append("")
    else:
        lines.extend(section("Prisöversikt:"))
        for route in result.routes:
            lines.append(
                f"  🚌 {route.operator:<14}  {route.price_from:3d}-{route.price_to} kr  "
                f"{route.duration:<10}  {amenities(route)}"
            )
        lines.append("")

        lines.extend(section("Boka biljett:"))
        for route in result.routes:
            lines.extend([f"  🎫 {route.operator}:", f"     {route.booking_url}"])
            if route.frequency:
                lines.append(f"     Avgångar: {route.frequency}")
            lines.append("")

        lines.extend(["  🔍 Jämför alla operatörer:", f"     {result.comparison_url}", ""])

    lines.append("  💡 Tips:")
    lines.extend(f"     • {tip}" for tip in TIPS)
    lines.extend(["", HEAVY_RULE])
    return render(lines)
