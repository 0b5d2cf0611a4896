"""Terminal rendering of flight search links."""

from datetime import date
from types import MappingProxyType

from se_transport.adapters.formatters.layout import HEAVY_RULE, header, render, section
from se_transport.domain.models.flight import BookingLink, FlightSearch

GROUP_TITLES = (
    ("search", "Sök flyg:"),
    ("airline", "Flygbolag:"),
    ("charter", "Charterbolag:"),
    ("private", "Privatflyg & Helikopter:"),
)
GROUP_ICONS = MappingProxyType(
    {"search": "🔍", "airline": "✈️", "charter": "🌴", "private": "🛩️ "}
)
LINK_ICONS = MappingProxyType(
    {
        "SAS": "🇸🇪",
        "Norwegian": "🇳🇴",
        "Ticket": "🎫",
        "HeliAir Sweden": "🚁",
        "Helipady": "🚁",
    }
)


def airport_display(city: str, code: str) -> str:
    """Show "City (CODE)", or just the code when the city adds nothing."""
    if not city or city.upper() == code:
        return code
    return f"{city} ({code})"


def _long_date(value: date) -> str:
    return f"{value:%a} {value.day} {value:%b %Y}"


def format_flight_search(search: FlightSearch, links: list[BookingLink]) -> str:
    origin = airport_display(search.origin_city, search.origin_code)
    destination = airport_display(search.destination_city, search.destination_code)
    lines = header(f" ✈️  Flyg: {origin} → {destination}")

    if search.departure_date:
        lines.append(f"  Datum:       {_long_date(search.departure_date)}")
        if search.return_date:
            lines.append(f"  Retur:       {_long_date(search.return_date)}")
        else:
            lines.append("  Retur:       Enkel resa")
        lines.append("")

    for group, title in GROUP_TITLES:
        group_links = [link for link in links if link.group == group]
        if not group_links:
            continue
        lines.extend(section(title))
        for link in group_links:
            icon = LINK_ICONS.get(link.name, GROUP_ICONS[group])
            lines.extend([f"  {icon} {link.name}:", f"     {link.url}", ""])

    lines.append(HEAVY_RULE)
    return render(lines)
