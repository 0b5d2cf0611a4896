"""Terminal rendering of a car trip plan."""

from se_transport.adapters.formatters.layout import HEAVY_RULE, header, render
from se_transport.domain.models.car_trip import CarTripPlan


def format_car_trip(plan: CarTripPlan, language: str = "sv") -> str:
    profile = plan.profile
    lines = header(f" 🚗 Bil: {plan.origin} → {plan.destination}")
    lines.append(f"  Fordon:    {profile.name} ({profile.fuel_type})")
    lines.append(
        f"  Tank:      {profile.tank_size_liters:.0f} liter (räckvidd ~{profile.max_range:.0f} km)"
    )
    lines.append("")

    if plan.distance_km is not None and plan.distance_km > 0:
        lines.append(f"  Avstånd:       {plan.distance_km:.0f} km")
        lines.append(f"  Förbrukning:   {plan.fuel_rate:.1f} L/100km")
        lines.append(
            f"  Bränsle:       {plan.fuel_needed_liters:.1f} liter {profile.fuel_type.lower()}"
        )
        lines.append("")
        if plan.fuel_stops:
            lines.append(f"  ⛽ Tankstopp behövs ({len(plan.fuel_stops)} st):")
            for number, stop in enumerate(plan.fuel_stops, start=1):
                lines.append(f"     {number}. Efter ~{stop.at_km:.0f} km ({stop.label(language)})")
            lines.append("")
            lines.append("  🔍 Sök tankstation längs rutten:")
            lines.append(f"     {plan.fuel_search_url}")
        else:
            lines.append("  ✓ Ingen tankning behövs under resan")
    else:
        lines.append(
            f"  Förbrukning:   {profile.short_distance_rate:.1f} L/100km "
            f"(< {profile.short_distance_km:.0f} km)"
        )
        lines.append(
            f"                 {profile.long_distance_rate:.1f} L/100km "
            f"(≥ {profile.short_distance_km:.0f} km)"
        )
        lines.append("")
        lines.append("  💡 Ange avstånd med -d <km> för bränsleberäkning")
        lines.append("     Ange tankläge med -f <procent> (t.ex. -f 50 för halvfull tank)")

    lines.extend(["", "  🗺️  Google Maps:", f"     {plan.maps_url}", "", HEAVY_RULE])
    return render(lines)
