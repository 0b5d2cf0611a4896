"""Terminal rendering of taxi fare estimates."""

from se_transport.adapters.formatters.layout import HEAVY_RULE, header, render, section
from se_transport.domain.deep_links import driving_directions_url
from se_transport.domain.models.taxi import TaxiQuote

TIPS = (
    "Jämförpris (10 km, 15 min) finns på bilens dörr",
    "Fråga om fast pris innan du stiger in",
    "Godkända taxibilar har gula nummerskyltar",
)


def format_taxi_quote(quote: TaxiQuote) -> str:
    lines = header(f" 🚕 Taxi: {quote.origin_address} → {quote.destination_address}")
    lines.append(f"  Avstånd:    {quote.route.distance_km:.1f} km")
    lines.append(f"  Restid:     {quote.route.duration_minutes:.0f} min")
    lines.append("")

    lines.extend(section("Prisuppskattning:"))
    for estimate in quote.estimates:
        row = f"  🚖 {estimate.company:<15}  ~{estimate.estimated_sek:4.0f} kr"
        if estimate.has_fixed_price:
            row += f"  (fast pris: {estimate.fixed_price_sek:.0f} kr)"
        lines.append(row)
    lines.append("")
    lines.append("  📊 Taxameter: grundavgift + kr/km + kr/tim (priserna är ungefärliga)")
    lines.append("")

    lines.extend(section("Boka taxi:"))
    for estimate in quote.estimates:
        if estimate.deep_link:
            lines.extend([f"  📱 {estimate.company} (app):", f"     {estimate.deep_link}", ""])
        elif estimate.booking_url:
            lines.extend([f"  🌐 {estimate.company}:", f"     {estimate.booking_url}", ""])

    maps_url = driving_directions_url(quote.origin_address, quote.destination_address)
    lines.extend(["  🗺️  Visa rutt i Google Maps:", f"     {maps_url}", ""])

    lines.append("  💡 Tips:")
    lines.extend(f"     • {tip}" for tip in TIPS)
    lines.extend(["", HEAVY_RULE])
    return render(lines)
