"""Tests for taxi fare estimation."""

from unittest.mock import AsyncMock

import pytest

from se_transport.application.services.taxi_fare_service import (
    TaxiFareService,
    estimate_fares,
    touches_arlanda,
    uber_deep_link,
)
from se_transport.domain.models import GeoLocation, RoadRoute
from se_transport.domain.reference_data.taxi_companies import TAXI_COMPANIES

KISTA = GeoLocation("Kista", 59.4032, 17.9442)
ARLANDA = GeoLocation("Arlanda Terminal 5", 59.6498, 17.9238, is_airport=True)
SLUSSEN = GeoLocation("Slussen", 59.3195, 18.0722)


def test_metered_fare() -> None:
    """Given a company's rates, when pricing 10 km and 30 min, then all parts are added."""
    taxi_stockholm = TAXI_COMPANIES[0]
    assert taxi_stockholm.calculate_fare(10, 30) == pytest.approx(59 + 149 + 282.5)


def test_touches_arlanda_by_name_or_address() -> None:
    """Given Arlanda in a resolved name or a typed address, when checking, then it matches."""
    to_arlanda = RoadRoute(KISTA, ARLANDA, 30000, 1500)
    in_town = RoadRoute(KISTA, SLUSSEN, 12000, 1200)

    assert touches_arlanda(to_arlanda, "Kista", "T5")
    assert touches_arlanda(in_town, "ARLANDA", "Slussen")
    assert not touches_arlanda(in_town, "Kista", "Slussen")


def test_estimates_include_fixed_prices_for_arlanda() -> None:
    """Given a trip to Arlanda, when estimating, then fixed prices are attached where offered."""
    estimates = estimate_fares(RoadRoute(KISTA, ARLANDA, 30000, 1500))

    assert [e.company for e in estimates] == ["Taxi Stockholm", "Taxi Kurir", "Uber", "Bolt"]
    assert estimates[0].fixed_price_sek == 700
    assert estimates[1].has_fixed_price
    assert not estimates[2].has_fixed_price
    assert estimates[2].deep_link.startswith("https://m.uber.com/ul/?action=setPickup")
    assert estimates[3].deep_link == ""


def test_estimates_in_town_have_no_fixed_price() -> None:
    """Given a trip in town, when estimating, then no fixed price is reported."""
    estimates = estimate_fares(RoadRoute(KISTA, SLUSSEN, 12000, 1200))
    assert not any(e.has_fixed_price for e in estimates)


def test_uber_deep_link_encodes_destination() -> None:
    """Given a destination, when building the Uber link, then coordinates are encoded."""
    link = uber_deep_link(SLUSSEN)
    assert "dropoff%5Blatitude%5D=59.319500" in link
    assert "dropoff%5Bnickname%5D=Slussen" in link


@pytest.mark.asyncio
async def test_quote_geocodes_and_routes() -> None:
    """Given two addresses, when quoting, then both are geocoded and routed once."""
    geocoder = AsyncMock()
    geocoder.geocode.side_effect = [KISTA, SLUSSEN]
    router = AsyncMock()
    router.route.return_value = RoadRoute(KISTA, SLUSSEN, 12000, 1200)

    quote = await TaxiFareService(geocoder, router).quote("Kista", "Slussen")

    assert geocoder.geocode.await_count == 2
    router.route.assert_awaited_once_with(KISTA, SLUSSEN)
    assert quote.route.distance_km == 12
    assert len(quote.estimates) == len(TAXI_COMPANIES)
