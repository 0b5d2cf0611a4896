"""Meter rates of the Stockholm taxi companies that are compared."""

from se_transport.domain.models.taxi import TaxiCompany

TAXI_COMPANIES: tuple[TaxiCompany, ...] = (
    TaxiCompany(
        name="Taxi Stockholm",
        base_fee=59,
        per_km_rate=14.90,
        per_hour_rate=565,
        booking_url="https://www.taxistockholm.se/en/booking/",
        arlanda_fixed_price=700,
    ),
    TaxiCompany(
        name="Taxi Kurir",
        base_fee=55,
        per_km_rate=14.60,
        per_hour_rate=576,
        booking_url="https://www.taxikurir.se/boka",
        arlanda_fixed_price=695,
    ),
    TaxiCompany(
        name="Uber",
        base_fee=30,
        per_km_rate=10,
        per_hour_rate=120,
        has_app_deep_link=True,
    ),
    TaxiCompany(
        name="Bolt",
        base_fee=25,
        per_km_rate=9,
        per_hour_rate=108,
        booking_url="https://bolt.eu/",
    ),
)
