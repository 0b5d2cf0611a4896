"""Nominatim (OpenStreetMap) geocoding adapter."""

from se_transport.adapters.nominatim.geocoder import NominatimGeocoder

__all__ = ["NominatimGeocoder"]
