"""Static, read-only lookup tables."""
