"""Domain layer: pure models, ports and reference data."""
