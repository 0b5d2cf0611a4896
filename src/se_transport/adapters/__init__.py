"""Adapters for transport providers, configuration and output."""
