"""Bundled JSON schemas for machine-readable output."""
