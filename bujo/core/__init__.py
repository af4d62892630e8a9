"""Core constants and domain errors."""
