"""Dependency wiring and shared clients."""
