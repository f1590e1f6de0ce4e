"""Parametric building elements with construction-time validation."""

__version__ = "0.1.0"
