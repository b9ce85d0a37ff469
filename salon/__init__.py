"""Salon appointment, customer and service management."""

__version__ = "0.1.0"
