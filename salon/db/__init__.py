"""
Demo data for the JSON store
"""
from .seed import DEFAULT_SERVICES, seed_all

__all__ = ["DEFAULT_SERVICES", "seed_all"]
