"""Datetime helpers for the JSON wire format."""

from datetime import datetime
from typing import Optional, Union


def parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parses an ISO-8601 string (a trailing 'Z' is accepted)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def sort_key(value: Optional[datetime]) -> float:
    """Orders naive and aware datetimes together; None sorts first."""
    if value is None:
        return float("-inf")
    return value.timestamp()
