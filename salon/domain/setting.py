"""Setting entity - a key/value entry in the settings collection."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .dates import format_datetime, parse_datetime


@dataclass
class Setting:
    """A named JSON object, e.g. the calendar display settings."""

    key: str
    value: dict = field(default_factory=dict)
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Setting":
        return cls(
            key=data["key"],
            value=data.get("value") or {},
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "value": self.value,
            "updatedAt": format_datetime(self.updated_at),
        }
