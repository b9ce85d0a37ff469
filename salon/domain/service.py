"""Service entity - an entry in the salon's menu."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .dates import format_datetime, parse_datetime


@dataclass
class Service:
    """A named, priced, timed offering. Deleting it only flips is_active."""

    id: str
    name: str
    duration_minutes: int
    price: int
    category: str
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Service":
        """Creates a Service from its stored JSON form."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            duration_minutes=int(data["duration"]),
            price=int(data["price"]),
            category=data.get("category", ""),
            description=data.get("description"),
            is_active=bool(data.get("isActive", True)),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_dict(self) -> dict:
        """Converts to the stored JSON form."""
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration_minutes,
            "price": self.price,
            "category": self.category,
            "description": self.description,
            "isActive": self.is_active,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }

    @property
    def price_formatted(self) -> str:
        """Price formatted with currency symbol."""
        return f"¥{self.price:,}"

    @property
    def duration_formatted(self) -> str:
        """Formatted duration."""
        if self.duration_minutes >= 60:
            hours, mins = divmod(self.duration_minutes, 60)
            return f"{hours}h {mins}min" if mins else f"{hours}h"
        return f"{self.duration_minutes} min"
