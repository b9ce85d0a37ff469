"""Appointment entity - a booking of one or more services at a given time."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Literal, Optional

from .dates import format_datetime, parse_datetime


AppointmentStatus = Literal["scheduled", "completed", "cancelled"]

STATUSES = ("scheduled", "completed", "cancelled")

# Both targets are terminal.
ALLOWED_TRANSITIONS = {
    "scheduled": ("completed", "cancelled"),
    "completed": (),
    "cancelled": (),
}

TITLE_SEPARATOR = " & "


@dataclass
class ServiceSnapshot:
    """Copy of a service's name, duration and price at booking time."""

    id: str
    name: str
    duration: int
    price: int

    @classmethod
    def from_dict(cls, data: dict) -> "ServiceSnapshot":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            duration=int(data["duration"]),
            price=int(data["price"]),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "price": self.price,
        }


def derive_title(services: list[ServiceSnapshot]) -> str:
    """Default title: the service names joined with ' & '."""
    return TITLE_SEPARATOR.join(s.name for s in services)


@dataclass
class Appointment:
    """A booking. Totals, end and the default title follow the service list."""

    id: str
    title: str
    start: datetime
    end: datetime
    client_name: str
    services: list[ServiceSnapshot] = field(default_factory=list)
    client_id: Optional[str] = None
    phone: str = ""
    total_price: int = 0
    total_duration: int = 0
    note: str = ""
    status: AppointmentStatus = "scheduled"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Appointment":
        """Creates an Appointment from its stored JSON form."""
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            start=parse_datetime(data["start"]),
            end=parse_datetime(data.get("end")) or parse_datetime(data["start"]),
            client_id=data.get("clientId") or None,
            client_name=data.get("clientName", ""),
            phone=data.get("phone") or "",
            services=[ServiceSnapshot.from_dict(s) for s in data.get("services", [])],
            total_price=int(data.get("totalPrice") or 0),
            total_duration=int(data.get("totalDuration") or 0),
            note=data.get("note") or "",
            status=data.get("status", "scheduled"),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_dict(self) -> dict:
        """Converts to the stored JSON form."""
        return {
            "id": self.id,
            "title": self.title,
            "start": format_datetime(self.start),
            "end": format_datetime(self.end),
            "clientId": self.client_id,
            "clientName": self.client_name,
            "phone": self.phone,
            "services": [s.to_dict() for s in self.services],
            "totalPrice": self.total_price,
            "totalDuration": self.total_duration,
            "note": self.note,
            "status": self.status,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }

    def recalculate(self) -> None:
        """Recomputes totals and end from the current services and start."""
        self.total_price = sum(s.price for s in self.services)
        self.total_duration = sum(s.duration for s in self.services)
        self.end = self.start + timedelta(minutes=self.total_duration)

    def replace_services(self, services: list[ServiceSnapshot]) -> None:
        """Swaps the service list; a derived title follows the new selection."""
        title_was_derived = not self.title or self.title == derive_title(self.services)
        self.services = list(services)
        if title_was_derived:
            self.title = derive_title(self.services)
        self.recalculate()

    def reschedule(self, start: datetime) -> None:
        self.start = start
        self.recalculate()

    def can_transition_to(self, status: str) -> bool:
        return status in ALLOWED_TRANSITIONS.get(self.status, ())

    @property
    def is_scheduled(self) -> bool:
        return self.status == "scheduled"

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    @property
    def is_cancelled(self) -> bool:
        return self.status == "cancelled"
