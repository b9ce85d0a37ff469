"""
Appointment - request bodies for booking and editing appointments
"""

from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from .base import CamelModel


AppointmentStatus = Literal["scheduled", "completed", "cancelled"]


class ServiceSelection(CamelModel):
    """
    One selected service. Only the id is required; missing values come
    from the catalog. Adjusted values are sent as duration and price.
    """

    id: str = Field(..., description="Catalog service ID")
    name: Optional[str] = Field(None)
    duration: Optional[int] = Field(None, description="Minutes, after adjustment")
    price: Optional[int] = Field(None, description="Yen, after adjustment")


class AppointmentCreate(CamelModel):
    client_name: Optional[str] = Field(None, description="Defaults to the customer's name")
    client_id: Optional[str] = Field(None, description="Registered customer ID")
    phone: Optional[str] = Field(None)
    start: datetime = Field(..., description="Start time, ISO-8601")
    services: list[ServiceSelection] = Field(default_factory=list)
    note: Optional[str] = Field(None)
    title: Optional[str] = Field(None, description="Custom title; defaults to the service names")

    def selected_services(self) -> list[dict]:
        return [s.model_dump(exclude_none=True) for s in self.services]


class AppointmentUpdate(CamelModel):
    """
    Partial update of a scheduled appointment. end and totals are
    always recomputed, so they are not accepted.
    """

    title: Optional[str] = Field(None)
    start: Optional[datetime] = Field(None)
    services: Optional[list[ServiceSelection]] = Field(None)
    note: Optional[str] = Field(None)
    client_name: Optional[str] = Field(None)
    client_id: Optional[str] = Field(None)
    phone: Optional[str] = Field(None)
    status: Optional[AppointmentStatus] = Field(None)

    def changes(self) -> dict:
        data = self.model_dump(exclude={"services"}, exclude_unset=True)
        if self.services is not None:
            data["services"] = [s.model_dump(exclude_none=True) for s in self.services]
        return data


class RescheduleRequest(CamelModel):
    start: datetime = Field(..., description="New start time, ISO-8601")
