"""AdjustableService - a selected service whose price and duration can be overridden."""

from dataclasses import dataclass
from typing import Optional

from .appointment import ServiceSnapshot
from .service import Service


@dataclass
class AdjustableService:
    """Booking-flow wrapper around a catalog snapshot.

    Never stored on its own: it collapses into a ServiceSnapshot carrying
    the adjusted values when the appointment is saved.
    """

    id: str
    name: str
    base_duration: int
    adjusted_duration: int
    base_price: int
    adjusted_price: int
    adjustment_reason: Optional[str] = None

    @classmethod
    def from_service(cls, service: Service) -> "AdjustableService":
        return cls(
            id=service.id,
            name=service.name,
            base_duration=service.duration_minutes,
            adjusted_duration=service.duration_minutes,
            base_price=service.price,
            adjusted_price=service.price,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "AdjustableService":
        base_duration = int(data["baseDuration"])
        base_price = int(data["basePrice"])
        return cls(
            id=str(data["id"]),
            name=data["name"],
            base_duration=base_duration,
            adjusted_duration=int(data.get("adjustedDuration", base_duration)),
            base_price=base_price,
            adjusted_price=int(data.get("adjustedPrice", base_price)),
            adjustment_reason=data.get("adjustmentReason") or None,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "baseDuration": self.base_duration,
            "adjustedDuration": self.adjusted_duration,
            "basePrice": self.base_price,
            "adjustedPrice": self.adjusted_price,
            "isAdjusted": self.is_adjusted,
            "adjustmentReason": self.adjustment_reason,
        }

    @property
    def is_adjusted(self) -> bool:
        return (
            self.adjusted_duration != self.base_duration
            or self.adjusted_price != self.base_price
        )

    def to_snapshot(self) -> ServiceSnapshot:
        """Flattens to the stored form; the reason is not kept."""
        return ServiceSnapshot(
            id=self.id,
            name=self.name,
            duration=self.adjusted_duration,
            price=self.adjusted_price,
        )
