"""HistoricalAdjustment - per-service usage statistics from a customer's past visits."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .dates import format_datetime


@dataclass
class AdjustmentRecord:
    """One use of a service in a completed appointment."""

    duration: int
    price: int
    appointment_date: datetime
    appointment_id: str

    def to_dict(self) -> dict:
        return {
            "duration": self.duration,
            "price": self.price,
            "appointmentDate": format_datetime(self.appointment_date),
            "appointmentId": self.appointment_id,
        }


@dataclass
class HistoricalAdjustment:
    """Statistics for one service; records are ordered most recent first."""

    service_id: str
    service_name: str
    frequency: int
    average_duration: int
    average_price: int
    most_common_duration: int
    most_common_price: int
    latest_duration: int
    latest_price: int
    recent_trend_duration: int
    recent_trend_price: int
    base_duration: int
    base_price: int
    last_appointment_date: Optional[datetime] = None
    adjustment_history: list[AdjustmentRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "serviceId": self.service_id,
            "serviceName": self.service_name,
            "frequency": self.frequency,
            "averageDuration": self.average_duration,
            "averagePrice": self.average_price,
            "mostCommonDuration": self.most_common_duration,
            "mostCommonPrice": self.most_common_price,
            "latestDuration": self.latest_duration,
            "latestPrice": self.latest_price,
            "recentTrendDuration": self.recent_trend_duration,
            "recentTrendPrice": self.recent_trend_price,
            "baseDuration": self.base_duration,
            "basePrice": self.base_price,
            "lastAppointmentDate": format_datetime(self.last_appointment_date),
            "adjustmentHistory": [r.to_dict() for r in self.adjustment_history],
        }
