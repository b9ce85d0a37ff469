"""Customer statistics projection - visit and spend figures derived from appointments."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..domain.appointment import Appointment
from ..domain.dates import format_datetime
from ..pricing.adjustments import round_half_up
from .history import completed_most_recent_first

FAVORITE_LIMIT = 5


@dataclass
class CustomerStatistics:
    total_visits: int = 0
    total_spent: int = 0
    average_spent: int = 0
    last_visit: Optional[datetime] = None
    favorite_services: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalVisits": self.total_visits,
            "totalSpent": self.total_spent,
            "averageSpent": self.average_spent,
            "lastVisit": format_datetime(self.last_visit),
            "favoriteServices": list(self.favorite_services),
        }


def project(customer_id: str, appointments: Iterable[Appointment]) -> CustomerStatistics:
    """Computes a customer's statistics from their completed appointments only.

    Callers may pass the whole appointment set; other customers' bookings
    and scheduled or cancelled ones are ignored.
    """
    completed = completed_most_recent_first(
        a for a in appointments if a.client_id == customer_id
    )
    if not completed:
        return CustomerStatistics()

    total_spent = sum(a.total_price for a in completed)
    usage = Counter(s.name for a in completed for s in a.services)

    return CustomerStatistics(
        total_visits=len(completed),
        total_spent=total_spent,
        average_spent=round_half_up(total_spent / len(completed)),
        last_visit=completed[0].start,
        favorite_services=[name for name, _ in usage.most_common(FAVORITE_LIMIT)],
    )
