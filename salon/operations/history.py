"""Operations over a customer's appointment history."""

from typing import Iterable, Optional

from ..analytics.history import analyze, apply_suggestions
from ..config import logger as log
from ..container import get_container
from ..domain.adjustable_service import AdjustableService
from ..domain.appointment import Appointment
from ..domain.errors import NotFoundError
from ..domain.history import HistoricalAdjustment


def _require_customer(customer_id: str) -> None:
    if not get_container().customers.get_by_id(customer_id):
        raise NotFoundError("Customer", customer_id)


def get_customer_history(customer_id: str, completed_only: bool = False) -> list[Appointment]:
    """Gets a customer's appointments, most recent first."""
    log.debug("ops.history", "get_customer_history", customer_id=customer_id, completed_only=completed_only)
    _require_customer(customer_id)
    appointments = get_container().appointments.get_by_customer(customer_id)
    if completed_only:
        appointments = [a for a in appointments if a.is_completed]
    return appointments


def analyze_adjustments(customer_id: str, service_ids: Iterable[str]) -> list[HistoricalAdjustment]:
    """Per-service statistics from the customer's completed appointments.

    Services the customer never completed are omitted.
    """
    service_ids = list(service_ids)
    log.info("ops.history", "analyze_adjustments called", customer_id=customer_id, services=len(service_ids))
    _require_customer(customer_id)

    container = get_container()
    catalog = {s.id: s for s in container.services.get_all()}
    results = analyze(container.appointments.get_by_customer(customer_id), service_ids, catalog)
    log.debug("ops.history", "analyze_adjustments result", found=len(results))
    return results


def suggest_adjustments(
    customer_id: str,
    selection: list[AdjustableService],
    use_average: bool = False,
    service_ids: Optional[Iterable[str]] = None,
) -> list[AdjustableService]:
    """Pre-fills the selection with the customer's latest (or average) values."""
    adjustments = analyze_adjustments(customer_id, [s.id for s in selection])
    return apply_suggestions(selection, adjustments, use_average, service_ids)
