"""History analyzer - summarizes how a customer's services were priced and timed in the past."""

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Optional

from ..constants.adjustment_presets import AdjustmentReasons
from ..domain.adjustable_service import AdjustableService
from ..domain.appointment import Appointment
from ..domain.dates import sort_key
from ..domain.history import AdjustmentRecord, HistoricalAdjustment
from ..domain.service import Service
from ..pricing.adjustments import override, round_half_up

RECENT_WINDOW = 3
HISTORY_LIMIT = 10


def completed_most_recent_first(appointments: Iterable[Appointment]) -> list[Appointment]:
    return sorted(
        (a for a in appointments if a.is_completed),
        key=lambda a: sort_key(a.start),
        reverse=True,
    )


def _mean(values: list[int]) -> int:
    return round_half_up(sum(values) / len(values))


def _mode(values: list[int]) -> int:
    # Counter keeps first-seen order, so ties go to the most recent value.
    return Counter(values).most_common(1)[0][0]


def summarize(
    service_id: str,
    records: list[AdjustmentRecord],
    service_name: str,
    catalog_entry: Optional[Service] = None,
) -> HistoricalAdjustment:
    """Builds the statistics for one service from records ordered most recent first."""
    durations = [r.duration for r in records]
    prices = [r.price for r in records]
    recent = records[:RECENT_WINDOW]
    latest = records[0]

    return HistoricalAdjustment(
        service_id=service_id,
        service_name=service_name,
        frequency=len(records),
        average_duration=_mean(durations),
        average_price=_mean(prices),
        most_common_duration=_mode(durations),
        most_common_price=_mode(prices),
        latest_duration=latest.duration,
        latest_price=latest.price,
        recent_trend_duration=_mean([r.duration for r in recent]),
        recent_trend_price=_mean([r.price for r in recent]),
        base_duration=catalog_entry.duration_minutes if catalog_entry else latest.duration,
        base_price=catalog_entry.price if catalog_entry else latest.price,
        last_appointment_date=latest.appointment_date,
        adjustment_history=records[:HISTORY_LIMIT],
    )


def analyze(
    appointments: Iterable[Appointment],
    service_ids: Iterable[str],
    catalog: Mapping[str, Service],
) -> list[HistoricalAdjustment]:
    """Statistics per requested service over the completed appointments given.

    Services without any completed use are left out of the result rather
    than reported with zeros. Results follow the order of service_ids.
    """
    wanted = list(dict.fromkeys(service_ids))
    records: dict[str, list[AdjustmentRecord]] = {sid: [] for sid in wanted}
    names: dict[str, str] = {}

    for appointment in completed_most_recent_first(appointments):
        for snapshot in appointment.services:
            if snapshot.id not in records:
                continue
            records[snapshot.id].append(
                AdjustmentRecord(
                    duration=snapshot.duration,
                    price=snapshot.price,
                    appointment_date=appointment.start,
                    appointment_id=appointment.id,
                )
            )
            names.setdefault(snapshot.id, snapshot.name)

    return [
        summarize(sid, records[sid], names[sid], catalog.get(sid))
        for sid in wanted
        if records[sid]
    ]


def apply_suggestions(
    selection: list[AdjustableService],
    adjustments: list[HistoricalAdjustment],
    use_average: bool = False,
    service_ids: Optional[Iterable[str]] = None,
) -> list[AdjustableService]:
    """Overrides selected services with their latest or average historical values.

    Only services listed in service_ids (all with history when None) are
    touched; the rest come back unchanged.
    """
    by_id = {a.service_id: a for a in adjustments}
    chosen = set(service_ids) if service_ids is not None else set(by_id)

    result = []
    for service in selection:
        adjustment = by_id.get(service.id)
        if adjustment is None or service.id not in chosen:
            result.append(service)
            continue
        if use_average:
            result.append(
                override(
                    service,
                    adjustment.average_duration,
                    adjustment.average_price,
                    AdjustmentReasons.HISTORICAL_AVERAGE.format(frequency=adjustment.frequency),
                )
            )
        else:
            result.append(
                override(
                    service,
                    adjustment.latest_duration,
                    adjustment.latest_price,
                    AdjustmentReasons.SAME_AS_LAST,
                )
            )
    return result
