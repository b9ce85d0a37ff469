"""Tests for history operations against the JSON store."""

from datetime import datetime, timedelta

import pytest

from salon.domain.adjustable_service import AdjustableService
from salon.domain.errors import NotFoundError
from salon.operations import appointments, history

START = datetime(2024, 3, 1, 10, 0)


@pytest.fixture
def visits(hanako, cut):
    """Completed cuts at 4000, 4000, 4500 (oldest first) plus one cancelled."""
    booked = []
    for days, price in ((60, 4000), (30, 4000), (0, 4500)):
        appointment = appointments.create_appointment(
            None, START - timedelta(days=days), [{"id": cut.id, "price": price}], client_id=hanako.id
        )
        booked.append(appointments.complete_appointment(appointment.id))
    cancelled = appointments.create_appointment(
        None, START + timedelta(days=3), [{"id": cut.id, "price": 100}], client_id=hanako.id
    )
    appointments.cancel_appointment(cancelled.id)
    return booked


def test_history_most_recent_first(hanako, visits):
    everything = history.get_customer_history(hanako.id)
    completed = history.get_customer_history(hanako.id, completed_only=True)

    assert len(everything) == 4
    assert everything[0].status == "cancelled"
    assert [a.id for a in completed] == [a.id for a in reversed(visits)]


def test_analyze_adjustments(hanako, cut, color, visits):
    results = history.analyze_adjustments(hanako.id, [cut.id, color.id])

    [result] = results
    assert result.service_id == cut.id
    assert result.latest_price == 4500
    assert result.average_price == 4167
    assert result.most_common_price == 4000
    assert result.recent_trend_price == 4167
    assert result.base_price == 4500


def test_suggest_adjustments(hanako, cut, visits):
    selection = [AdjustableService.from_service(cut)]

    [latest] = history.suggest_adjustments(hanako.id, selection)
    [average] = history.suggest_adjustments(hanako.id, selection, use_average=True)

    assert latest.adjusted_price == 4500
    assert not latest.is_adjusted
    assert average.adjusted_price == 4167
    assert average.adjustment_reason == "過去の平均値 (3回の実績)"


def test_unknown_customer(container):
    with pytest.raises(NotFoundError):
        history.get_customer_history("missing")
    with pytest.raises(NotFoundError):
        history.analyze_adjustments("missing", ["x"])
