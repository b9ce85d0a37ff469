"""Tests for customer operations."""

from datetime import datetime, timedelta

import pytest

from salon.domain.errors import NotFoundError, ValidationError
from salon.operations import appointments, customers


def test_create_customer_with_details(container):
    customer = customers.create_customer(
        "佐藤 健",
        "080-2345-6789",
        email="ken@example.com",
        gender="male",
        preferences={"hairType": "硬い", "unknown": "ignored"},
    )

    assert customer.email == "ken@example.com"
    assert customer.preferences == {"hairType": "硬い"}


def test_phone_must_be_unique(hanako):
    with pytest.raises(ValidationError):
        customers.create_customer("別人", "090-1234-5678")


def test_name_and_phone_required(container):
    with pytest.raises(ValidationError):
        customers.create_customer("", "090-0000-0000")
    with pytest.raises(ValidationError):
        customers.create_customer("名前", " ")


def test_update_keeps_id_and_checks_phone(hanako):
    other = customers.create_customer("佐藤 健", "080-2345-6789")

    updated = customers.update_customer(hanako.id, {"memo": "カラー希望", "id": "ignored"})
    assert updated.id == hanako.id
    assert updated.memo == "カラー希望"

    with pytest.raises(ValidationError):
        customers.update_customer(hanako.id, {"phone": other.phone})
    with pytest.raises(ValidationError):
        customers.update_customer(hanako.id, {"name": "  "})


def test_delete_customer_keeps_appointments(hanako, cut):
    appointment = appointments.create_appointment(
        None, datetime(2024, 3, 1, 10, 0), [{"id": cut.id}], client_id=hanako.id
    )

    deleted = customers.delete_customer(hanako.id)

    assert deleted.id == hanako.id
    assert customers.get_customer(hanako.id) is None
    assert appointments.get_appointment(appointment.id) is not None
    with pytest.raises(NotFoundError):
        customers.delete_customer(hanako.id)


def test_statistics_are_computed_on_read(hanako, cut, color):
    start = datetime(2024, 3, 1, 10, 0)
    first = appointments.create_appointment(None, start, [{"id": color.id}], client_id=hanako.id)
    second = appointments.create_appointment(
        None, start + timedelta(days=7), [{"id": cut.id, "price": 5000}], client_id=hanako.id
    )
    appointments.complete_appointment(first.id)
    appointments.cancel_appointment(second.id)

    view = customers.get_customer(hanako.id)
    data = view.to_dict()

    assert data["totalVisits"] == 1
    assert data["totalSpent"] == 8000
    assert data["averageSpent"] == 8000
    assert data["favoriteServices"] == ["カラー"]
    assert [a["id"] for a in data["appointments"]] == [second.id, first.id]

    [listed] = customers.list_customers()
    assert listed.statistics == view.statistics


def test_list_search_and_sort(hanako, cut):
    ken = customers.create_customer("佐藤 健", "080-2345-6789", kana="さとう けん")
    visit = appointments.create_appointment(None, datetime(2024, 3, 1, 10), [{"id": cut.id}], client_id=ken.id)
    appointments.complete_appointment(visit.id)

    assert [v.customer.id for v in customers.list_customers(search="さとう")] == [ken.id]
    assert [v.customer.id for v in customers.list_customers(search="1234")] == [hanako.id]

    by_spend = customers.list_customers(sort_by="totalSpent", sort_order="desc")
    assert [v.customer.id for v in by_spend] == [ken.id, hanako.id]

    fallback = customers.list_customers(sort_by="bogus")
    assert [v.customer.name for v in fallback] == sorted(["山田 花子", "佐藤 健"])


def test_deleting_unknown_customer_writes_nothing(container, data_dir):
    with pytest.raises(NotFoundError):
        customers.delete_customer("missing")

    assert not (data_dir / "customers.json").exists()
