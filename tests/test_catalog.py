"""Tests for catalog operations."""

import pytest

from salon.domain.errors import NotFoundError, ValidationError
from salon.operations import catalog


def test_create_service(container):
    service = catalog.create_service("  カット ", 40, 4500, "カット", "シャンプー込み")

    assert service.name == "カット"
    assert service.is_active
    assert service.created_at == service.updated_at
    assert catalog.get_service(service.id) == service


@pytest.mark.parametrize(
    "name, duration, price, category",
    [
        ("", 40, 4500, "カット"),
        ("カット", 0, 4500, "カット"),
        ("カット", 40, -1, "カット"),
        ("カット", 40, 4500, " "),
    ],
)
def test_create_service_rejects_invalid_values(container, name, duration, price, category):
    with pytest.raises(ValidationError):
        catalog.create_service(name, duration, price, category)
    assert catalog.list_services(is_active="all") == []


def test_duplicate_active_name_is_rejected(cut):
    with pytest.raises(ValidationError):
        catalog.create_service("カット", 30, 3000, "カット")


def test_deactivated_name_can_be_reused(cut):
    catalog.deactivate_service(cut.id)

    replacement = catalog.create_service("カット", 45, 5000, "カット")

    assert replacement.id != cut.id


def test_deactivate_keeps_the_service(cut, color):
    catalog.deactivate_service(cut.id)

    assert [s.name for s in catalog.list_services()] == ["カラー"]
    assert {s.id for s in catalog.list_services(is_active="all")} == {cut.id, color.id}
    assert [s.id for s in catalog.list_services(is_active=False)] == [cut.id]
    assert catalog.get_service(cut.id).is_active is False


def test_reactivation_checks_name_uniqueness(cut):
    catalog.deactivate_service(cut.id)
    catalog.create_service("カット", 45, 5000, "カット")

    with pytest.raises(ValidationError):
        catalog.update_service(cut.id, {"is_active": True})


def test_search_and_category_filters(cut, color):
    catalog.create_service("ヘッドスパ", 40, 5000, "ケア", "炭酸スパ")

    assert [s.name for s in catalog.list_services(search="スパ")] == ["ヘッドスパ"]
    assert [s.name for s in catalog.list_services(category="カラー")] == ["カラー"]
    assert len(catalog.list_services(category="all")) == 3


def test_update_service(cut):
    updated = catalog.update_service(cut.id, {"price": 4800, "duration_minutes": 45})

    assert updated.id == cut.id
    assert (updated.price, updated.duration_minutes) == (4800, 45)
    assert updated.updated_at >= cut.updated_at


def test_update_rejects_name_of_other_active_service(cut, color):
    with pytest.raises(ValidationError):
        catalog.update_service(color.id, {"name": "カット"})


def test_update_unknown_service(container):
    with pytest.raises(NotFoundError):
        catalog.update_service("missing", {"price": 1})
