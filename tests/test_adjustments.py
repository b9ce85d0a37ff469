"""Tests for the adjustment engine."""

import pytest

from salon.domain.adjustable_service import AdjustableService
from salon.domain.errors import ValidationError
from salon.pricing.adjustments import (
    AdjustmentDirective,
    adjust_duration,
    adjust_price_by_amount,
    adjust_price_by_percentage,
    apply_directive,
    bulk_apply,
    override,
    preview_bulk,
    reset,
    round_half_up,
)


def make_service(duration=40, price=4500, service_id="1", name="カット"):
    return AdjustableService(
        id=service_id,
        name=name,
        base_duration=duration,
        adjusted_duration=duration,
        base_price=price,
        adjusted_price=price,
    )


def test_percentage_discount():
    assert adjust_price_by_percentage(4500, -20) == 3600


def test_fixed_discount():
    assert adjust_price_by_amount(4500, -500) == 4000


def test_fixed_discount_never_goes_negative():
    assert adjust_price_by_amount(300, -500) == 0
    assert adjust_price_by_percentage(4500, -150) == 0


def test_time_extension():
    assert adjust_duration(40, 10) == 50


def test_time_reduction_stops_at_five_minutes():
    assert adjust_duration(40, -50) == 5


def test_rounding_is_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(4166.67) == 4167
    assert adjust_price_by_percentage(1250, 10) == 1375


def test_is_adjusted_follows_values():
    service = make_service()
    assert not service.is_adjusted

    changed = override(service, 40, 4000)
    assert changed.is_adjusted
    assert changed.to_dict()["isAdjusted"] is True


def test_override_applies_floors():
    result = override(make_service(), 2, -100, "テスト")
    assert result.adjusted_duration == 5
    assert result.adjusted_price == 0
    assert result.adjustment_reason == "テスト"


def test_override_does_not_mutate_input():
    service = make_service()
    override(service, 60, 6000)
    assert service.adjusted_duration == 40
    assert service.adjusted_price == 4500


def test_reset_is_idempotent():
    adjusted = override(make_service(), 60, 3000, "VIP")

    once = reset(adjusted)
    twice = reset(once)

    for result in (once, twice):
        assert result.adjusted_duration == 40
        assert result.adjusted_price == 4500
        assert result.adjustment_reason is None
        assert not result.is_adjusted


def test_time_mode_leaves_price_alone():
    directive = AdjustmentDirective(mode="time", price_adjustment=-20, time_adjustment=10)
    result = apply_directive(make_service(), directive)
    assert result.adjusted_duration == 50
    assert result.adjusted_price == 4500


def test_price_mode_with_time_changes_both():
    directive = AdjustmentDirective(mode="percentage", price_adjustment=-10, time_adjustment=15)
    result = apply_directive(make_service(), directive)
    assert result.adjusted_duration == 55
    assert result.adjusted_price == 4050


def test_directive_is_computed_from_base_values():
    directive = AdjustmentDirective(mode="fixed", price_adjustment=-500)
    once = apply_directive(make_service(), directive)
    again = apply_directive(once, directive)
    assert again.adjusted_price == 4000


def test_bulk_apply_uses_reason_for_every_service():
    services = [make_service(), make_service(90, 8000, "2", "カラー")]
    directive = AdjustmentDirective.from_preset("初回割引 (20%OFF)")

    results = bulk_apply(services, directive)

    assert [r.adjusted_price for r in results] == [3600, 6400]
    assert all(r.adjustment_reason == "初回来店割引" for r in results)


def test_unknown_mode_is_rejected():
    with pytest.raises(ValidationError):
        AdjustmentDirective(mode="bogus")


def test_unknown_preset_is_rejected():
    with pytest.raises(ValidationError):
        AdjustmentDirective.from_preset("存在しない")


def test_preview_totals_and_deltas():
    services = [make_service(), make_service(90, 8000, "2", "カラー")]
    directive = AdjustmentDirective(mode="fixed", price_adjustment=-500, time_adjustment=-10)

    preview = preview_bulk(services, directive).to_dict()

    first = preview["items"][0]
    assert first["originalPrice"] == 4500
    assert first["newPrice"] == 4000
    assert first["priceDelta"] == -500
    assert first["durationDelta"] == -10
    assert preview["total"] == {
        "originalPrice": 12500,
        "newPrice": 11500,
        "priceDelta": -1000,
        "originalDuration": 130,
        "newDuration": 110,
        "durationDelta": -20,
    }
