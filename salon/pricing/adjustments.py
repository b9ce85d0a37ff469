"""Adjustment engine - computes price and duration overrides for selected services.

Every function here is pure: it takes an AdjustableService (or a list of
them) and returns new instances. Adjustments are always computed from the
service's base values, so applying the same directive twice gives the same
result as applying it once.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Literal, Optional

from ..constants.adjustment_presets import BULK_PRESETS, AdjustmentLimits
from ..domain.adjustable_service import AdjustableService
from ..domain.errors import ValidationError


AdjustmentMode = Literal["percentage", "fixed", "time"]

MODES = ("percentage", "fixed", "time")


def round_half_up(value: float) -> int:
    """Rounds x.5 upwards, unlike round() which rounds to even."""
    return math.floor(value + 0.5)


def clamp_price(price: float) -> int:
    return max(AdjustmentLimits.MIN_PRICE, round_half_up(price))


def clamp_duration(duration: float) -> int:
    return max(AdjustmentLimits.MIN_DURATION_MINUTES, round_half_up(duration))


def adjust_price_by_percentage(base_price: int, percent: float) -> int:
    """newPrice = round(base * (1 + percent/100)), never below zero."""
    return clamp_price(base_price * (1 + percent / 100))


def adjust_price_by_amount(base_price: int, amount: float) -> int:
    return clamp_price(base_price + amount)


def adjust_duration(base_duration: int, minutes: float) -> int:
    """Adds minutes to the base duration with a 5 minute floor."""
    return clamp_duration(base_duration + minutes)


@dataclass
class AdjustmentDirective:
    """One adjustment applied uniformly to a set of services.

    price_adjustment is a percentage in "percentage" mode and an amount in
    "fixed" mode; it is ignored in "time" mode. time_adjustment applies in
    every mode when non-zero.
    """

    mode: AdjustmentMode = "percentage"
    price_adjustment: float = 0
    time_adjustment: int = 0
    reason: Optional[str] = None

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValidationError(
                f"Unknown adjustment mode '{self.mode}'. Use one of {', '.join(MODES)}",
                "mode",
            )

    @classmethod
    def from_preset(cls, name: str) -> "AdjustmentDirective":
        for preset in BULK_PRESETS:
            if preset["name"] == name:
                return cls(
                    mode=preset["mode"],
                    price_adjustment=preset["price"],
                    time_adjustment=preset["time"],
                    reason=preset["reason"],
                )
        raise ValidationError(f"Unknown adjustment preset '{name}'", "preset")

    def adjusted_values(self, base_duration: int, base_price: int) -> tuple[int, int]:
        """Returns (duration, price) after applying this directive to base values."""
        price = base_price
        if self.mode == "percentage":
            price = adjust_price_by_percentage(base_price, self.price_adjustment)
        elif self.mode == "fixed":
            price = adjust_price_by_amount(base_price, self.price_adjustment)

        duration = base_duration
        if self.time_adjustment:
            duration = adjust_duration(base_duration, self.time_adjustment)
        return duration, price


def override(
    service: AdjustableService,
    duration: float,
    price: float,
    reason: Optional[str] = None,
) -> AdjustableService:
    """Sets explicit values (not deltas), subject to the same floors."""
    return replace(
        service,
        adjusted_duration=clamp_duration(duration),
        adjusted_price=clamp_price(price),
        adjustment_reason=reason or None,
    )


def reset(service: AdjustableService) -> AdjustableService:
    """Restores the base values and clears the reason."""
    return replace(
        service,
        adjusted_duration=service.base_duration,
        adjusted_price=service.base_price,
        adjustment_reason=None,
    )


def apply_directive(
    service: AdjustableService, directive: AdjustmentDirective
) -> AdjustableService:
    duration, price = directive.adjusted_values(service.base_duration, service.base_price)
    return replace(
        service,
        adjusted_duration=duration,
        adjusted_price=price,
        adjustment_reason=directive.reason or None,
    )


def bulk_apply(
    services: list[AdjustableService], directive: AdjustmentDirective
) -> list[AdjustableService]:
    return [apply_directive(s, directive) for s in services]


@dataclass
class ServicePreview:
    id: str
    name: str
    original_price: int
    new_price: int
    original_duration: int
    new_duration: int

    @property
    def price_delta(self) -> int:
        return self.new_price - self.original_price

    @property
    def duration_delta(self) -> int:
        return self.new_duration - self.original_duration

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "originalPrice": self.original_price,
            "newPrice": self.new_price,
            "priceDelta": self.price_delta,
            "originalDuration": self.original_duration,
            "newDuration": self.new_duration,
            "durationDelta": self.duration_delta,
        }


@dataclass
class BulkPreview:
    items: list[ServicePreview] = field(default_factory=list)

    @property
    def original_total_price(self) -> int:
        return sum(i.original_price for i in self.items)

    @property
    def new_total_price(self) -> int:
        return sum(i.new_price for i in self.items)

    @property
    def original_total_duration(self) -> int:
        return sum(i.original_duration for i in self.items)

    @property
    def new_total_duration(self) -> int:
        return sum(i.new_duration for i in self.items)

    def to_dict(self) -> dict:
        return {
            "items": [i.to_dict() for i in self.items],
            "total": {
                "originalPrice": self.original_total_price,
                "newPrice": self.new_total_price,
                "priceDelta": self.new_total_price - self.original_total_price,
                "originalDuration": self.original_total_duration,
                "newDuration": self.new_total_duration,
                "durationDelta": self.new_total_duration - self.original_total_duration,
            },
        }


def preview_bulk(
    services: list[AdjustableService], directive: AdjustmentDirective
) -> BulkPreview:
    """Base vs. adjusted values per service and in total, without applying anything."""
    items = []
    for service in services:
        duration, price = directive.adjusted_values(service.base_duration, service.base_price)
        items.append(
            ServicePreview(
                id=service.id,
                name=service.name,
                original_price=service.base_price,
                new_price=price,
                original_duration=service.base_duration,
                new_duration=duration,
            )
        )
    return BulkPreview(items=items)
