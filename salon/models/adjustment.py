"""
Adjustment - request bodies for price and duration adjustments and history suggestions
"""

from typing import Literal, Optional
from pydantic import Field

from ..domain.adjustable_service import AdjustableService
from ..pricing.adjustments import AdjustmentDirective
from .base import CamelModel


class AdjustableServiceIn(CamelModel):
    """
    A selected service in the booking flow. Adjusted values default to the base values.
    """

    id: str = Field(..., description="Catalog service ID")
    name: str = Field(..., description="Service name")
    base_duration: int = Field(..., description="Catalog duration in minutes")
    base_price: int = Field(..., description="Catalog price in yen")
    adjusted_duration: Optional[int] = Field(None)
    adjusted_price: Optional[int] = Field(None)
    adjustment_reason: Optional[str] = Field(None)

    def to_domain(self) -> AdjustableService:
        return AdjustableService(
            id=self.id,
            name=self.name,
            base_duration=self.base_duration,
            adjusted_duration=(
                self.adjusted_duration if self.adjusted_duration is not None else self.base_duration
            ),
            base_price=self.base_price,
            adjusted_price=self.adjusted_price if self.adjusted_price is not None else self.base_price,
            adjustment_reason=self.adjustment_reason,
        )


class DirectiveIn(CamelModel):
    """
    Either a preset name or explicit values.
    """

    preset: Optional[str] = Field(None, description="Bulk preset name, e.g. 初回割引")
    mode: Literal["percentage", "fixed", "time"] = Field(default="percentage")
    price_adjustment: float = Field(default=0, description="Percent or yen, depending on mode")
    time_adjustment: int = Field(default=0, description="Minutes to add or remove")
    reason: Optional[str] = Field(None)

    def to_domain(self) -> AdjustmentDirective:
        if self.preset:
            return AdjustmentDirective.from_preset(self.preset)
        return AdjustmentDirective(
            mode=self.mode,
            price_adjustment=self.price_adjustment,
            time_adjustment=self.time_adjustment,
            reason=self.reason,
        )


class BulkAdjustmentRequest(CamelModel):
    services: list[AdjustableServiceIn] = Field(default_factory=list)
    directive: DirectiveIn = Field(default_factory=DirectiveIn)

    def selection(self) -> list[AdjustableService]:
        return [s.to_domain() for s in self.services]


class OverrideRequest(CamelModel):
    service: AdjustableServiceIn
    duration: float = Field(..., description="New duration in minutes, at least 5")
    price: float = Field(..., description="New price in yen, at least 0")
    reason: Optional[str] = Field(None)


class ResetRequest(CamelModel):
    services: list[AdjustableServiceIn] = Field(default_factory=list)


class AnalysisRequest(CamelModel):
    service_ids: list[str] = Field(default_factory=list)


class SuggestionRequest(CamelModel):
    services: list[AdjustableServiceIn] = Field(default_factory=list)
    use_average: bool = Field(default=False, description="Average values instead of the latest ones")
    service_ids: Optional[list[str]] = Field(None, description="Limit to these services")
