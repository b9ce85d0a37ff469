"""Adjustment endpoints. Nothing here touches storage."""

from fastapi import APIRouter

from ..constants.adjustment_presets import (
    BULK_PRESETS,
    COMMON_REASONS,
    DURATION_PRESETS,
    PRICE_PRESETS,
)
from ..models import BulkAdjustmentRequest, OverrideRequest, ResetRequest
from ..pricing import adjustments

router = APIRouter(prefix="/adjustments", tags=["adjustments"])


@router.get("/presets")
def get_presets():
    return {
        "bulk": BULK_PRESETS,
        "duration": DURATION_PRESETS,
        "price": PRICE_PRESETS,
        "reasons": COMMON_REASONS,
    }


@router.post("/preview")
def preview(data: BulkAdjustmentRequest):
    """Original vs. new values per service and in total."""
    return adjustments.preview_bulk(data.selection(), data.directive.to_domain()).to_dict()


@router.post("/bulk")
def bulk_apply(data: BulkAdjustmentRequest):
    results = adjustments.bulk_apply(data.selection(), data.directive.to_domain())
    return [s.to_dict() for s in results]


@router.post("/override")
def override(data: OverrideRequest):
    result = adjustments.override(data.service.to_domain(), data.duration, data.price, data.reason)
    return result.to_dict()


@router.post("/reset")
def reset(data: ResetRequest):
    return [adjustments.reset(s.to_domain()).to_dict() for s in data.services]
