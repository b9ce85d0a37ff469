"""
Request schemas for the HTTP API
"""
from .service import ServiceCreate, ServiceUpdate
from .customer import CustomerCreate, CustomerPreferences, CustomerUpdate
from .appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    RescheduleRequest,
    ServiceSelection,
)
from .adjustment import (
    AdjustableServiceIn,
    AnalysisRequest,
    BulkAdjustmentRequest,
    DirectiveIn,
    OverrideRequest,
    ResetRequest,
    SuggestionRequest,
)
from .calendar_settings import CalendarSettingsUpdate, DayRangeIn, TimeRangeIn

__all__ = [
    "ServiceCreate",
    "ServiceUpdate",
    "CustomerCreate",
    "CustomerPreferences",
    "CustomerUpdate",
    "AppointmentCreate",
    "AppointmentUpdate",
    "RescheduleRequest",
    "ServiceSelection",
    "AdjustableServiceIn",
    "AnalysisRequest",
    "BulkAdjustmentRequest",
    "DirectiveIn",
    "OverrideRequest",
    "ResetRequest",
    "SuggestionRequest",
    "CalendarSettingsUpdate",
    "DayRangeIn",
    "TimeRangeIn",
]
