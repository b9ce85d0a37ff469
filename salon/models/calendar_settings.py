"""
Calendar settings - partial update body for the calendar display preferences
"""

from typing import Optional
from pydantic import Field

from .base import CamelModel


class TimeRangeIn(CamelModel):
    start_hour: Optional[int] = Field(None, description="0-23")
    end_hour: Optional[int] = Field(None, description="1-24, after startHour")


class DayRangeIn(CamelModel):
    start_day: Optional[int] = Field(None, description="0 = Sunday")
    end_day: Optional[int] = Field(None, description="6 = Saturday")


class CalendarSettingsUpdate(CamelModel):
    time_range: Optional[TimeRangeIn] = Field(None)
    day_range: Optional[DayRangeIn] = Field(None)
    time_slot_interval: Optional[int] = Field(None, description="15, 30 or 60")
    show_weekends: Optional[bool] = Field(None)

    def changes(self) -> dict:
        """camelCase patch in the stored shape."""
        return self.model_dump(by_alias=True, exclude_none=True)
