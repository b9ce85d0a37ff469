"""CalendarSettings - display preferences for the booking calendar."""

from dataclasses import dataclass, replace

from ..constants.config_keys import CalendarDefaults
from .errors import ValidationError


SUNDAY = 0
SATURDAY = 6


@dataclass
class CalendarSettings:
    """Visible hours, visible weekdays and slot granularity."""

    start_hour: int = CalendarDefaults.START_HOUR
    end_hour: int = CalendarDefaults.END_HOUR
    start_day: int = CalendarDefaults.START_DAY
    end_day: int = CalendarDefaults.END_DAY
    time_slot_interval: int = CalendarDefaults.TIME_SLOT_INTERVAL
    show_weekends: bool = CalendarDefaults.SHOW_WEEKENDS

    @classmethod
    def from_dict(cls, data: dict) -> "CalendarSettings":
        time_range = data.get("timeRange") or {}
        day_range = data.get("dayRange") or {}
        return cls(
            start_hour=int(time_range.get("startHour", CalendarDefaults.START_HOUR)),
            end_hour=int(time_range.get("endHour", CalendarDefaults.END_HOUR)),
            start_day=int(day_range.get("startDay", CalendarDefaults.START_DAY)),
            end_day=int(day_range.get("endDay", CalendarDefaults.END_DAY)),
            time_slot_interval=int(
                data.get("timeSlotInterval", CalendarDefaults.TIME_SLOT_INTERVAL)
            ),
            show_weekends=bool(data.get("showWeekends", CalendarDefaults.SHOW_WEEKENDS)),
        )

    def to_dict(self) -> dict:
        return {
            "timeRange": {"startHour": self.start_hour, "endHour": self.end_hour},
            "dayRange": {"startDay": self.start_day, "endDay": self.end_day},
            "timeSlotInterval": self.time_slot_interval,
            "showWeekends": self.show_weekends,
        }

    def validate(self) -> "CalendarSettings":
        """Raises ValidationError when a value is out of range."""
        if not 0 <= self.start_hour <= 23:
            raise ValidationError("startHour must be between 0 and 23", "timeRange")
        if not 1 <= self.end_hour <= 24:
            raise ValidationError("endHour must be between 1 and 24", "timeRange")
        if self.start_hour >= self.end_hour:
            raise ValidationError("startHour must be before endHour", "timeRange")
        if not (SUNDAY <= self.start_day <= SATURDAY and SUNDAY <= self.end_day <= SATURDAY):
            raise ValidationError("Days must be between 0 (Sunday) and 6 (Saturday)", "dayRange")
        if self.start_day > self.end_day:
            raise ValidationError("startDay must not be after endDay", "dayRange")
        if self.time_slot_interval not in CalendarDefaults.ALLOWED_INTERVALS:
            raise ValidationError(
                f"timeSlotInterval must be one of {CalendarDefaults.ALLOWED_INTERVALS}",
                "timeSlotInterval",
            )
        return self

    def merged(self, changes: dict) -> "CalendarSettings":
        """Returns a copy with the camelCase fields in changes applied."""
        current = self.to_dict()
        for key in ("timeRange", "dayRange"):
            if changes.get(key):
                current[key] = {**current[key], **changes[key]}
        for key in ("timeSlotInterval", "showWeekends"):
            if changes.get(key) is not None:
                current[key] = changes[key]
        return CalendarSettings.from_dict(current)

    def time_slots(self) -> list[str]:
        """Slot start times as HH:MM, from start_hour up to end_hour."""
        slots = []
        minute = self.start_hour * 60
        while minute < self.end_hour * 60:
            hours, mins = divmod(minute, 60)
            slots.append(f"{hours:02d}:{mins:02d}")
            minute += self.time_slot_interval
        return slots

    def visible_days(self) -> list[int]:
        days = range(self.start_day, self.end_day + 1)
        if self.show_weekends:
            return list(days)
        return [d for d in days if d not in (SUNDAY, SATURDAY)]


PRESETS = {
    "business": CalendarSettings(
        start_hour=9, end_hour=18, start_day=1, end_day=5,
        time_slot_interval=30, show_weekends=False,
    ),
    "extended": CalendarSettings(
        start_hour=8, end_hour=21, start_day=0, end_day=6,
        time_slot_interval=30, show_weekends=True,
    ),
    "weekend": CalendarSettings(
        start_hour=10, end_hour=17, start_day=0, end_day=6,
        time_slot_interval=60, show_weekends=True,
    ),
}


def get_preset(name: str) -> CalendarSettings:
    if name not in PRESETS:
        raise ValidationError(
            f"Unknown calendar preset '{name}'. Available: {', '.join(PRESETS)}", "preset"
        )
    return replace(PRESETS[name])
