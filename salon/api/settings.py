"""Calendar display settings endpoints."""

from fastapi import APIRouter

from ..models import CalendarSettingsUpdate
from ..operations import settings

router = APIRouter(prefix="/settings/calendar", tags=["settings"])


@router.get("")
def get_calendar_settings():
    return settings.get_calendar_settings().to_dict()


@router.put("")
def update_calendar_settings(data: CalendarSettingsUpdate):
    return settings.update_calendar_settings(data.changes()).to_dict()


@router.post("/preset/{name}")
def apply_preset(name: str):
    return settings.apply_calendar_preset(name).to_dict()


@router.post("/reset")
def reset_calendar_settings():
    return settings.reset_calendar_settings().to_dict()


@router.get("/slots")
def get_slots():
    """Slot start times and visible weekdays for the current settings."""
    current = settings.get_calendar_settings()
    return {"slots": current.time_slots(), "days": current.visible_days()}
