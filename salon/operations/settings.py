"""Operations for the calendar display settings."""

from ..config import logger as log
from ..constants.config_keys import SettingsKeys
from ..container import get_container
from ..domain.calendar_settings import CalendarSettings, get_preset


def get_calendar_settings() -> CalendarSettings:
    """Returns the stored settings, or the defaults when nothing is stored."""
    setting = get_container().settings.get(SettingsKeys.CALENDAR)
    if not setting:
        return CalendarSettings()
    return CalendarSettings.from_dict(setting.value)


def _save(settings: CalendarSettings) -> CalendarSettings:
    settings.validate()
    get_container().settings.set(SettingsKeys.CALENDAR, settings.to_dict())
    return settings


def update_calendar_settings(changes: dict) -> CalendarSettings:
    """Applies a partial camelCase patch; nothing is saved if the result is invalid."""
    log.info("ops.settings", "update_calendar_settings called", fields=sorted(changes))
    with get_container().settings.locked():
        return _save(get_calendar_settings().merged(changes))


def apply_calendar_preset(name: str) -> CalendarSettings:
    log.info("ops.settings", "apply_calendar_preset called", preset=name)
    return _save(get_preset(name))


def reset_calendar_settings() -> CalendarSettings:
    log.info("ops.settings", "reset_calendar_settings called")
    get_container().settings.delete(SettingsKeys.CALENDAR)
    return CalendarSettings()
