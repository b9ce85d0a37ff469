"""Storage collection names and settings keys."""


class Collections:
    """Names of the JSON collections; each is also the top-level key in its file."""

    SERVICES = "services"
    CUSTOMERS = "customers"
    APPOINTMENTS = "appointments"
    SETTINGS = "settings"


class SettingsKeys:
    """Keys for entries stored in the settings collection."""

    CALENDAR = "calendar"


class CalendarDefaults:
    """Default calendar display settings."""

    START_HOUR = 8
    END_HOUR = 20
    START_DAY = 0
    END_DAY = 6
    TIME_SLOT_INTERVAL = 30
    SHOW_WEEKENDS = True

    ALLOWED_INTERVALS = (15, 30, 60)
