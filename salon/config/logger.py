"""Centralized console logger for the salon backend."""

from datetime import datetime
from typing import Any

from rich.console import Console
from rich.markup import escape

from .env import get_log_level

console = Console(stderr=True)

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
COLORS = {"debug": "dim", "info": "cyan", "warn": "yellow", "error": "red bold"}


def _threshold() -> int:
    return LEVELS.get(get_log_level(), LEVELS["info"])


def _format_value(value: Any, max_length: int = 120) -> str:
    if value is None:
        return "None"
    s = str(value)
    if len(s) > max_length:
        s = s[:max_length] + "..."
    return escape(s)


def log(level: str, context: str, message: str, **data):
    if LEVELS.get(level, 0) < _threshold():
        return

    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    color = COLORS.get(level, "white")
    level_str = level.upper().ljust(5)

    data_str = ""
    if data:
        data_str = " | " + ", ".join(
            f"{key}={_format_value(value)}" for key, value in data.items()
        )

    console.print(
        f"[dim]{timestamp}[/dim] [{color}]{level_str}[/{color}] "
        f"[blue]{escape('[' + context + ']')}[/blue] {escape(message)}{data_str}",
        markup=True,
        highlight=False,
    )


def debug(context: str, message: str, **data):
    log("debug", context, message, **data)


def info(context: str, message: str, **data):
    log("info", context, message, **data)


def warn(context: str, message: str, **data):
    log("warn", context, message, **data)


def error(context: str, message: str, **data):
    log("error", context, message, **data)
