"""Environment variables configuration."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


def get_data_dir() -> Path:
    """Returns the directory holding the JSON collections."""
    return Path(os.getenv("SALON_DATA_DIR", str(PROJECT_ROOT / "data")))


def get_log_level() -> str:
    """Returns the log threshold name (debug, info, warn, error)."""
    return os.getenv("LOG_LEVEL", "info").lower()


def get_api_host() -> str:
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    return int(os.getenv("API_PORT", "8000"))
