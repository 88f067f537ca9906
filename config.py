"""Helper for retrieving configuration settings from environment variables."""

import os
import warnings
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
if ENV_PATH.exists():
    load_dotenv(str(ENV_PATH))


PLACEHOLDERS = [
    "xxxxxxxxxx",
    "changeme",
]

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _is_placeholder(value: str) -> bool:
    """Return True if the value looks like a placeholder."""
    if value is None:
        return False
    lowered = value.lower()
    if "x" * 6 in lowered and lowered.strip("x") == "":
        return True
    for ph in PLACEHOLDERS:
        if ph in lowered:
            return True
    return False


def get_config(name: str, default: Optional[str] = None) -> str:
    """Retrieve configuration from environment variables."""
    env_value = os.getenv(name)
    value = env_value if env_value is not None else default
    if value is None:
        raise RuntimeError(f"Missing configuration for {name}")

    if _is_placeholder(value):
        warnings.warn(
            f"Configuration {name} is using a placeholder value: {value}",
            RuntimeWarning,
        )

    return value


def get_log_level(override: Optional[str] = None) -> str:
    """Return the log level name from ``override`` or ``WASABI_USAGE_LOG_LEVEL``.

    Unknown names fall back to ``WARNING`` with a ``RuntimeWarning``.
    """
    value = (override or get_config("WASABI_USAGE_LOG_LEVEL", "WARNING")).upper()
    if value not in LOG_LEVELS:
        warnings.warn(f"Unknown log level {value!r}, using WARNING", RuntimeWarning)
        return "WARNING"
    return value
