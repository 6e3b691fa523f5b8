"""Source locations and HTTP settings, overridable via the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Final

ELM_URL: Final = "https://www.eastlondonmosque.org.uk/prayer-times"
MI_PAGE: Final = "https://www.masjidibrahim.co.uk/prayer-timetable/"
DEFAULT_USER_AGENT: Final = "MyPrayerTimes/1.0 (personal, non-commercial)"
DEFAULT_TIMEOUT: Final = 30.0  # seconds

ELM_SOURCE_NAME: Final = "ELM"
MI_SOURCE_NAME: Final = "UKIM Masjid Ibrahim"


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SourceSettings:
    elm_url: str = ELM_URL
    mi_page: str = MI_PAGE
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT


def get_source_settings() -> SourceSettings:
    return SourceSettings(
        elm_url=_env_str("PRAYER_TIMES_ELM_URL", ELM_URL),
        mi_page=_env_str("PRAYER_TIMES_MI_URL", MI_PAGE),
        user_agent=_env_str("PRAYER_TIMES_USER_AGENT", DEFAULT_USER_AGENT),
        timeout=_env_float("PRAYER_TIMES_TIMEOUT", DEFAULT_TIMEOUT),
    )


__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "ELM_SOURCE_NAME",
    "ELM_URL",
    "MI_PAGE",
    "MI_SOURCE_NAME",
    "SourceSettings",
    "get_source_settings",
]
