"""Configuration for holidaycal."""

from .settings import (
    DEFAULT_PROVINCE,
    PROVINCE_CODES,
    HolidayCalSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "DEFAULT_PROVINCE",
    "PROVINCE_CODES",
    "HolidayCalSettings",
    "get_settings",
    "reset_settings",
]
