"""canada-holidays.ca API client module."""

from .exceptions import (
    HolidayContentError,
    HolidayError,
    HolidayFetchError,
    HolidayNetworkError,
    HolidayTimeoutError,
)
from .fetcher import HolidayFetcher, build_url
from .models import Holiday, Province, ProvinceHolidays

__all__ = [
    "Holiday",
    "HolidayContentError",
    "HolidayError",
    "HolidayFetchError",
    "HolidayFetcher",
    "HolidayNetworkError",
    "HolidayTimeoutError",
    "Province",
    "ProvinceHolidays",
    "build_url",
]
