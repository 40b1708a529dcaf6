"""Holiday API specific exceptions for error handling."""

from typing import Optional, Union


class HolidayError(Exception):
    """Base exception for holiday fetch errors.

    The message always carries the province/year context so the CLI can
    report it verbatim.
    """

    def __init__(
        self,
        province: str,
        year: Union[int, str],
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        message = f"Unable to fetch holidays for {province} in {year}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.message = message
        self.province = province
        self.year = year
        self.detail = detail
        self.status_code = status_code


class HolidayFetchError(HolidayError):
    """Exception raised when the provider answers with a non-success status."""



class HolidayNetworkError(HolidayError):
    """Exception raised for network-related errors."""



class HolidayTimeoutError(HolidayError):
    """Exception raised when the request times out."""



class HolidayContentError(HolidayError):
    """Exception raised when the response body is not the expected JSON."""

