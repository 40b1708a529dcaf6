"""HTTP client for downloading holiday data from canada-holidays.ca."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from .. import __version__
from .exceptions import (
    HolidayContentError,
    HolidayFetchError,
    HolidayNetworkError,
    HolidayTimeoutError,
)
from .models import ProvinceHolidays

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://canada-holidays.ca/api/v1"


def build_url(base_url: str, province: str) -> str:
    """Build the provider URL for one province.

    The year travels as a query parameter, see ``HolidayFetcher.fetch_holidays``.
    """
    return f"{base_url.rstrip('/')}/provinces/{province}"


class HolidayFetcher:
    """Async HTTP client for the canada-holidays.ca province endpoint."""

    def __init__(self, settings: Any, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize holiday fetcher.

        Args:
            settings: Application settings (``api_base_url``, ``request_timeout``)
            transport: Optional httpx transport, used to stub the network in tests
        """
        self.settings = settings
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

        logger.debug("Holiday fetcher initialized")

    async def __aenter__(self) -> "HolidayFetcher":
        """Async context manager entry."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self._close_client()

    async def _ensure_client(self) -> None:
        """Ensure HTTP client exists."""
        if self.client is None or self.client.is_closed:
            self.client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.request_timeout),
                follow_redirects=True,
                transport=self.transport,
                headers={
                    "User-Agent": f"holidaycal/{__version__}",
                    "Accept": "application/json",
                },
            )

    async def _close_client(self) -> None:
        """Close HTTP client."""
        if self.client and not self.client.is_closed:
            await self.client.aclose()

    async def fetch_holidays(self, province: str, year: int) -> ProvinceHolidays:
        """Fetch the holidays of ``province`` for ``year``.

        A single GET request is issued; there are no retries.

        Args:
            province: Two-letter province/territory code
            year: Calendar year

        Returns:
            ProvinceHolidays: Decoded response with the province's English name
            and its holidays in provider order.

        Raises:
            HolidayFetchError: The provider answered with a non-2xx status
            HolidayTimeoutError: The request timed out
            HolidayNetworkError: Connection, redirect or body decoding failure
            HolidayContentError: The body is not valid JSON or lacks the
                province/holiday fields
        """
        await self._ensure_client()
        if self.client is None:
            raise HolidayNetworkError(province, year, "HTTP client not initialized")

        url = build_url(self.settings.api_base_url, province)
        logger.debug(f"Fetching holidays from {url} (year={year})")

        try:
            response = await self.client.get(url, params={"year": str(year)})
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching holidays from {url}: {e}")
            raise HolidayTimeoutError(
                province, year, f"request timeout after {self.settings.request_timeout}s"
            ) from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error fetching holidays from {url}: {status}")
            raise HolidayFetchError(
                province, year, f"HTTP {status}: {e.response.reason_phrase}", status_code=status
            ) from e

        except httpx.RequestError as e:
            logger.error(f"Network error fetching holidays from {url}: {e}")
            raise HolidayNetworkError(province, year, f"network error: {e}") from e

        return self._parse_response(response, province, year)

    def _parse_response(
        self, response: httpx.Response, province: str, year: int
    ) -> ProvinceHolidays:
        """Decode and validate the JSON body.

        Args:
            response: Successful HTTP response
            province: Requested province code, for error context
            year: Requested year, for error context

        Returns:
            Validated response model
        """
        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON received for {province} {year}: {e}")
            raise HolidayContentError(province, year, "invalid JSON response") from e

        try:
            result = ProvinceHolidays.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected response structure for {province} {year}: {e}")
            raise HolidayContentError(province, year, "unexpected response structure") from e

        logger.debug(
            f"Fetched {len(result.holidays)} holidays for {result.province.name_en} ({year})"
        )
        return result
