"""Shared test configuration and fixtures."""

import json
import logging
from types import SimpleNamespace
from typing import Any, Callable

import httpx
import pytest

from holidaycal.config.settings import reset_settings

BC_2024_HOLIDAYS = [
    ("2024-01-01", 1, "New Year's Day"),
    ("2024-02-19", 0, "Family Day"),
    ("2024-03-29", 1, "Good Friday"),
    ("2024-05-20", 1, "Victoria Day"),
    ("2024-07-01", 1, "Canada Day"),
    ("2024-08-05", 0, "British Columbia Day"),
    ("2024-09-02", 1, "Labour Day"),
    ("2024-09-30", 1, "National Day for Truth and Reconciliation"),
    ("2024-10-14", 1, "Thanksgiving"),
    ("2024-11-11", 1, "Remembrance Day"),
    ("2024-12-25", 1, "Christmas Day"),
]


def make_payload(code: str = "BC", name: str = "British Columbia", holidays: Any = None) -> dict:
    """Build a response body shaped like canada-holidays.ca's province endpoint."""
    rows = BC_2024_HOLIDAYS if holidays is None else holidays
    return {
        "province": {
            "id": code,
            "nameEn": name,
            "nameFr": "Colombie-Britannique",
            "sourceLink": "https://example.com/source",
            "holidays": [
                {
                    "id": index + 1,
                    "date": day,
                    "nameEn": holiday_name,
                    "nameFr": holiday_name,
                    "federal": federal,
                    "observedDate": day,
                }
                for index, (day, federal, holiday_name) in enumerate(rows)
            ],
        }
    }


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Any:
    """Keep user config files, HOLIDAYCAL_* variables and logger state out of tests."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("HOLIDAYCAL_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    reset_settings()

    yield

    reset_settings()
    package_logger = logging.getLogger("holidaycal")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_payload() -> dict:
    return make_payload()


@pytest.fixture
def test_settings() -> SimpleNamespace:
    """Lightweight settings without env or file I/O."""
    return SimpleNamespace(
        province="BC",
        api_base_url="https://canada-holidays.ca/api/v1",
        request_timeout=5.0,
        color=False,
        log_level="WARNING",
    )


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for a MockTransport answering every request with one JSON body."""

    def factory(payload: Any, status_code: int = 200, seen: Any = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(
                status_code,
                content=json.dumps(payload).encode("utf-8"),
                headers={"content-type": "application/json"},
            )

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def payload_factory() -> Callable[..., dict]:
    return make_payload
