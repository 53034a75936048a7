"""Pytest fixtures. Run tests from project root (pyproject sets pythonpath)."""
import json
from typing import Any

import pytest

from fred_client.core.config import Settings

TEST_KEY = "abcdef0123456789"


class FakeTransport:
    """In-memory transport: records requested URLs, replays canned bodies or raises."""

    def __init__(self, *responses: str | Exception):
        self.responses = list(responses)
        self.urls: list[str] = []

    def get(self, url: str) -> str:
        self.urls.append(url)
        if not self.responses:
            raise AssertionError(f"unexpected request: {url}")
        r = self.responses.pop(0)
        if isinstance(r, Exception):
            raise r
        return r


@pytest.fixture
def settings() -> Settings:
    return Settings(fred_api_key=TEST_KEY, _env_file=None)


@pytest.fixture
def settings_no_key(monkeypatch) -> Settings:
    monkeypatch.delenv("FRED_API_KEY", raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def series_item_data():
    """Factory for one series item as FRED returns it."""

    def make(**overrides: Any) -> dict[str, Any]:
        data = {
            "id": "JPNCPIALLMINMEI",
            "realtime_start": "2024-03-01",
            "realtime_end": "2024-03-01",
            "title": "Consumer Price Index: All Items for Japan",
            "observation_start": "1955-01-01",
            "observation_end": "2023-12-01",
            "frequency": "Monthly",
            "frequency_short": "M",
            "units": "Index 2015=100",
            "units_short": "Index 2015=100",
            "seasonal_adjustment": "Not Seasonally Adjusted",
            "seasonal_adjustment_short": "NSA",
            "last_updated": "2024-02-13 15:21:02-06",
            "popularity": 54,
            "group_popularity": 55,
            "notes": "OECD descriptor ID: CPALTT01",
        }
        data.update(overrides)
        return data

    return make


@pytest.fixture
def series_body(series_item_data) -> str:
    return json.dumps(
        {
            "realtime_start": "2024-03-01",
            "realtime_end": "2024-03-01",
            "seriess": [series_item_data()],
        }
    )


@pytest.fixture
def series_tags_body() -> str:
    return json.dumps(
        {
            "realtime_start": "2024-03-01",
            "realtime_end": "2024-03-01",
            "order_by": "series_count",
            "sort_order": "desc",
            "count": 2,
            "offset": 0,
            "limit": 1000,
            "tags": [
                {
                    "name": "japan",
                    "group_id": "geo",
                    "notes": "",
                    "created": "2012-02-27 10:18:19-06",
                    "popularity": 62,
                    "series_count": 8840,
                },
                {
                    "name": "cpi",
                    "group_id": "gen",
                    "notes": None,
                    "created": "2012-02-27 10:18:19-06",
                    "popularity": 80,
                    "series_count": 6504,
                },
            ],
        }
    )


@pytest.fixture
def observations_body() -> str:
    return json.dumps(
        {
            "realtime_start": "2024-03-01",
            "realtime_end": "2024-03-01",
            "observation_start": "1600-01-01",
            "observation_end": "9999-12-31",
            "units": "lin",
            "output_type": 1,
            "file_type": "json",
            "order_by": "observation_date",
            "sort_order": "asc",
            "count": 3,
            "offset": 0,
            "limit": 100000,
            "observations": [
                {"realtime_start": "2024-03-01", "realtime_end": "2024-03-01", "date": "2023-10-01", "value": "106.4"},
                {"realtime_start": "2024-03-01", "realtime_end": "2024-03-01", "date": "2023-11-01", "value": "."},
                {"realtime_start": "2024-03-01", "realtime_end": "2024-03-01", "date": "2023-12-01", "value": "106.8"},
            ],
        }
    )


@pytest.fixture
def api_error_body() -> str:
    return '{"error_code":400,"error_message":"Bad Request.  The series does not exist."}'
