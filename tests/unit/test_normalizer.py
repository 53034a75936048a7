"""Unit tests for observation normalizer (pure functions)."""
from datetime import date

import pytest

from fred_client.response.models import Observation
from fred_client.response.normalizer import (
    observation_pairs,
    parse_observation_date,
    parse_observation_value,
)


def obs(d: str, v: str) -> Observation:
    return Observation(realtime_start="2024-03-01", realtime_end="2024-03-01", date=d, value=v)


class TestParseObservation:
    def test_valid(self):
        o = obs("2024-01-15", "3.4")
        assert parse_observation_date(o) == date(2024, 1, 15)
        assert parse_observation_value(o) == pytest.approx(3.4)

    def test_missing_value_dot(self):
        o = obs("2024-01-15", ".")
        assert parse_observation_date(o) == date(2024, 1, 15)
        assert parse_observation_value(o) is None

    def test_raw_dict(self):
        assert parse_observation_date({"date": "2024-01-15", "value": "1"}) == date(2024, 1, 15)
        assert parse_observation_value({"date": "2024-01-15", "value": "1"}) == 1.0

    def test_missing_date(self):
        assert parse_observation_date({"value": "3.4"}) is None

    def test_invalid_date(self):
        assert parse_observation_date(obs("not-a-date", "1")) is None

    def test_non_numeric_value(self):
        assert parse_observation_value(obs("2024-01-15", "n/a")) is None


class TestObservationPairs:
    def test_order_and_missing(self):
        pairs = observation_pairs([obs("2023-10-01", "106.4"), obs("2023-11-01", "."), obs("2023-12-01", "106.8")])
        assert pairs == [
            (date(2023, 10, 1), pytest.approx(106.4)),
            (date(2023, 11, 1), None),
            (date(2023, 12, 1), pytest.approx(106.8)),
        ]

    def test_skips_bad_dates(self):
        pairs = observation_pairs([obs("bad", "1.0"), obs("2024-01-01", "2.0")])
        assert pairs == [(date(2024, 1, 1), 2.0)]

    def test_empty(self):
        assert observation_pairs([]) == []
