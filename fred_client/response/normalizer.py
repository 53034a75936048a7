"""
Turn FRED observation rows into (date, float) pairs.
"""
from collections.abc import Iterable
from datetime import date
from typing import Any

from fred_client.response.models import Observation

MISSING_VALUE = "."


def _field(obs: Observation | dict[str, Any], name: str) -> Any:
    if isinstance(obs, dict):
        return obs.get(name)
    return getattr(obs, name, None)


def parse_observation_date(obs: Observation | dict[str, Any]) -> date | None:
    d = _field(obs, "date")
    if not d:
        return None
    try:
        return date.fromisoformat(d)
    except (TypeError, ValueError):
        return None


def parse_observation_value(obs: Observation | dict[str, Any]) -> float | None:
    """Observation value as float. FRED uses '.' for missing."""
    v = _field(obs, "value")
    if v is None or v == MISSING_VALUE:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def observation_pairs(observations: Iterable[Observation | dict[str, Any]]) -> list[tuple[date, float | None]]:
    """(date, value) per observation, in input order; rows without a valid date are skipped."""
    out: list[tuple[date, float | None]] = []
    for obs in observations:
        d = parse_observation_date(obs)
        if d is None:
            continue
        out.append((d, parse_observation_value(obs)))
    return out
