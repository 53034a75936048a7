"""
Build FRED request URLs.

Format: <base>/<path>?<k1>=<v1>&...&api_key=<key>&file_type=json
Parameters keep the order they were given in. Values are concatenated as-is (no URL-encoding).
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from fred_client.core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.stlouisfed.org/fred"


class FileType(str, Enum):
    JSON = "json"


def format_value(value: Any) -> str:
    """String form of a query value as FRED expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        # datetime is a date subclass; FRED takes YYYY-MM-DD only
        return value.isoformat()[:10]
    if isinstance(value, (list, tuple)):
        return ";".join(format_value(v) for v in value)
    return str(value)


@dataclass(frozen=True)
class FredRequest:
    path: str
    params: tuple[tuple[str, Any], ...] = ()
    file_type: FileType = FileType.JSON

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("FRED request path must not be empty")
        object.__setattr__(self, "params", tuple((k, v) for k, v in self.params))

    def query(self, api_key: str) -> str:
        if not api_key:
            raise ConfigurationError("Expected FRED_API_KEY to be set")
        pairs = [f"{k}={format_value(v)}" for k, v in self.params]
        pairs.append(f"api_key={api_key}")
        pairs.append(f"file_type={self.file_type.value}")
        return "&".join(pairs)

    def url(self, api_key: str, base_url: str = DEFAULT_BASE_URL) -> str:
        return f"{base_url.rstrip('/')}/{self.path}?{self.query(api_key)}"


def build_url(
    path: str,
    params: list[tuple[str, Any]] | None = None,
    *,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Shortcut for FredRequest(path, params).url(api_key, base_url)."""
    return FredRequest(path, tuple(params or ())).url(api_key, base_url)


def redact(url: str) -> str:
    """URL with the api_key value masked, for logs and error messages."""
    # the key is always appended after caller params, so take the last occurrence
    head, sep, rest = url.rpartition("api_key=")
    if not sep:
        return url
    _, amp, tail = rest.partition("&")
    return f"{head}api_key=***{amp}{tail}"
