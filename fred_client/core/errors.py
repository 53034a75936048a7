"""
Error taxonomy for FRED requests.

Every failure of a connector call surfaces as one of the four FredError subclasses below.
None of them is retried or recovered from inside the library.
"""
import json
from typing import Any


class FredError(Exception):
    """Base class for all errors raised by a FRED request."""


class ConfigurationError(FredError):
    """The API key (or other required setting) is missing."""


class TransportError(FredError):
    """Network or HTTP-layer failure: connection refused, timeout, 5xx, unreadable body."""

    def __init__(self, message: str, *, url: str | None = None, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status


class ApiError(FredError):
    """FRED answered, but the body is an error object (``error_code`` / ``error_message``)."""

    def __init__(self, body: str):
        self.body = body
        self.error_code, self.error_message = _parse_error_fields(body)
        if self.error_code is not None:
            msg = f"FRED API error {self.error_code}: {self.error_message}"
        else:
            msg = f"FRED API error: {body[:200]}"
        super().__init__(msg)


class DecodeError(FredError):
    """The body did not match the expected response schema."""

    def __init__(self, message: str, body: str):
        super().__init__(f"Failed to parse response: {message}")
        self.message = message
        self.body = body


def _parse_error_fields(body: str) -> tuple[int | None, str | None]:
    """Best-effort read of error_code/error_message from the body or its first line."""
    candidates = [body]
    first_line = body.splitlines()[0] if body else ""
    if first_line != body:
        candidates.append(first_line)
    for text in candidates:
        try:
            data: Any = json.loads(text)
        except ValueError:
            continue
        if isinstance(data, dict) and "error_code" in data:
            code = data.get("error_code")
            message = data.get("error_message")
            return (code if isinstance(code, int) else None), (str(message) if message is not None else None)
    return None, None
