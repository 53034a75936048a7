"""Blocking HTTP transport (httpx). One GET per call, no retries."""
import logging
from typing import Protocol

import httpx

from fred_client.core.errors import TransportError
from fred_client.request.builder import redact

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def get(self, url: str) -> str: ...


class HttpxTransport:
    """Fetches response text with a lazily created httpx.Client."""

    def __init__(self, timeout: float = 30.0, client: httpx.Client | None = None) -> None:
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def get(self, url: str) -> str:
        safe_url = redact(url)
        logger.debug("GET %s", safe_url)
        try:
            r = self.client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {safe_url} failed: {e}", url=safe_url) from e

        if r.status_code >= 500:
            raise TransportError(
                f"Request to {safe_url} failed with status {r.status_code}",
                url=safe_url,
                status=r.status_code,
            )
        try:
            text = r.content.decode(r.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as e:
            raise TransportError(f"Response from {safe_url} is not text", url=safe_url, status=r.status_code) from e

        # FRED reports bad parameters as 4xx with a JSON error body; only those go on to the decoder.
        if r.status_code >= 400 and "error_code" not in text:
            raise TransportError(
                f"Request to {safe_url} failed with status {r.status_code}",
                url=safe_url,
                status=r.status_code,
            )
        return text
