# webtools_geocoding/geocode/transport.py
import logging
from typing import Mapping, Optional, Protocol

import httpx

from webtools_geocoding.core.config import settings
from .exceptions import (
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    TransportError,
)

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Performs one HTTP GET and returns the raw body, or raises."""

    def fetch(self, url: str, headers: Mapping[str, str]) -> bytes: ...


class HttpxTransport:
    def __init__(self, client: Optional[httpx.Client] = None, timeout: Optional[float] = None):
        self.timeout = timeout or settings.timeout
        self._client = client or httpx.Client(timeout=self.timeout)
        self._owns_client = client is None

    def fetch(self, url: str, headers: Mapping[str, str]) -> bytes:
        try:
            resp = self._client.get(url, headers=dict(headers))
        except httpx.HTTPError as e:
            raise TransportError(f"Webtools network error: {e}", url) from e

        status = resp.status_code
        if status in (401, 403):
            logger.warning("Webtools rejected credentials: HTTP %s for %s", status, url)
            raise InvalidCredentials(f"Webtools HTTP {status}: invalid credentials", url)
        if status == 429:
            logger.warning("Webtools rate-limited: HTTP 429 for %s", url)
            raise QuotaExceeded("Webtools HTTP 429: quota exceeded", url)
        if status >= 400:
            logger.warning("Webtools HTTP %s for %s", status, url)
            raise InvalidServerResponse.create(url, status)

        body = resp.content
        if not body:
            raise InvalidServerResponse.empty_response(url)
        return body

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
