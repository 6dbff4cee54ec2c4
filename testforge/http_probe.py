"""
HTTP probe for API-level checks

A thin wrapper around httpx that issues a GET against a fixed base
address and insists on a 200 response.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Dict, Mapping

import httpx

from .config import get_settings
from .exceptions import TransportError, UnexpectedStatusError
from .reporting import step

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.google.com/"


@dataclass(frozen=True)
class RequestSpec:
    """Immutable base configuration for outbound requests"""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    follow_redirects: bool = True
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def url_for(self, path: str = "/") -> str:
        """Join base_url and path with exactly one slash between them"""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


class HttpProbe:
    """
    Issues GET requests against a configured base address.

    Usage:
        with HttpProbe("https://www.google.com/") as probe:
            response = probe.fetch()
            assert response.text
    """

    EXPECTED_STATUS = 200

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
        headers: Optional[Dict[str, str]] = None,
        follow_redirects: bool = True,
    ):
        settings = get_settings()
        self.spec = RequestSpec(
            base_url=base_url or settings.api_base_url,
            timeout=settings.http_timeout_s,
            follow_redirects=follow_redirects,
            headers=headers or {},
        )
        self._transport = transport
        self._client = client
        self._owns_client = client is None

    @property
    def base_url(self) -> str:
        return self.spec.base_url

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.spec.timeout,
                follow_redirects=self.spec.follow_redirects,
                headers=dict(self.spec.headers),
                transport=self._transport,
            )
        return self._client

    def close(self):
        """Close the HTTP client if this probe created it"""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self):
        self._get_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @step("API GET")
    def fetch(self, path: str = "/") -> httpx.Response:
        """
        GET base_url + path and assert a 200 status.

        Raises:
            TransportError: On connection, read or timeout failures
            UnexpectedStatusError: When the status is not 200
        """
        url = self.spec.url_for(path)
        logger.debug(f"GET {url}")

        try:
            response = self._get_client().get(url)
        except httpx.TransportError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise TransportError(url, str(e) or type(e).__name__) from e

        if response.status_code != self.EXPECTED_STATUS:
            logger.warning(f"HTTP {response.status_code} for {url}")
            raise UnexpectedStatusError(url, response.status_code, self.EXPECTED_STATUS)

        return response
