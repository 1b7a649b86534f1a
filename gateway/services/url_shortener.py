"""Client for the external URL shortener that caches resolved video endpoints."""
import asyncio
from typing import Optional
from urllib.parse import quote, urlparse

import requests

from gateway.core.exceptions import ConfigurationError, ShortenerError
from gateway.models.shortener import ShortenRequest, ShortenResponse
from gateway.utils.logging import CorrelatedLogger

class URLShortener:
    """Shlink-style REST shortener: ``GET {base}/{slug}`` and ``POST {base}``."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: float = 5.0
    ):
        if not base_url or not api_key:
            raise ConfigurationError("url shortener", "server endpoint and api key must be provided")

        self.base_url = base_url
        self._api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = CorrelatedLogger(__name__)

        # Surface a bad base URL at startup instead of on the first request
        self.domain()

    def domain(self) -> str:
        """Hostname of the shortener, sent as the domain of new short links."""
        try:
            hostname = urlparse(self.base_url).hostname
        except ValueError as e:
            raise ConfigurationError("URL_SHORTENER_URL", f"failed to parse URL: {e}")
        if not hostname:
            raise ConfigurationError("URL_SHORTENER_URL", f"no hostname in {self.base_url!r}")
        return hostname

    def _slug_url(self, slug: str) -> str:
        return f"{self.base_url.rstrip('/')}/{quote(slug, safe='')}"

    async def exists(self, slug: str) -> bool:
        """Whether a short link for ``slug`` is already registered."""
        try:
            response = await asyncio.to_thread(
                self.session.get,
                self._slug_url(slug),
                headers={"X-Api-Key": self._api_key},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ShortenerError("exists", f"failed to send request: {e}")

        if response.status_code == 404:
            return False
        if response.status_code == 200:
            return True
        raise ShortenerError("exists", f"received non-200 response: {response.status_code}", response.status_code)

    def build_request(self, long_url: str, slug: str, valid_until: str) -> ShortenRequest:
        """Prepare the create-short-link body for ``long_url`` under ``slug``."""
        try:
            domain = self.domain()
        except ConfigurationError as e:
            raise ShortenerError("build_request", e.message)

        return ShortenRequest(
            long_url=long_url,
            slug=slug,
            valid_until=valid_until,
            domain=domain
        )

    async def shorten(self, request: ShortenRequest) -> str:
        """Register the short link and return the shortener's public short URL."""
        try:
            response = await asyncio.to_thread(
                self.session.post,
                self.base_url,
                json=request.model_dump(by_alias=True),
                headers={"Content-Type": "application/json", "X-Api-Key": self._api_key},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ShortenerError("shorten", f"failed to send request: {e}")

        if response.status_code != 200:
            raise ShortenerError(
                "shorten",
                f"received non-200 response {response.status_code}: {response.text}",
                response.status_code
            )

        try:
            body = ShortenResponse.model_validate(response.json())
        except ValueError as e:
            raise ShortenerError("shorten", f"failed to decode response body: {e}")

        self.logger.info(f"Created short link {body.short_url} for slug {request.slug}")
        return body.short_url
