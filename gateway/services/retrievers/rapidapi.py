"""HTTP access to RapidAPI-hosted providers."""
import asyncio
from typing import Dict

import aiohttp

from gateway.core.config import ProviderConfig
from gateway.core.exceptions import ConfigurationError, UpstreamCallError

class RapidAPIClient:
    """Issues authenticated GET requests against one RapidAPI endpoint."""

    def __init__(self, provider: ProviderConfig, label: str, timeout: float = 5.0):
        if not provider.name or not provider.key or not provider.url:
            raise ConfigurationError(label, "env variables not set")

        try:
            host = provider.host
        except ValueError as e:
            raise ConfigurationError(label, f"error parsing URL: {e}")
        if not host:
            raise ConfigurationError(label, f"no host in URL {provider.url!r}")

        self.name = provider.name
        self.url = provider.url
        self.host = host
        self._key = provider.key
        self.timeout = timeout

    def headers(self) -> Dict[str, str]:
        return {
            "x-rapidapi-key": self._key,
            "x-rapidapi-host": self.host,
        }

    async def get(self, params: Dict[str, str]) -> str:
        """GET the endpoint with ``params`` and return the body of a 2xx answer."""
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url, params=params, headers=self.headers()) as response:
                    body = await response.text()
                    if not 200 <= response.status < 300:
                        raise UpstreamCallError(
                            self.name, f"received non-2xx response {response.status}", response.status
                        )
                    return body
        except aiohttp.ClientError as e:
            raise UpstreamCallError(self.name, f"error making request: {e}")
        except asyncio.TimeoutError:
            raise UpstreamCallError(self.name, f"request timed out after {self.timeout}s")
