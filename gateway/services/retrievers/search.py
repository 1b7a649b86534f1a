"""Search results provider adapters."""
import json

from gateway.core.config import ProviderConfig
from gateway.core.exceptions import UpstreamCallError
from gateway.models.requests import SearchQuery
from .rapidapi import RapidAPIClient

class RapidAPISearchRetriever:
    """Search provider answering ``GET {url}?q=<term>`` with a JSON document."""

    def __init__(self, provider: ProviderConfig, timeout: float = 5.0):
        self.client = RapidAPIClient(provider, "search api", timeout)
        self.name = provider.name

    async def get_results(self, query: SearchQuery) -> str:
        body = await self.client.get({"q": query.search_term})
        try:
            json.loads(body)
        except ValueError as e:
            raise UpstreamCallError(self.name, f"malformed JSON response: {e}")
        return body
