"""Search results service."""
from typing import Optional, Sequence

from gateway.models.requests import SearchQuery
from gateway.services.fallback import FallbackChain
from gateway.services.retrievers.base import SearchResultsRetriever


class SearchFetcherService:
    """Proxies a search to the first search provider that answers."""

    def __init__(self, retrievers: Sequence[SearchResultsRetriever], timeout: float = 5.0):
        self.chain = FallbackChain(retrievers, "search results", timeout)

    async def search(self, query: SearchQuery, request_id: Optional[str] = None) -> str:
        return await self.chain.fetch(query, request_id)
