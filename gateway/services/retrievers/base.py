"""Retrieval capabilities implemented by every upstream provider adapter."""
from typing import Protocol, TypeVar, runtime_checkable

from gateway.models.requests import SearchQuery, VideoParameters

Q = TypeVar("Q", contravariant=True)

@runtime_checkable
class Retriever(Protocol[Q]):
    """Fetches one payload from one upstream provider.

    Implementations raise ``UpstreamCallError`` on any failure and never return
    partial results.
    """

    name: str

    async def get_results(self, query: Q) -> str:
        ...

class SearchResultsRetriever(Retriever[SearchQuery], Protocol):
    """Returns the raw JSON search payload for a query."""

class VideoEndpointRetriever(Retriever[VideoParameters], Protocol):
    """Returns the first live media URL for a video ID."""
