"""Upstream provider adapters."""
from .base import Retriever, SearchResultsRetriever, VideoEndpointRetriever
from .rapidapi import RapidAPIClient
from .search import RapidAPISearchRetriever
from .video import RapidAPIVideoRetriever

__all__ = [
    "Retriever", "SearchResultsRetriever", "VideoEndpointRetriever",
    "RapidAPIClient", "RapidAPISearchRetriever", "RapidAPIVideoRetriever"
]
