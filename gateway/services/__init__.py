"""Service layer modules for the Video Gateway."""
from .fallback import FallbackChain
from .url_shortener import URLShortener
from .video_service import VideoEndpointService
from .search_service import SearchFetcherService

__all__ = [
    "FallbackChain", "URLShortener", "VideoEndpointService", "SearchFetcherService"
]
