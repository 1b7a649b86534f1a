"""Dependency injection setup for FastAPI."""
from functools import lru_cache

from .config import settings
from .http_client import get_http_session
from gateway.services import VideoEndpointService, SearchFetcherService, URLShortener
from gateway.services.retrievers import RapidAPISearchRetriever, RapidAPIVideoRetriever
from gateway.utils.validators import EndpointValidator

# Service instances cache
@lru_cache()
def get_endpoint_validator() -> EndpointValidator:
    """Get EndpointValidator instance."""
    return EndpointValidator(get_http_session(), timeout=settings.upstream_timeout_seconds)

@lru_cache()
def get_url_shortener() -> URLShortener:
    """Get URLShortener client instance."""
    return URLShortener(
        settings.url_shortener_url,
        settings.url_shortener_api_key,
        session=get_http_session(),
        timeout=settings.upstream_timeout_seconds
    )

@lru_cache()
def get_video_endpoint_service() -> VideoEndpointService:
    """Get VideoEndpointService instance wired to every configured video provider."""
    timeout = settings.upstream_timeout_seconds
    retrievers = [
        RapidAPIVideoRetriever(provider, get_endpoint_validator(), timeout)
        for provider in settings.video_providers
    ]
    return VideoEndpointService(retrievers, get_url_shortener(), timeout)

@lru_cache()
def get_search_fetcher_service() -> SearchFetcherService:
    """Get SearchFetcherService instance wired to every configured search provider."""
    timeout = settings.upstream_timeout_seconds
    retrievers = [
        RapidAPISearchRetriever(provider, timeout)
        for provider in settings.search_providers
    ]
    return SearchFetcherService(retrievers, timeout)

def build_services() -> None:
    """Validate configuration and construct every service once, at startup."""
    settings.validate()
    get_video_endpoint_service()
    get_search_fetcher_service()
