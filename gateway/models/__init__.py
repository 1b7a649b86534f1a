"""Data models for the Video Gateway."""
from .requests import SearchQuery, VideoParameters
from .video import ReturnedEndpoint, ReturnedEndpointList
from .shortener import ShortenRequest, ShortenResponse
from .responses import (
    ResponseMetadata, ErrorInfo, ErrorResponse,
    ShortenedEndpoint, ProviderStatus, HealthData
)

__all__ = [
    "SearchQuery", "VideoParameters",
    "ReturnedEndpoint", "ReturnedEndpointList",
    "ShortenRequest", "ShortenResponse",
    "ResponseMetadata", "ErrorInfo", "ErrorResponse",
    "ShortenedEndpoint", "ProviderStatus", "HealthData"
]
