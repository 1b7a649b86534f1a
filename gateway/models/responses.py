"""Response models for the Video Gateway."""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

class ResponseMetadata(BaseModel):
    """Standard response metadata."""
    request_id: str
    api_version: str = "1.0.0"
    timestamp: Optional[str] = None
    processing_time_ms: Optional[int] = None

class ErrorInfo(BaseModel):
    """Error information structure."""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: ErrorInfo
    metadata: ResponseMetadata

class ShortenedEndpoint(BaseModel):
    """Successful /video answer."""
    model_config = ConfigDict(populate_by_name=True)

    shortened_url: str = Field(..., alias="shortened-url")

class ProviderStatus(BaseModel):
    """Configured providers per category."""
    video: List[str]
    search: List[str]
    url_shortener: str

class HealthData(BaseModel):
    """Complete health check response."""
    status: str
    timestamp: str
    version: str
    uptime_seconds: int
    providers: ProviderStatus
