"""Health check endpoints."""
from datetime import datetime, timezone
from urllib.parse import urlparse
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from gateway.core.config import settings
from gateway.models.responses import HealthData, ProviderStatus

router = APIRouter(tags=["health"])

service_start_time = datetime.now()

@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Video Gateway is running"}

@router.get("/health")
async def health_check():
    """
    Health check endpoint with configured providers
    """
    uptime = int((datetime.now() - service_start_time).total_seconds())
    names = settings.provider_names()

    health_data = HealthData(
        status="healthy" if not settings.missing_variables() else "misconfigured",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api_version,
        uptime_seconds=uptime,
        providers=ProviderStatus(
            video=names["video"],
            search=names["search"],
            url_shortener=urlparse(settings.url_shortener_url).netloc or "not_configured"
        )
    )

    return JSONResponse(
        status_code=200,
        content=health_data.model_dump()
    )
