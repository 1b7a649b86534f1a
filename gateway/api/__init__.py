"""API module initialization."""
from .health import router as health_router
from .search import router as search_router
from .video import router as video_router

__all__ = ["health_router", "search_router", "video_router"]
