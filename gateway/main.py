"""Main FastAPI application with modular architecture."""
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.core.config import settings
from gateway.core.dependencies import build_services
from gateway.core.exceptions import GatewayBaseException, RequestDecodeError
from gateway.api import health_router, search_router, video_router
from gateway.utils.logging import LoggerSetup, CorrelatedLogger, MetricsLogger
from gateway.utils.response_helpers import ResponseHelper

# Setup logging
LoggerSetup.setup_logging()
logger = CorrelatedLogger(__name__)
metrics = MetricsLogger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup; a ConfigurationError here aborts the server
    build_services()
    logger.info(f"{settings.api_title} v{settings.api_version} starting up...")
    yield
    # Shutdown
    logger.info("Application shutting down...")

# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
)

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or ResponseHelper.generate_request_id()

@app.middleware("http")
async def correlate_requests(request: Request, call_next):
    """Tag each request with an ID and log its metrics."""
    request.state.request_id = ResponseHelper.generate_request_id()
    start_time = time.perf_counter()
    response = await call_next(request)
    metrics.log_request_metrics(
        request_id=request.state.request_id,
        endpoint=request.url.path,
        method=request.method,
        processing_time_ms=int((time.perf_counter() - start_time) * 1000),
        status_code=response.status_code
    )
    return response

# Global exception handler for custom exceptions
@app.exception_handler(GatewayBaseException)
async def gateway_exception_handler(request: Request, exc: GatewayBaseException):
    """Handle custom gateway exceptions."""
    request_id = _request_id(request)
    logger.bind(request_id).error(f"{request.method} {request.url.path} failed: {exc.message}")
    return ResponseHelper.create_error_from_exception(exc, request_id)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report undecodable or incomplete request bodies as 400."""
    error = RequestDecodeError(details={"errors": [e.get("msg", "") for e in exc.errors()]})
    return ResponseHelper.create_error_from_exception(error, _request_id(request))

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle routing and HTTP exceptions, e.g. 404 and 405."""
    error_code = "METHOD_NOT_ALLOWED" if exc.status_code == 405 else "HTTP_ERROR"
    response = ResponseHelper.create_error_response(
        error_code=error_code,
        message=str(exc.detail),
        status_code=exc.status_code,
        request_id=_request_id(request)
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    request_id = _request_id(request)
    logger.bind(request_id).exception(f"Unhandled error on {request.method} {request.url.path}")

    return ResponseHelper.create_error_response(
        error_code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        status_code=500,
        request_id=request_id
    )

# Include routers
app.include_router(health_router)
app.include_router(search_router)
app.include_router(video_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
