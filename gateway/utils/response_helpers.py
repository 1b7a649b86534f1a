"""Response creation utilities."""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from fastapi import status
from fastapi.responses import JSONResponse

from ..models.responses import ErrorResponse, ErrorInfo, ResponseMetadata
from ..core.exceptions import GatewayBaseException

class ResponseHelper:
    """Utilities for creating standardized API responses."""

    # Map error codes to HTTP status codes; anything unlisted is a 500
    STATUS_MAPPING = {
        "INVALID_REQUEST_BODY": status.HTTP_400_BAD_REQUEST,
        "ALL_PROVIDERS_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "SHORTENER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "CONFIGURATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    @staticmethod
    def generate_request_id() -> str:
        """Generate unique request ID."""
        return f"req_{uuid.uuid4().hex[:8]}"

    @staticmethod
    def create_response_metadata(request_id: str, processing_time_ms: Optional[int] = None) -> ResponseMetadata:
        """Create standardized response metadata."""
        return ResponseMetadata(
            request_id=request_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
            processing_time_ms=processing_time_ms
        )

    @staticmethod
    def create_success_response(content: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        """Serialize a bare payload; success bodies carry no envelope."""
        return JSONResponse(status_code=status_code, content=content)

    @staticmethod
    def create_error_response(
        error_code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        """Create standardized error response."""
        if not request_id:
            request_id = ResponseHelper.generate_request_id()

        response = ErrorResponse(
            error=ErrorInfo(
                code=error_code,
                message=message,
                details=details
            ),
            metadata=ResponseHelper.create_response_metadata(request_id)
        )
        return JSONResponse(
            status_code=status_code,
            content=response.model_dump()
        )

    @staticmethod
    def create_error_from_exception(
        exc: GatewayBaseException,
        request_id: Optional[str] = None
    ) -> JSONResponse:
        """Create error response from custom exception."""
        http_status = ResponseHelper.STATUS_MAPPING.get(
            exc.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )

        return ResponseHelper.create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            status_code=http_status,
            request_id=request_id,
            details=exc.details or None
        )
