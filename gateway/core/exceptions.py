"""Custom exceptions for the Video Gateway."""
from typing import Optional

class GatewayBaseException(Exception):
    """Base exception for the video gateway."""

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

class ConfigurationError(GatewayBaseException):
    """Exception raised for missing or invalid configuration."""

    def __init__(self, setting: str, reason: str):
        message = f"Configuration error for {setting}: {reason}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, "CONFIGURATION_ERROR", details)

class RequestDecodeError(GatewayBaseException):
    """Exception raised when an inbound request body cannot be decoded."""

    def __init__(self, reason: str = "Invalid request body", details: Optional[dict] = None):
        super().__init__(reason, "INVALID_REQUEST_BODY", details)

class UpstreamCallError(GatewayBaseException):
    """Exception raised when a single upstream provider call fails."""

    def __init__(self, provider: str, reason: str, status_code: Optional[int] = None):
        message = f"{provider}: {reason}"
        details = {"provider": provider, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, "UPSTREAM_CALL_FAILED", details)

class AllProvidersFailedError(GatewayBaseException):
    """Exception raised when every provider in a fallback chain failed."""

    def __init__(self, resource: str):
        message = f"all APIs failed to retrieve {resource}"
        super().__init__(message, "ALL_PROVIDERS_FAILED", {"resource": resource})

class EndpointValidationError(GatewayBaseException):
    """Exception raised when a candidate media URL is not usable."""

    def __init__(self, url: str, reason: str, error_code: str = "ENDPOINT_INVALID"):
        super().__init__(reason, error_code, {"url": url, "reason": reason})

class UnsupportedSchemeError(EndpointValidationError):
    """Candidate URL is not http or https."""

    def __init__(self, url: str, scheme: str):
        super().__init__(url, f"unsupported URL scheme: {scheme}", "UNSUPPORTED_SCHEME")

class UnreachableError(EndpointValidationError):
    """HEAD request to the candidate failed in transport."""

    def __init__(self, url: str, reason: str):
        super().__init__(url, f"failed to reach endpoint: {reason}", "ENDPOINT_UNREACHABLE")

class BadStatusError(EndpointValidationError):
    """Candidate answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"endpoint returned non-success status code: {status_code}", "ENDPOINT_BAD_STATUS")

class ExpiryParseError(GatewayBaseException):
    """Exception raised when no expiry timestamp can be read from a resolved URL."""

    def __init__(self, url: str, reason: str, error_code: str = "EXPIRY_PARSE_FAILED"):
        super().__init__(reason, error_code, {"url": url, "reason": reason})

class MissingExpiryError(ExpiryParseError):
    """The `expire` query parameter is absent or empty."""

    def __init__(self, url: str):
        super().__init__(url, "expire parameter not found", "MISSING_EXPIRY")

class MalformedExpiryError(ExpiryParseError):
    """The `expire` query parameter is not a Unix timestamp."""

    def __init__(self, url: str, value: str):
        self.value = value
        super().__init__(url, f"expire parameter is not a unix timestamp: {value!r}", "MALFORMED_EXPIRY")

class InvalidURLError(EndpointValidationError, ExpiryParseError):
    """URL could not be parsed. Raised by both the endpoint validator and the expiry extractor."""

    def __init__(self, url: str, reason: str):
        message = f"invalid URL: {reason}"
        GatewayBaseException.__init__(self, message, "INVALID_URL", {"url": url, "reason": reason})

class ShortenerError(GatewayBaseException):
    """Exception raised when the URL shortener service cannot be used."""

    def __init__(self, operation: str, reason: str, status_code: Optional[int] = None):
        self.status_code = status_code
        message = f"URL shortener error during {operation}: {reason}"
        details = {"operation": operation, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, "SHORTENER_ERROR", details)
