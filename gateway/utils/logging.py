"""Logging configuration and utilities."""
import logging
import sys
from typing import Optional
from ..core.config import settings

class LoggerSetup:
    """Centralized logging configuration."""

    @staticmethod
    def setup_logging(
        level: Optional[str] = None,
        format_string: Optional[str] = None
    ) -> None:
        """Configure the root logger once at startup.

        Explicit arguments win over LOG_LEVEL and LOG_FORMAT. Output goes to
        stdout, and the chattier third-party loggers are capped.
        """
        log_level = level or settings.log_level
        log_format = format_string or settings.log_format

        # Configure root logger
        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format=log_format,
            handlers=[
                logging.StreamHandler(sys.stdout)
            ]
        )

        # Set specific logger levels
        logging.getLogger("uvicorn").setLevel(logging.INFO)
        logging.getLogger("fastapi").setLevel(logging.INFO)
        logging.getLogger("aiohttp").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)  # requests connection pool chatter

class CorrelatedLogger:
    """Logger with correlation ID support for request tracking."""

    def __init__(self, name: str, request_id: Optional[str] = None):
        """Wrap the stdlib logger called `name`; `request_id` prefixes every line when set."""
        self.logger = logging.getLogger(name)
        self.request_id = request_id

    def bind(self, request_id: Optional[str]) -> "CorrelatedLogger":
        """Return a logger for the same name tagged with another request ID."""
        return CorrelatedLogger(self.logger.name, request_id)

    def _format_message(self, message: str) -> str:
        """Format message with request ID if available."""
        if self.request_id:
            return f"[{self.request_id}] {message}"
        return message

    def debug(self, message: str, **kwargs) -> None:
        """Verbose detail, e.g. each provider attempt."""
        self.logger.debug(self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Normal progress: cache hits, shortened endpoints, startup."""
        self.logger.info(self._format_message(message), **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """A step failed but the request can still succeed, such as a provider falling through."""
        self.logger.warning(self._format_message(message), **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """The request is going to fail. Pass exc_info=True to attach a traceback."""
        self.logger.error(self._format_message(message), **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Like error(), but always records the active exception. Call only from an except block."""
        self.logger.exception(self._format_message(message), **kwargs)

class MetricsLogger:
    """Emits one REQUEST_METRICS line per HTTP request on the `metrics` logger.

    Lines are key=value pairs so log shippers can split them without a parser.
    """

    def __init__(self):
        self.logger = logging.getLogger("metrics")

    def log_request_metrics(
        self,
        request_id: str,
        endpoint: str,
        method: str,
        processing_time_ms: int,
        status_code: int
    ) -> None:
        """Record how one request went.

        Args:
            request_id: Correlation ID assigned by the middleware
            endpoint: Request path
            method: HTTP method
            processing_time_ms: Wall time spent in the app, in milliseconds
            status_code: Status of the response sent back
        """
        self.logger.info(
            f"REQUEST_METRICS request_id={request_id} "
            f"endpoint={endpoint} method={method} "
            f"processing_time_ms={processing_time_ms} "
            f"status_code={status_code}"
        )
