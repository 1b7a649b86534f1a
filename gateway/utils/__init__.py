"""Utility modules for the Video Gateway."""
from .validators import EndpointValidator
from .expiry import extract_expiry
from .response_helpers import ResponseHelper
from .logging import LoggerSetup, CorrelatedLogger, MetricsLogger

__all__ = [
    "EndpointValidator", "extract_expiry", "ResponseHelper",
    "LoggerSetup", "CorrelatedLogger", "MetricsLogger"
]
