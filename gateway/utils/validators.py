"""Media endpoint validation utilities."""
from typing import Optional
from urllib.parse import urlparse

import requests

from gateway.core.exceptions import (
    InvalidURLError, UnsupportedSchemeError, UnreachableError, BadStatusError
)

class EndpointValidator:
    """Checks that a candidate media URL is well-formed and live."""

    SUPPORTED_SCHEMES = ("http", "https")

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 5.0):
        self.session = session or requests.Session()
        self.timeout = timeout

    def validate(self, candidate_url: str) -> None:
        """Raise an EndpointValidationError subclass unless the URL answers a HEAD with 2xx."""
        try:
            parsed = urlparse(candidate_url)
        except ValueError as e:
            raise InvalidURLError(candidate_url, str(e))

        if parsed.scheme not in self.SUPPORTED_SCHEMES:
            raise UnsupportedSchemeError(candidate_url, parsed.scheme)

        if not parsed.netloc:
            raise InvalidURLError(candidate_url, "missing host")

        try:
            response = self.session.head(candidate_url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            raise UnreachableError(candidate_url, str(e))

        try:
            if not 200 <= response.status_code < 300:
                raise BadStatusError(candidate_url, response.status_code)
        finally:
            response.close()
