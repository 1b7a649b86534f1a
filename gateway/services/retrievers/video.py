"""Video endpoint provider adapters."""
import asyncio

from gateway.core.config import ProviderConfig
from gateway.core.exceptions import EndpointValidationError, UpstreamCallError
from gateway.models.requests import VideoParameters
from gateway.models.video import ReturnedEndpointList
from gateway.utils.logging import CorrelatedLogger
from gateway.utils.validators import EndpointValidator
from .rapidapi import RapidAPIClient

class RapidAPIVideoRetriever:
    """Video info provider answering with a preference-ordered list of candidate URLs."""

    STREAM_FILTER = "audioandvideo"

    def __init__(self, provider: ProviderConfig, validator: EndpointValidator, timeout: float = 5.0):
        self.client = RapidAPIClient(provider, "video endpoint api", timeout)
        self.name = provider.name
        self.validator = validator
        self.logger = CorrelatedLogger(__name__)

    async def get_results(self, query: VideoParameters) -> str:
        """Return the first candidate URL that passes endpoint validation."""
        body = await self.client.get({"id": query.id, "filter": self.STREAM_FILTER})
        try:
            candidates = ReturnedEndpointList.validate_json(body)
        except ValueError as e:
            raise UpstreamCallError(self.name, f"error decoding response: {e}")

        for candidate in candidates:
            try:
                await asyncio.to_thread(self.validator.validate, candidate.url)
            except EndpointValidationError as e:
                self.logger.debug(f"{self.name}: rejected candidate {candidate.url}: {e.message}")
                continue
            self.logger.info(f"{self.name}: selected endpoint {candidate.url}")
            return candidate.url

        raise UpstreamCallError(self.name, "no valid endpoints found")
