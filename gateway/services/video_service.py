"""Video endpoint service: shortener cache, provider fallback and short link creation."""
from typing import Optional, Sequence

from gateway.core.exceptions import ExpiryParseError
from gateway.models.requests import VideoParameters
from gateway.services.fallback import FallbackChain
from gateway.services.retrievers.base import VideoEndpointRetriever
from gateway.services.url_shortener import URLShortener
from gateway.utils.expiry import extract_expiry
from gateway.utils.logging import CorrelatedLogger


class VideoEndpointService:
    """Resolves a video ID to a stable shortened media URL."""

    def __init__(
        self,
        retrievers: Sequence[VideoEndpointRetriever],
        url_shortener: URLShortener,
        timeout: float = 5.0
    ):
        self.chain = FallbackChain(retrievers, "the video endpoint", timeout)
        self.url_shortener = url_shortener
        self.logger = CorrelatedLogger(__name__)

    async def get_shortened_endpoint(
        self,
        params: VideoParameters,
        request_id: Optional[str] = None
    ) -> str:
        """Return the short link for ``params.id``, creating it on a cache miss.

        A slug the shortener already knows is returned as-is without touching any
        provider. Shortener failures and provider exhaustion propagate; a resolved
        URL without a readable expiry is still shortened, with an empty
        ``validUntil``.
        """
        logger = self.logger.bind(request_id)

        # Check cache first
        if await self.url_shortener.exists(params.id):
            logger.info(f"Short link for {params.id} already exists")
            return params.id

        endpoint = await self.chain.fetch(params, request_id)

        try:
            valid_until = extract_expiry(endpoint)
        except ExpiryParseError as e:
            # TODO: decide whether links without an expiry should be shortened at all
            logger.warning(f"Failed to extract expiry parameter from {endpoint}: {e.message}")
            valid_until = ""
        logger.info(f"Expiry: {valid_until}")

        shorten_request = self.url_shortener.build_request(endpoint, params.id, valid_until)
        return await self.url_shortener.shorten(shorten_request)
