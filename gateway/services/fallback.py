"""Ordered provider fallback shared by the search and video services."""
import asyncio
from typing import Generic, Optional, Sequence, TypeVar

from gateway.core.exceptions import AllProvidersFailedError, GatewayBaseException
from gateway.utils.logging import CorrelatedLogger
from .retrievers.base import Retriever

Q = TypeVar("Q")

class FallbackChain(Generic[Q]):
    """Tries retrievers one at a time, in order, until one succeeds.

    Every attempt gets its own timeout. Attempts never overlap, and a provider
    that failed is not asked again within the same call.
    """

    def __init__(self, retrievers: Sequence[Retriever[Q]], resource: str, timeout: float = 5.0):
        self.retrievers = list(retrievers)
        self.resource = resource
        self.timeout = timeout
        self.logger = CorrelatedLogger(__name__)

    async def fetch(self, query: Q, request_id: Optional[str] = None) -> str:
        """Return the first successful payload or raise AllProvidersFailedError."""
        logger = self.logger.bind(request_id)

        for retriever in self.retrievers:
            try:
                return await asyncio.wait_for(retriever.get_results(query), timeout=self.timeout)
            except asyncio.TimeoutError:
                logger.warning(
                    f"{retriever.name} timed out after {self.timeout}s retrieving {self.resource}. Trying next API."
                )
            except GatewayBaseException as e:
                logger.warning(f"Error calling API '{retriever.name}': {e.message}. Trying next API.")
            except Exception as e:
                logger.warning(f"Unexpected error calling API '{retriever.name}': {str(e)}. Trying next API.")

        raise AllProvidersFailedError(self.resource)
