"""Search API."""
from fastapi import APIRouter, Depends, Request

from gateway.core.dependencies import get_search_fetcher_service
from gateway.models.requests import SearchQuery
from gateway.services import SearchFetcherService
from gateway.utils.response_helpers import ResponseHelper

router = APIRouter(tags=["search"])


@router.post("/search")
async def search_videos(
    query: SearchQuery,
    request: Request,
    search_service: SearchFetcherService = Depends(get_search_fetcher_service)
):
    """Proxy a search; the upstream payload is returned as a JSON-encoded string."""
    results = await search_service.search(query, request.state.request_id)
    return ResponseHelper.create_success_response(results)
