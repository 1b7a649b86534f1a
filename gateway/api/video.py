"""Video endpoint API."""
from fastapi import APIRouter, Depends, Request

from gateway.core.dependencies import get_video_endpoint_service
from gateway.models.requests import VideoParameters
from gateway.models.responses import ShortenedEndpoint
from gateway.services import VideoEndpointService
from gateway.utils.response_helpers import ResponseHelper

router = APIRouter(tags=["video"])


@router.post("/video")
async def get_video_endpoint(
    params: VideoParameters,
    request: Request,
    video_service: VideoEndpointService = Depends(get_video_endpoint_service)
):
    """Resolve a video ID to a shortened, playable media URL."""
    shortened_url = await video_service.get_shortened_endpoint(params, request.state.request_id)
    body = ShortenedEndpoint(shortened_url=shortened_url)
    return ResponseHelper.create_success_response(body.model_dump(by_alias=True))
