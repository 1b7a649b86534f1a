"""End-to-end tests for the /video and /search endpoints."""
import json
from unittest.mock import AsyncMock, patch

import pytest

from gateway.core.config import ProviderConfig
from gateway.services import SearchFetcherService, URLShortener, VideoEndpointService
from gateway.services.retrievers import RapidAPIVideoRetriever
from gateway.utils.validators import EndpointValidator

SHORTENER_URL = "https://s.example.com/rest/v3/short-urls"
CANDIDATE = "https://cdn.example/v?id=xyz&expire=1700000000"


class TestVideoEndpoint:
    """POST /video through real services with mocked upstream HTTP."""

    @pytest.fixture
    def video_stack(self, mock_session, override_services):
        shortener = URLShortener(SHORTENER_URL, "secret", session=mock_session)
        retriever = RapidAPIVideoRetriever(
            ProviderConfig("video-info", "key-1", "https://video-info.p.rapidapi.com/dl"),
            EndpointValidator(mock_session)
        )
        override_services(video_service=VideoEndpointService([retriever], shortener))
        return retriever

    def test_existing_slug_is_returned_without_resolving(self, client, mock_session, response_factory, video_stack):
        mock_session.get.return_value = response_factory(200)

        with patch.object(video_stack.client, "get", AsyncMock()) as upstream:
            response = client.post("/video", json={"id": "abc123"})

        assert response.status_code == 200
        assert response.json() == {"shortened-url": "abc123"}
        upstream.assert_not_called()
        mock_session.post.assert_not_called()

    def test_new_slug_is_resolved_and_shortened(self, client, mock_session, response_factory, video_stack):
        mock_session.get.return_value = response_factory(404)
        mock_session.head.return_value = response_factory(200)
        mock_session.post.return_value = response_factory(200, {"shortUrl": "https://s.example.com/xyz"})
        payload = json.dumps([{"url": CANDIDATE}])

        with patch.object(video_stack.client, "get", AsyncMock(return_value=payload)):
            response = client.post("/video", json={"id": "xyz"})

        assert response.status_code == 200
        assert response.json() == {"shortened-url": "https://s.example.com/xyz"}
        mock_session.head.assert_called_once()
        assert mock_session.post.call_args.kwargs["json"] == {
            "longUrl": CANDIDATE,
            "customSlug": "xyz",
            "validUntil": "2023-11-14T22:13:20Z",
            "domain": "s.example.com",
        }

    def test_cache_check_failure_is_500(self, client, mock_session, response_factory, video_stack):
        mock_session.get.return_value = response_factory(503)

        with patch.object(video_stack.client, "get", AsyncMock()) as upstream:
            response = client.post("/video", json={"id": "xyz"})

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "SHORTENER_ERROR"
        upstream.assert_not_called()

    def test_all_resolvers_failing_is_500(self, client, mock_session, response_factory, video_stack):
        mock_session.get.return_value = response_factory(404)
        mock_session.head.return_value = response_factory(403)

        with patch.object(video_stack.client, "get", AsyncMock(return_value=json.dumps([{"url": CANDIDATE}]))):
            response = client.post("/video", json={"id": "xyz"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"]["code"] == "ALL_PROVIDERS_FAILED"
        assert body["error"]["message"] == "all APIs failed to retrieve the video endpoint"
        mock_session.post.assert_not_called()

    def test_shorten_failure_is_500(self, client, mock_session, response_factory, video_stack):
        mock_session.get.return_value = response_factory(404)
        mock_session.head.return_value = response_factory(200)
        mock_session.post.return_value = response_factory(409, text="slug in use")

        with patch.object(video_stack.client, "get", AsyncMock(return_value=json.dumps([{"url": CANDIDATE}]))):
            response = client.post("/video", json={"id": "xyz"})

        assert response.status_code == 500
        assert response.json()["error"]["details"]["status_code"] == 409


class TestSearchEndpoint:
    """POST /search over fake retrievers."""

    def test_payload_is_returned_as_json_string(self, client, override_services, retriever_factory):
        payload = '{"items": [{"id": "abc123", "title": "Stage time"}]}'
        retriever = retriever_factory("video-search", result=payload)
        override_services(search_service=SearchFetcherService([retriever]))

        response = client.post("/search", json={"Search": "stage time"})

        assert response.status_code == 200
        assert response.json() == payload
        assert retriever.calls[0].search_term == "stage time"

    def test_all_providers_failing_is_500(self, client, override_services, retriever_factory):
        override_services(search_service=SearchFetcherService([retriever_factory("video-search", fail=True)]))

        response = client.post("/search", json={"Search": "stage time"})

        assert response.status_code == 500
        assert response.json()["error"]["message"] == "all APIs failed to retrieve search results"

    def test_lowercase_search_key_is_accepted(self, client, override_services, retriever_factory):
        retriever = retriever_factory("video-search", result='{"items": []}')
        override_services(search_service=SearchFetcherService([retriever]))

        response = client.post("/search", json={"search": "stage time"})

        assert response.status_code == 200
        assert retriever.calls[0].search_term == "stage time"
