"""Unit tests for the video endpoint service."""
from unittest.mock import AsyncMock, Mock

import pytest

from gateway.core.exceptions import AllProvidersFailedError, ShortenerError
from gateway.models.requests import VideoParameters
from gateway.models.shortener import ShortenRequest
from gateway.services.url_shortener import URLShortener
from gateway.services.video_service import VideoEndpointService

RESOLVED = "https://cdn.example/v?id=xyz&expire=1700000000"


class TestVideoEndpointService:
    """Test the cache check, resolve, expiry and shorten flow."""

    @pytest.fixture
    def shortener(self):
        shortener = Mock(spec=URLShortener)
        shortener.exists = AsyncMock(return_value=False)
        shortener.build_request.side_effect = lambda long_url, slug, valid_until: ShortenRequest(
            long_url=long_url, slug=slug, valid_until=valid_until, domain="s.example.com"
        )
        shortener.shorten = AsyncMock(return_value="https://s.example.com/xyz")
        return shortener

    @pytest.mark.asyncio
    async def test_cache_hit_returns_slug_without_resolving(self, shortener, retriever_factory):
        shortener.exists.return_value = True
        retriever = retriever_factory("video-info", result=RESOLVED)
        service = VideoEndpointService([retriever], shortener)

        result = await service.get_shortened_endpoint(VideoParameters(id="abc123"))

        assert result == "abc123"
        assert retriever.calls == []
        shortener.shorten.assert_not_called()

    @pytest.mark.asyncio
    async def test_cache_miss_resolves_and_shortens(self, shortener, retriever_factory):
        retriever = retriever_factory("video-info", result=RESOLVED)
        service = VideoEndpointService([retriever], shortener)

        result = await service.get_shortened_endpoint(VideoParameters(id="xyz"))

        assert result == "https://s.example.com/xyz"
        shortener.exists.assert_awaited_once_with("xyz")
        shortener.build_request.assert_called_once_with(RESOLVED, "xyz", "2023-11-14T22:13:20Z")
        sent = shortener.shorten.await_args.args[0]
        assert sent.valid_until == "2023-11-14T22:13:20Z"
        assert sent.long_url == RESOLVED

    @pytest.mark.asyncio
    async def test_missing_expiry_still_shortens_with_empty_valid_until(self, shortener, retriever_factory, caplog):
        retriever = retriever_factory("video-info", result="https://cdn.example/v?id=xyz")
        service = VideoEndpointService([retriever], shortener)

        with caplog.at_level("WARNING", logger="gateway.services.video_service"):
            result = await service.get_shortened_endpoint(VideoParameters(id="xyz"))

        assert result == "https://s.example.com/xyz"
        shortener.build_request.assert_called_once_with("https://cdn.example/v?id=xyz", "xyz", "")
        assert "expire parameter not found" in caplog.text

    @pytest.mark.asyncio
    async def test_existence_check_failure_is_fatal(self, shortener, retriever_factory):
        shortener.exists.side_effect = ShortenerError("exists", "received non-200 response: 502", 502)
        retriever = retriever_factory("video-info", result=RESOLVED)
        service = VideoEndpointService([retriever], shortener)

        with pytest.raises(ShortenerError):
            await service.get_shortened_endpoint(VideoParameters(id="xyz"))
        assert retriever.calls == []

    @pytest.mark.asyncio
    async def test_falls_back_to_next_provider(self, shortener, retriever_factory):
        broken = retriever_factory("primary", fail=True)
        backup = retriever_factory("backup", result=RESOLVED)
        service = VideoEndpointService([broken, backup], shortener)

        assert await service.get_shortened_endpoint(VideoParameters(id="xyz")) == "https://s.example.com/xyz"
        assert len(broken.calls) == 1
        assert len(backup.calls) == 1

    @pytest.mark.asyncio
    async def test_all_providers_failing_skips_shortening(self, shortener, retriever_factory):
        service = VideoEndpointService([retriever_factory("video-info", fail=True)], shortener)

        with pytest.raises(AllProvidersFailedError) as exc_info:
            await service.get_shortened_endpoint(VideoParameters(id="xyz"))

        assert exc_info.value.message == "all APIs failed to retrieve the video endpoint"
        shortener.build_request.assert_not_called()
        shortener.shorten.assert_not_called()

    @pytest.mark.asyncio
    async def test_shorten_failure_propagates(self, shortener, retriever_factory):
        shortener.shorten.side_effect = ShortenerError("shorten", "received non-200 response 409", 409)
        service = VideoEndpointService([retriever_factory("video-info", result=RESOLVED)], shortener)

        with pytest.raises(ShortenerError) as exc_info:
            await service.get_shortened_endpoint(VideoParameters(id="xyz"))
        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_build_request_failure_propagates(self, shortener, retriever_factory):
        shortener.build_request.side_effect = ShortenerError("build_request", "failed to parse URL")
        service = VideoEndpointService([retriever_factory("video-info", result=RESOLVED)], shortener)

        with pytest.raises(ShortenerError):
            await service.get_shortened_endpoint(VideoParameters(id="xyz"))
        shortener.shorten.assert_not_called()
