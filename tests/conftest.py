"""Shared fixtures for the gateway test suite."""
import asyncio
from typing import List, Optional
from unittest.mock import Mock

import pytest
import requests
from fastapi.testclient import TestClient

from gateway.core.dependencies import get_search_fetcher_service, get_video_endpoint_service
from gateway.core.exceptions import UpstreamCallError
from gateway.main import app


class FakeRetriever:
    """In-memory retriever that records the queries it receives."""

    def __init__(self, name: str, result: Optional[str] = None, error: Optional[Exception] = None,
                 delay: float = 0.0):
        self.name = name
        self.result = result
        self.error = error
        self.delay = delay
        self.calls: List[object] = []

    async def get_results(self, query):
        self.calls.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


def make_response(status_code: int = 200, json_body=None, text: str = "") -> Mock:
    """Stand-in for a requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if isinstance(json_body, Exception):
        response.json.side_effect = json_body
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def retriever_factory():
    """Build FakeRetriever instances."""
    def _make(name: str, result: Optional[str] = None, fail: bool = False, delay: float = 0.0,
              error: Optional[Exception] = None) -> FakeRetriever:
        if fail and error is None:
            error = UpstreamCallError(name, "received non-2xx response 503", 503)
        return FakeRetriever(name, result=result, error=error, delay=delay)
    return _make


@pytest.fixture
def response_factory():
    """Build mocked requests responses."""
    return make_response


@pytest.fixture
def mock_session():
    """Mocked requests.Session; every test sets the answers it needs."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client():
    """Test client fixture. Dependency overrides are cleared afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def override_services():
    """Install service instances as FastAPI dependency overrides."""
    def _override(video_service=None, search_service=None):
        if video_service is not None:
            app.dependency_overrides[get_video_endpoint_service] = lambda: video_service
        if search_service is not None:
            app.dependency_overrides[get_search_fetcher_service] = lambda: search_service
    yield _override
    app.dependency_overrides.clear()
