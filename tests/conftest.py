"""Pytest configuration and fixtures."""

from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.http import get_http_client
from app.domain.providers import ProviderRegistry, get_registry
from app.main import app


class FakeUpstream:
    """httpx.MockTransport handler that records every outbound request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def upstream():
    """프로바이더 호출을 가로채는 가짜 업스트림

    실제 네트워크 호출 없이 httpx.MockTransport로 응답을 돌려줍니다.

    사용 예시:
        def test_endpoint(client, upstream):
            upstream.handler = lambda request: httpx.Response(200, json={...})
    """
    fake = FakeUpstream()

    async def override_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake)) as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = override_http_client
    yield fake
    app.dependency_overrides.pop(get_http_client, None)


@pytest.fixture
def use_registry():
    """Swap the app's provider registry for one built from the given adapters."""

    def _use(*adapters) -> ProviderRegistry:
        registry = ProviderRegistry(list(adapters))
        app.dependency_overrides[get_registry] = lambda: registry
        return registry

    yield _use
    app.dependency_overrides.pop(get_registry, None)


@pytest.fixture
def client(upstream):
    """테스트용 FastAPI 클라이언트 (업스트림은 항상 모킹됨)"""
    return TestClient(app)
