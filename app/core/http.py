"""Outbound HTTP client dependency."""

from typing import AsyncIterator

import httpx

from app.core.config import settings


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """요청마다 새 httpx 클라이언트를 제공하는 의존성 함수

    Each inbound request makes its single provider call on its own client;
    the client is closed when the request finishes.

    사용 예시:
        @router.post("/chat")
        async def chat(client: httpx.AsyncClient = Depends(get_http_client)):
            ...
    """
    async with httpx.AsyncClient(timeout=settings.provider_timeout) as client:
        yield client
