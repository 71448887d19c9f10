"""CORS configuration."""

from typing import Callable

from fastapi import FastAPI, Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def setup_cors(app: FastAPI) -> None:
    """Attach the relay's CORS headers to every response.

    CORS 설정:
    - 모든 출처 허용 (브라우저에서 직접 호출하는 프론트엔드용)
    - 허용 메소드: POST, OPTIONS
    - 허용 헤더: Content-Type

    Starlette's CORSMiddleware only answers when an Origin header is
    present and replies to preflights itself, so the headers are set on
    every response here and the preflight is answered by the chat route.
    """

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
