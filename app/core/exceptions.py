"""Custom exceptions and their handlers."""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.cors import CORS_HEADERS
from app.schemas.chat import ChatErrorResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""

    def __init__(self, message: str, status_code: int = 500, headers: dict[str, str] | None = None):
        self.message = message
        self.status_code = status_code
        self.headers = headers or {}
        super().__init__(self.message)

    def to_content(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(AppError):
    """Client validation error."""

    def __init__(self, message: str = "Missing provider, key, or message"):
        super().__init__(message, status_code=400)


class UnknownProviderError(ValidationError):
    """Provider id is not registered."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__("Unknown provider")


class MethodNotAllowedError(AppError):
    def __init__(self, method: str):
        self.method = method
        super().__init__("Method not allowed", status_code=405, headers={"Allow": "POST, OPTIONS"})


class ProviderError(AppError):
    """Upstream provider call failed.

    Covers provider-reported errors as well as transport failures and
    undecodable provider bodies; all surface as a 500 failure envelope.
    """

    def __init__(self, message: str):
        super().__init__(message, status_code=500)

    def to_content(self) -> dict[str, Any]:
        return ChatErrorResponse(error=self.message).model_dump()


async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers={**exc.headers, **CORS_HEADERS},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors (404, 405 for any verb) with the same error envelope."""
    if exc.status_code == 405:
        return await app_exception_handler(request, MethodNotAllowedError(request.method))
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers={**(exc.headers or {}), **CORS_HEADERS},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ChatErrorResponse(error="Internal server error").model_dump(),
        headers=CORS_HEADERS,
    )
