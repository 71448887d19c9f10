import json

import httpx
from fastapi import APIRouter, Depends, Request, Response

from app.core.exceptions import MethodNotAllowedError, ValidationError
from app.core.http import get_http_client
from app.domain.providers import ProviderRegistry, get_registry
from app.domain.relay import parse_chat_request, relay_chat
from app.schemas.chat import ChatErrorResponse, ChatResponse, ErrorResponse

router = APIRouter(prefix="/chat", tags=["chat"])


# CORS preflight: 프로바이더 로직 없이 빈 본문으로 응답
@router.options("", status_code=200)
async def chat_preflight() -> Response:
    return Response(status_code=200, media_type="application/json")


@router.post(
    "",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    summary="Relay one message to an LLM provider",
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields or unknown provider"},
        500: {"model": ChatErrorResponse, "description": "Provider call failed"},
    },
)
async def chat(
    request: Request,
    registry: ProviderRegistry = Depends(get_registry),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> ChatResponse:
    # 본문은 직접 파싱한다 (FastAPI 기본 422 대신 400 envelope)
    try:
        body = json.loads(await request.body())
    except ValueError:
        raise ValidationError("Invalid JSON body") from None

    chat_request = parse_chat_request(body)
    return await relay_chat(chat_request, registry, client)


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE", "HEAD"], include_in_schema=False)
async def chat_method_not_allowed(request: Request) -> None:
    raise MethodNotAllowedError(request.method)
