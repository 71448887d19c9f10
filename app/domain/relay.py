"""Chat relay: validate, dispatch to a provider adapter, wrap the result."""

import time
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import ProviderError, UnknownProviderError, ValidationError
from app.domain.providers import ProviderRegistry, redact
from app.schemas.chat import ChatRequest, ChatResponse
from app.utils.logger import get_logger

logger = get_logger(__name__)


def parse_chat_request(body: Any) -> ChatRequest:
    """Validate a decoded JSON body into a ChatRequest.

    Anything other than an object with non-empty string ``provider``,
    ``key`` and ``message`` is rejected with the same 400 message.
    """
    if not isinstance(body, dict):
        raise ValidationError()
    try:
        return ChatRequest.model_validate(body)
    except PydanticValidationError as e:
        # 에러 상세에는 입력값(키 포함)이 들어 있으므로 필드명만 남긴다
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        logger.info("[RELAY] 요청 검증 실패 (fields=%s)", ",".join(fields))
        raise ValidationError() from None


async def relay_chat(
    chat_request: ChatRequest,
    registry: ProviderRegistry,
    client: httpx.AsyncClient,
) -> ChatResponse:
    """Forward one message to the requested provider and build the success envelope.

    Raises:
        UnknownProviderError: provider id is not registered (no outbound call).
        ProviderError: the adapter failed for any reason.
    """
    adapter = registry.get(chat_request.provider)
    if adapter is None:
        logger.info("[RELAY] 알 수 없는 프로바이더: %r", chat_request.provider)
        raise UnknownProviderError(chat_request.provider)

    api_key = chat_request.key.get_secret_value()
    logger.info("[RELAY] 요청 수신 (provider=%s, 길이=%d)", adapter.provider_id, len(chat_request.message))

    started = time.perf_counter()
    try:
        text = await adapter.invoke(client, api_key, chat_request.message)
    except ProviderError as e:
        logger.warning("[RELAY] %s 오류: %s", adapter.provider_id, e.message)
        raise
    except Exception as e:
        message = redact(str(e), api_key) or type(e).__name__
        logger.error("[RELAY] %s 호출 실패 (%s): %s", adapter.provider_id, type(e).__name__, message)
        raise ProviderError(message) from e
    latency = max(0, int((time.perf_counter() - started) * 1000))

    if text is None:
        logger.warning("[RELAY] %s 응답에서 텍스트를 찾지 못함", adapter.provider_id)

    logger.info("[RELAY] 응답 완료 (provider=%s, latency=%dms)", adapter.provider_id, latency)
    return ChatResponse(response=text, provider=adapter.display_name, latency=latency)
