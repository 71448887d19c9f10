"""Chat relay Pydantic schemas."""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field, SecretStr, field_validator


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ChatRequest(BaseModel):
    provider: str = Field(..., min_length=1, description="등록된 프로바이더 ID (예: openai, gemini)")
    key: SecretStr = Field(..., description="프로바이더 API 키 (저장/로깅하지 않음)")
    message: str = Field(..., min_length=1, description="프롬프트 텍스트")

    @field_validator("key")
    @classmethod
    def key_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("key must not be empty")
        return value


class ChatResponse(BaseModel):
    success: Literal[True] = True
    response: Any = None
    provider: str
    latency: int = Field(..., ge=0, description="프로바이더 호출 소요 시간 (ms)")
    timestamp: str = Field(default_factory=utc_timestamp)


class ChatErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorResponse(BaseModel):
    error: str


class ProviderInfo(BaseModel):
    id: str
    name: str
    model: str
