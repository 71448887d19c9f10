"""Common adapter contract for upstream LLM providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

import httpx

from app.core.exceptions import ProviderError

REDACTED = "***"


@dataclass
class OutboundRequest:
    """Everything needed for the single POST an adapter makes."""

    url: str
    payload: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)


def dig(data: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists along ``path``; ``None`` when any step is missing."""
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def redact(text: str, secret: str) -> str:
    if not secret:
        return text
    return text.replace(secret, REDACTED)


class ProviderAdapter(ABC):
    """Turn ``(api_key, message)`` into provider response text.

    Subclasses describe the provider: its ids, how to build the outbound
    request, and where the generated text lives in a success body.
    """

    provider_id: str
    display_name: str
    error_label: str
    text_path: Tuple[str | int, ...] = ()

    def __init__(self, model: str) -> None:
        self.model = model

    @abstractmethod
    def build_request(self, api_key: str, message: str) -> OutboundRequest:
        """Build the provider-specific outbound request."""

    def extract_text(self, data: Any) -> Any:
        return dig(data, *self.text_path)

    async def invoke(self, client: httpx.AsyncClient, api_key: str, message: str) -> Any:
        request = self.build_request(api_key, message)
        response = await client.post(
            request.url,
            json=request.payload,
            headers=request.headers,
            params=request.params or None,
        )
        if not response.is_success:
            raise ProviderError(redact(self.error_message(response), api_key))

        return self.extract_text(response.json())

    def error_message(self, response: httpx.Response) -> str:
        """Provider's ``error.message`` when present, otherwise ``"<label>: <status>"``."""
        try:
            message = dig(response.json(), "error", "message")
        except ValueError:
            message = None
        if isinstance(message, str) and message:
            return message
        return f"{self.error_label}: {response.status_code}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider_id={self.provider_id!r}, model={self.model!r})"
