"""OpenAI-compatible chat completion adapters (OpenAI, Groq, OpenRouter)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .base import OutboundRequest, ProviderAdapter


class _OpenAICompatibleProvider(ProviderAdapter):
    """POST ``{model, messages, temperature}`` to a ``/chat/completions`` endpoint."""

    endpoint: str
    text_path = ("choices", 0, "message", "content")

    def __init__(self, model: str, temperature: float = 0.7, max_tokens: Optional[int] = None) -> None:
        super().__init__(model)
        self.temperature = temperature
        self.max_tokens = max_tokens

    def extra_headers(self) -> Dict[str, str]:
        return {}

    def build_request(self, api_key: str, message: str) -> OutboundRequest:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": message}],
            "temperature": self.temperature,
        }
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            **self.extra_headers(),
        }
        return OutboundRequest(url=self.endpoint, payload=payload, headers=headers)


class OpenAIProvider(_OpenAICompatibleProvider):
    provider_id = "openai"
    display_name = "OpenAI"
    error_label = "OpenAI"
    endpoint = "https://api.openai.com/v1/chat/completions"


class GroqProvider(_OpenAICompatibleProvider):
    provider_id = "groq"
    display_name = "Groq"
    error_label = "Groq"
    endpoint = "https://api.groq.com/openai/v1/chat/completions"


class OpenRouterProvider(_OpenAICompatibleProvider):
    """OpenRouter wants the calling app identified by referer and title headers."""

    provider_id = "openrouter"
    display_name = "OpenRouter"
    error_label = "OpenRouter"
    endpoint = "https://openrouter.ai/api/v1/chat/completions"

    def __init__(self, model: str, referer: str, title: str, temperature: float = 0.7) -> None:
        super().__init__(model, temperature=temperature)
        self.referer = referer
        self.title = title

    def extra_headers(self) -> Dict[str, str]:
        return {"HTTP-Referer": self.referer, "X-Title": self.title}
