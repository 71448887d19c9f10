"""Anthropic Messages API adapter."""

from __future__ import annotations

from .base import OutboundRequest, ProviderAdapter

ANTHROPIC_API = "https://api.anthropic.com/v1/messages"


class AnthropicProvider(ProviderAdapter):
    provider_id = "anthropic"
    display_name = "Anthropic Claude"
    error_label = "Claude"
    text_path = ("content", 0, "text")

    def __init__(self, model: str, version: str = "2023-06-01", max_tokens: int = 2000) -> None:
        super().__init__(model)
        self.version = version
        self.max_tokens = max_tokens

    def build_request(self, api_key: str, message: str) -> OutboundRequest:
        return OutboundRequest(
            url=ANTHROPIC_API,
            payload={
                "model": self.model,
                "max_tokens": self.max_tokens,
                "messages": [{"role": "user", "content": message}],
            },
            headers={
                "x-api-key": api_key,
                "anthropic-version": self.version,
                "Content-Type": "application/json",
            },
        )
