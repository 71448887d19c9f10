"""Google Gemini adapter."""

from __future__ import annotations

from .base import OutboundRequest, ProviderAdapter

GEMINI_API = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiProvider(ProviderAdapter):
    provider_id = "gemini"
    display_name = "Google Gemini"
    error_label = "Gemini"
    text_path = ("candidates", 0, "content", "parts", 0, "text")

    def build_request(self, api_key: str, message: str) -> OutboundRequest:
        # Gemini takes the key as a query parameter, not a header
        return OutboundRequest(
            url=GEMINI_API.format(model=self.model),
            payload={"contents": [{"parts": [{"text": message}]}]},
            params={"key": api_key},
        )
