"""Provider registry: provider id -> adapter."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterator, List, Optional

from app.core.config import Settings, settings

from .anthropic import AnthropicProvider
from .base import ProviderAdapter
from .gemini import GeminiProvider
from .openai import GroqProvider, OpenAIProvider, OpenRouterProvider


class ProviderRegistry:
    """Case-sensitive, exact-match lookup of adapters by provider id."""

    def __init__(self, adapters: Optional[List[ProviderAdapter]] = None) -> None:
        self._adapters: Dict[str, ProviderAdapter] = {}
        for adapter in adapters or []:
            self.register(adapter)

    def register(self, adapter: ProviderAdapter) -> None:
        if adapter.provider_id in self._adapters:
            raise ValueError(f"Provider already registered: {adapter.provider_id}")
        self._adapters[adapter.provider_id] = adapter

    def get(self, provider_id: str) -> Optional[ProviderAdapter]:
        return self._adapters.get(provider_id)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._adapters

    def __iter__(self) -> Iterator[ProviderAdapter]:
        return iter(self._adapters.values())

    def __len__(self) -> int:
        return len(self._adapters)


def build_registry(config: Settings) -> ProviderRegistry:
    return ProviderRegistry(
        [
            GeminiProvider(config.gemini_model),
            OpenAIProvider(config.openai_model, temperature=config.temperature, max_tokens=config.max_tokens),
            GroqProvider(config.groq_model, temperature=config.temperature, max_tokens=config.max_tokens),
            AnthropicProvider(
                config.anthropic_model,
                version=config.anthropic_version,
                max_tokens=config.max_tokens,
            ),
            OpenRouterProvider(
                config.openrouter_model,
                referer=config.openrouter_referer,
                title=config.openrouter_title,
                temperature=config.temperature,
            ),
        ]
    )


@lru_cache(maxsize=1)
def get_registry() -> ProviderRegistry:
    """App-wide registry built from the global settings (FastAPI dependency)."""
    return build_registry(settings)
