"""Upstream LLM provider adapters."""

from .anthropic import AnthropicProvider
from .base import OutboundRequest, ProviderAdapter, dig, redact
from .gemini import GeminiProvider
from .openai import GroqProvider, OpenAIProvider, OpenRouterProvider
from .registry import ProviderRegistry, build_registry, get_registry

__all__ = [
    "AnthropicProvider",
    "GeminiProvider",
    "GroqProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    "OutboundRequest",
    "ProviderAdapter",
    "ProviderRegistry",
    "build_registry",
    "dig",
    "get_registry",
    "redact",
]
