import json

import httpx
import pytest

from app.core.config import Settings
from app.core.exceptions import ProviderError
from app.domain.providers import (
    AnthropicProvider,
    GeminiProvider,
    GroqProvider,
    OpenAIProvider,
    OpenRouterProvider,
    ProviderRegistry,
    build_registry,
    dig,
    redact,
)


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_dig_walks_nested_shapes():
    data = {"choices": [{"message": {"content": "hi"}}]}
    assert dig(data, "choices", 0, "message", "content") == "hi"
    assert dig(data, "choices", 1, "message") is None
    assert dig(data, "choices", "message") is None
    assert dig({"choices": None}, "choices", 0) is None
    assert dig("text", "choices") is None
    assert dig(data) is data


def test_redact():
    assert redact("bad key abc123 given", "abc123") == "bad key *** given"
    assert redact("nothing here", "") == "nothing here"


def test_build_registry_defaults():
    registry = build_registry(Settings(_env_file=None))
    assert len(registry) == 5
    assert "openai" in registry
    assert "OpenAI" not in registry
    assert registry.get("gemini").model == "gemini-pro"
    assert registry.get("groq").model == "mixtral-8x7b-32768"
    assert registry.get("openrouter").model == "meta-llama/llama-3.1-8b-instruct:free"
    assert registry.get("missing") is None


def test_registry_rejects_duplicate_ids():
    registry = ProviderRegistry([OpenAIProvider("gpt-3.5-turbo")])
    with pytest.raises(ValueError):
        registry.register(OpenAIProvider("gpt-4o"))


def test_gemini_request_shape():
    request = GeminiProvider("gemini-pro").build_request("g-key", "Hello")
    assert request.url == "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"
    assert request.params == {"key": "g-key"}
    assert request.payload == {"contents": [{"parts": [{"text": "Hello"}]}]}
    assert "Authorization" not in request.headers


def test_openai_request_shape():
    request = OpenAIProvider("gpt-3.5-turbo", temperature=0.7, max_tokens=2000).build_request("sk-1", "Hello")
    assert request.url == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-1"
    assert request.payload == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "user", "content": "Hello"}],
        "temperature": 0.7,
        "max_tokens": 2000,
    }


def test_groq_uses_groq_host():
    request = GroqProvider("mixtral-8x7b-32768").build_request("gsk", "Hello")
    assert request.url == "https://api.groq.com/openai/v1/chat/completions"
    assert request.payload["model"] == "mixtral-8x7b-32768"


def test_openrouter_request_shape():
    adapter = OpenRouterProvider("meta-llama/llama-3.1-8b-instruct:free", referer="https://example.app", title="Example")
    request = adapter.build_request("or-key", "Hello")
    assert request.url == "https://openrouter.ai/api/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer or-key"
    assert request.headers["HTTP-Referer"] == "https://example.app"
    assert request.headers["X-Title"] == "Example"
    assert "max_tokens" not in request.payload


def test_anthropic_request_shape():
    request = AnthropicProvider("claude-3-haiku-20240307").build_request("ak", "Hello")
    assert request.url == "https://api.anthropic.com/v1/messages"
    assert request.headers["x-api-key"] == "ak"
    assert request.headers["anthropic-version"] == "2023-06-01"
    assert request.payload == {
        "model": "claude-3-haiku-20240307",
        "max_tokens": 2000,
        "messages": [{"role": "user", "content": "Hello"}],
    }


@pytest.mark.asyncio
async def test_gemini_invoke_sends_key_in_query():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "Bonjour"}]}}]})

    async with mock_client(handler) as client:
        text = await GeminiProvider("gemini-pro").invoke(client, "g-key", "Hello")

    assert text == "Bonjour"
    assert seen[0].method == "POST"
    assert seen[0].url.params["key"] == "g-key"
    assert json.loads(seen[0].content) == {"contents": [{"parts": [{"text": "Hello"}]}]}


@pytest.mark.asyncio
async def test_anthropic_invoke_extracts_first_block():
    def handler(request):
        return httpx.Response(200, json={"content": [{"type": "text", "text": "Hi from Claude"}]})

    async with mock_client(handler) as client:
        text = await AnthropicProvider("claude-3-haiku-20240307").invoke(client, "ak", "Hello")

    assert text == "Hi from Claude"


@pytest.mark.asyncio
async def test_invoke_returns_none_for_unexpected_shape():
    def handler(request):
        return httpx.Response(200, json={"candidates": []})

    async with mock_client(handler) as client:
        text = await GeminiProvider("gemini-pro").invoke(client, "g-key", "Hello")

    assert text is None


@pytest.mark.asyncio
async def test_invoke_raises_with_provider_message():
    def handler(request):
        return httpx.Response(401, json={"type": "error", "error": {"type": "authentication_error", "message": "invalid x-api-key"}})

    async with mock_client(handler) as client:
        with pytest.raises(ProviderError) as exc_info:
            await AnthropicProvider("claude-3-haiku-20240307").invoke(client, "ak", "Hello")

    assert exc_info.value.message == "invalid x-api-key"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="upstream exploded"),
        httpx.Response(404, json={"detail": "no such model"}),
        httpx.Response(400, json={"error": "plain string"}),
    ],
)
async def test_invoke_falls_back_to_label_and_status(response):
    async with mock_client(lambda request: response) as client:
        with pytest.raises(ProviderError) as exc_info:
            await OpenRouterProvider("m", referer="r", title="t").invoke(client, "or-key", "Hello")

    assert exc_info.value.message == f"OpenRouter: {response.status_code}"


@pytest.mark.asyncio
async def test_invoke_propagates_malformed_success_body():
    def handler(request):
        return httpx.Response(200, content=b"<html>", headers={"Content-Type": "text/html"})

    async with mock_client(handler) as client:
        with pytest.raises(ValueError):
            await OpenAIProvider("gpt-3.5-turbo").invoke(client, "sk", "Hello")


@pytest.mark.asyncio
async def test_invoke_returns_extracted_value_unchanged():
    def handler(request):
        return httpx.Response(200, json={"content": [{"type": "text", "text": {"value": "nested"}}]})

    async with mock_client(handler) as client:
        text = await AnthropicProvider("claude-3-haiku-20240307").invoke(client, "ak", "Hello")

    assert text == {"value": "nested"}
