import asyncio
import json

import httpx
import pytest

from weather_greeter.core.config import Settings
from weather_greeter.core.llm_connection import LLMService
from weather_greeter.core.llm_providers import (
    AnthropicProvider,
    GroqProvider,
    MistralProvider,
    OpenAIProvider,
)


@pytest.mark.parametrize("name, expected", [
    ("mistral", MistralProvider),
    ("OpenAI", OpenAIProvider),
    ("anthropic", AnthropicProvider),
    ("groq", GroqProvider),
    ("something-else", MistralProvider),
])
def test_provider_selection(name, expected):
    service = LLMService(Settings(LLM_PROVIDER=name))
    assert isinstance(service.provider, expected)


def test_chat_completions_provider_payload_and_reply():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"content": " Hi there! "}}]})

    provider = OpenAIProvider("sk-test", "gpt-test", transport=httpx.MockTransport(handler))
    reply = asyncio.run(provider.generate([{"role": "user", "content": "hello"}]))

    assert reply == "Hi there!"
    assert seen[0].headers["Authorization"] == "Bearer sk-test"
    assert json.loads(seen[0].content)["model"] == "gpt-test"


def test_anthropic_provider_lifts_system_prompt():
    seen = []

    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"content": [{"text": "Welcome!"}]})

    provider = AnthropicProvider("key", "claude-test", transport=httpx.MockTransport(handler))
    reply = asyncio.run(provider.generate([
        {"role": "system", "content": "be nice"},
        {"role": "user", "content": "hello"},
    ]))

    assert reply == "Welcome!"
    assert seen[0]["system"] == "be nice"
    assert seen[0]["messages"] == [{"role": "user", "content": "hello"}]


def test_provider_error_propagates():
    provider = GroqProvider("key", "llama", transport=httpx.MockTransport(lambda r: httpx.Response(429)))
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(provider.generate([{"role": "user", "content": "hello"}]))
