"""
LLM Provider Implementations
Supports multiple LLM providers behind one `generate` interface.
"""
import httpx
import logging
from abc import ABC, abstractmethod
from weather_greeter.core.logger import logs

class BaseLLMProvider(ABC):
    """Base class for all LLM providers"""

    def __init__(self, api_key: str, model: str, transport: httpx.AsyncBaseTransport = None):
        self.api_key = api_key
        self.model = model
        self.transport = transport

    @abstractmethod
    async def generate(self, messages: list, temperature: float = 0.7, timeout: float = 10.0) -> str:
        """Generate a response from the LLM"""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the name of the provider"""

    async def _post(self, url: str, payload: dict, headers: dict, timeout: float) -> dict:
        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(url, json=payload, headers=headers, timeout=timeout)
                response.raise_for_status()
                return response.json()
            except Exception as e:
                logs.log(logging.ERROR, f"{self.get_provider_name()} API error: {str(e)}")
                raise


class ChatCompletionsProvider(BaseLLMProvider):
    """Providers speaking the OpenAI-style /chat/completions format."""

    base_url = ""

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

    async def generate(self, messages: list, temperature: float = 0.7, timeout: float = 10.0) -> str:
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature
        }
        data = await self._post(self.base_url, payload, self.headers, timeout)
        return data["choices"][0]["message"]["content"].strip()


class MistralProvider(ChatCompletionsProvider):
    """Mistral AI Provider"""

    base_url = "https://api.mistral.ai/v1/chat/completions"

    def get_provider_name(self) -> str:
        return "Mistral AI"


class OpenAIProvider(ChatCompletionsProvider):
    """OpenAI Provider (GPT-3.5, GPT-4, etc.)"""

    base_url = "https://api.openai.com/v1/chat/completions"

    def get_provider_name(self) -> str:
        return "OpenAI"


class GroqProvider(ChatCompletionsProvider):
    """Groq Provider (Fast inference with Llama, Mixtral, etc.)"""

    base_url = "https://api.groq.com/openai/v1/chat/completions"

    def get_provider_name(self) -> str:
        return "Groq"


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude Provider"""

    base_url = "https://api.anthropic.com/v1/messages"

    async def generate(self, messages: list, temperature: float = 0.7, timeout: float = 10.0) -> str:
        # The system prompt travels outside the message list
        system_message = None
        converted_messages = []

        for msg in messages:
            if msg["role"] == "system":
                system_message = msg["content"]
            else:
                converted_messages.append({
                    "role": msg["role"],
                    "content": msg["content"]
                })

        payload = {
            "model": self.model,
            "messages": converted_messages,
            "temperature": temperature,
            "max_tokens": 256
        }

        if system_message:
            payload["system"] = system_message

        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": "2023-06-01",
            "Content-Type": "application/json"
        }
        data = await self._post(self.base_url, payload, headers, timeout)
        return data["content"][0]["text"].strip()

    def get_provider_name(self) -> str:
        return "Anthropic Claude"
