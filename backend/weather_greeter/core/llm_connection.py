import logging
from weather_greeter.core.config import Settings
from weather_greeter.core.logger import logs
from weather_greeter.core.llm_providers import (
    BaseLLMProvider,
    MistralProvider,
    OpenAIProvider,
    AnthropicProvider,
    GroqProvider
)

GREETING_SYSTEM_PROMPT = (
    "You are a cheerful local host welcoming a visitor. "
    "Write a short, friendly greeting of one or two sentences. "
    "Address the person by name, mention the city they are in, "
    "and weave in the current weather conditions. "
    "Return ONLY the greeting text, without quotes."
)

class LLMService:
    def __init__(self, config: Settings, provider: BaseLLMProvider = None):
        self.config = config
        self.provider = provider or self._initialize_provider()
        logs.log(logging.DEBUG, f"🤖 LLM Provider initialized: {self.provider.get_provider_name()}")

    def _initialize_provider(self) -> BaseLLMProvider:
        """Initialize the selected LLM provider based on settings"""
        provider = self.config.LLM_PROVIDER.lower()

        if provider == "mistral":
            return MistralProvider(self.config.MISTRAL_API_KEY, self.config.MISTRAL_MODEL)
        elif provider == "openai":
            return OpenAIProvider(self.config.OPENAI_API_KEY, self.config.OPENAI_MODEL)
        elif provider == "anthropic":
            return AnthropicProvider(self.config.ANTHROPIC_API_KEY, self.config.ANTHROPIC_MODEL)
        elif provider == "groq":
            return GroqProvider(self.config.GROQ_API_KEY, self.config.GROQ_MODEL)
        else:
            logs.log(logging.WARNING, f"Unknown provider '{provider}', defaulting to Mistral")
            return MistralProvider(self.config.MISTRAL_API_KEY, self.config.MISTRAL_MODEL)

    async def generate_greeting(self, name: str, weather: dict, location: dict) -> str:
        """
        Asks the provider for a personalized greeting.
        Provider errors propagate; an empty reply comes back as "".
        """
        user_prompt = (
            f"Name: {name}\n"
            f"City: {location.get('city')}\n"
            f"Address: {location.get('display_name')}\n"
            f"Temperature: {weather.get('temperature')}\n"
            f"Wind speed: {weather.get('wind_speed')}\n"
            f"Humidity: {weather.get('humidity')}"
        )

        messages = [
            {"role": "system", "content": GREETING_SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt}
        ]

        content = await self.provider.generate(
            messages, temperature=0.7, timeout=self.config.HTTP_TIMEOUT
        )
        return content.strip().strip('"')
