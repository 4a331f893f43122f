import logging
from weather_greeter.core.llm_connection import LLMService
from weather_greeter.core.errors import UpstreamError
from weather_greeter.core.logger import logs
from weather_greeter.models.base_model import ChatRequest, ChatResponse

class GreetingService:
    def __init__(self, llm: LLMService):
        self.llm = llm

    async def greet(self, request: ChatRequest) -> ChatResponse:
        logs.log(logging.INFO, f"Generating greeting for {request.name} in {request.location.city}")
        message = await self.llm.generate_greeting(
            request.name,
            request.weather.model_dump(),
            request.location.model_dump(),
        )
        if not message:
            logs.log(logging.WARNING, "LLM returned an empty greeting")
            raise UpstreamError("Failed to generate greeting")
        return ChatResponse(message=message)
