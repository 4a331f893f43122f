import logging
from fastapi import APIRouter, Depends

from weather_greeter.models.base_model import ChatRequest, ChatResponse
from weather_greeter.services.Greeting_service import GreetingService
from weather_greeter.core.llm_connection import LLMService
from weather_greeter.core.config import Settings
from weather_greeter.core.errors import UpstreamError
from weather_greeter.core.logger import logs
from weather_greeter.routes.params import ERROR_RESPONSES, get_settings

router = APIRouter()

# --- Dependency Injection Helper ---
def get_llm_service(config: Settings = Depends(get_settings)) -> LLMService:
    return LLMService(config)

def get_greeting_service(llm: LLMService = Depends(get_llm_service)) -> GreetingService:
    return GreetingService(llm)

# --- The Endpoint ---
@router.post("/chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
async def chat_endpoint(
    request: ChatRequest,
    service: GreetingService = Depends(get_greeting_service)
):
    """
    Receives the visitor's name with the weather and location the page is
    showing, and returns a personalized greeting.
    """
    try:
        return await service.greet(request)
    except Exception as e:
        logs.log(logging.ERROR, f"Error in chat_endpoint: {str(e)}")
        raise UpstreamError("Failed to generate greeting") from e
