from pydantic import BaseModel, Field

from weather_greeter.models.weather_model import LocationInfo, WeatherReadout

# --- API Request/Response Models ---
class ChatRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the person to greet")
    weather: WeatherReadout
    location: LocationInfo

class ChatResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
