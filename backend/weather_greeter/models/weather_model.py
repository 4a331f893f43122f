from pydantic import BaseModel
from typing import Optional

from weather_greeter.models.places_model import Coordinates

class LocationInfo(BaseModel):
    coordinates: Coordinates
    city: str
    display_name: Optional[str] = None

class WeatherReadout(BaseModel):
    temperature: str  # e.g. "22°C"
    wind_speed: str   # e.g. "3.4 m/s"
    humidity: str     # e.g. "61%"

class CurrentWeather(BaseModel):
    """Raw Open-Meteo `current` block."""
    temperature_2m: float
    wind_speed_10m: float
    relative_humidity_2m: float
    time: str

class WeatherReport(BaseModel):
    location: LocationInfo
    weather: WeatherReadout
    timestamp: str
