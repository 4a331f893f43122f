import logging
from fastapi import APIRouter, Depends
from typing import Optional

from weather_greeter.models.weather_model import WeatherReport
from weather_greeter.services.Weather_service import WeatherService
from weather_greeter.repos.weather_repo import WeatherRepository
from weather_greeter.repos.geocoding_repo import GeocodingRepository
from weather_greeter.core.config import Settings
from weather_greeter.core.errors import UpstreamError
from weather_greeter.core.logger import logs
from weather_greeter.routes.params import ERROR_RESPONSES, get_settings, parse_coordinates

router = APIRouter()

# --- Dependency Injection ---
def get_weather_repo(config: Settings = Depends(get_settings)) -> WeatherRepository:
    return WeatherRepository(base_url=config.OPEN_METEO_URL, timeout=config.HTTP_TIMEOUT)

def get_geocoding_repo(config: Settings = Depends(get_settings)) -> GeocodingRepository:
    return GeocodingRepository(
        base_url=config.NOMINATIM_URL,
        user_agent=config.NOMINATIM_USER_AGENT,
        timeout=config.HTTP_TIMEOUT,
    )

def get_weather_service(
    weather_repo: WeatherRepository = Depends(get_weather_repo),
    geocoding_repo: GeocodingRepository = Depends(get_geocoding_repo)
) -> WeatherService:
    return WeatherService(weather_repo, geocoding_repo)

@router.get("/weather", response_model=WeatherReport, responses=ERROR_RESPONSES)
async def get_weather_endpoint(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    service: WeatherService = Depends(get_weather_service)
):
    latitude, longitude = parse_coordinates(
        lat, lon, "Latitude and longitude parameters are required"
    )

    try:
        return await service.get_report(latitude, longitude)
    except Exception as e:
        logs.log(logging.ERROR, f"Weather API error: {str(e)}")
        raise UpstreamError("Failed to fetch weather data") from e
