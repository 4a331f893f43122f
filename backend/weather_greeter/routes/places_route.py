import logging
from fastapi import APIRouter, Depends
from typing import Optional

from weather_greeter.models.places_model import PlaceIdResponse
from weather_greeter.services.Places_service import PlacesService
from weather_greeter.repos.places_repo import PlacesRepository
from weather_greeter.core.config import Settings
from weather_greeter.core.errors import GreeterError, UpstreamError
from weather_greeter.core.logger import logs
from weather_greeter.routes.params import ERROR_RESPONSES, get_settings, parse_coordinates

router = APIRouter()

# --- Dependency Injection ---
def get_places_repo(config: Settings = Depends(get_settings)) -> PlacesRepository:
    return PlacesRepository(
        api_key=config.GOOGLE_MAPS_API_KEY,
        base_url=config.PLACES_BASE_URL,
        timeout=config.HTTP_TIMEOUT,
    )

def get_places_service(repo: PlacesRepository = Depends(get_places_repo)) -> PlacesService:
    return PlacesService(repo)

@router.get("/places", response_model=PlaceIdResponse, responses=ERROR_RESPONSES)
async def get_place_endpoint(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    service: PlacesService = Depends(get_places_service)
):
    """Returns the id of the place closest to the given coordinates."""
    logs.log(logging.INFO, "Places request received", extra={"lat": lat, "lng": lng})
    latitude, longitude = parse_coordinates(lat, lng, "Latitude and longitude are required")

    try:
        place_id = await service.find_place_id(latitude, longitude)
    except GreeterError:
        raise
    except Exception as e:
        logs.log(logging.ERROR, f"Places lookup failed: {str(e)}")
        raise UpstreamError("Failed to find place") from e

    return PlaceIdResponse(place_id=place_id)
