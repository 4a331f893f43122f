import logging
from fastapi import APIRouter, Depends, Query
from typing import Optional

from weather_greeter.models.places_model import ResolvedPhoto
from weather_greeter.services.Images_service import ImagesService
from weather_greeter.repos.places_repo import PlacesRepository
from weather_greeter.core.config import Settings
from weather_greeter.core.errors import GreeterError, InvalidRequestError, UpstreamError
from weather_greeter.core.logger import logs
from weather_greeter.routes.params import ERROR_RESPONSES, get_settings
from weather_greeter.routes.places_route import get_places_repo

router = APIRouter()

def get_images_service(
    repo: PlacesRepository = Depends(get_places_repo),
    config: Settings = Depends(get_settings)
) -> ImagesService:
    return ImagesService(repo, api_key=config.GOOGLE_MAPS_API_KEY)

@router.get(
    "/images",
    response_model=ResolvedPhoto,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_image_endpoint(
    place_id: Optional[str] = Query(None, alias="placeId"),
    service: ImagesService = Depends(get_images_service)
):
    """
    Photo URL for a place, borrowing one from a nearby place when the
    place itself has none.
    """
    logs.log(logging.INFO, f"Images request received with placeId: {place_id}")
    if not place_id:
        raise InvalidRequestError("Place ID is required")

    try:
        return await service.resolve_photo(place_id)
    except GreeterError:
        raise
    except Exception as e:
        logs.log(logging.ERROR, f"Photo resolution failed for {place_id}: {str(e)}")
        raise UpstreamError("Failed to fetch place photo") from e
