import logging
from urllib.parse import urlencode
from weather_greeter.repos.places_repo import PlacesRepository
from weather_greeter.models.places_model import ResolvedPhoto
from weather_greeter.core.errors import NotFoundError
from weather_greeter.core.logger import logs

# Nearby search rings in meters, tried closest first
SEARCH_RADII = (200, 500, 1000)

PHOTO_MAX_HEIGHT_PX = 1080
PHOTO_MAX_WIDTH_PX = 1920


def build_photo_url(photo_name: str, api_key: str, base_url: str = "https://places.googleapis.com/v1") -> str:
    """Media URL for a Places photo resource name, capped at 1920x1080."""
    query = urlencode({
        "key": api_key,
        "maxHeightPx": PHOTO_MAX_HEIGHT_PX,
        "maxWidthPx": PHOTO_MAX_WIDTH_PX,
    })
    return f"{base_url.rstrip('/')}/{photo_name}/media?{query}"


class ImagesService:
    def __init__(self, repo: PlacesRepository, api_key: str, search_radii=SEARCH_RADII):
        self.repo = repo
        self.api_key = api_key
        self.search_radii = tuple(search_radii)

    def _photo_url(self, photo_name: str) -> str:
        return build_photo_url(photo_name, self.api_key, self.repo.base_url)

    async def resolve_photo(self, place_id: str) -> ResolvedPhoto:
        """
        Finds a displayable photo for a place.

        1. The place's own first photo, if it has any.
        2. Otherwise the first photo of a neighbouring place, searching each
           radius in SEARCH_RADII in turn and checking candidates in the order
           the nearby search returns them. The neighbour's name is reported
           as `source_place_name`.

        Raises NotFoundError when the place has neither photos nor a location,
        or when no neighbour within the largest radius has a photo.
        """
        details = await self.repo.get_place_details(place_id)

        if details.photos:
            logs.log(logging.INFO, f"Found photo for requested place {place_id}")
            return ResolvedPhoto(photo_url=self._photo_url(details.photos[0].name))

        if details.location is None:
            logs.log(logging.INFO, f"No location data found for place {place_id}")
            raise NotFoundError("No photos or location data found for this place")

        logs.log(logging.INFO, f"No photos for {place_id}, searching nearby places")
        center = details.location

        for radius in self.search_radii:
            logs.log(logging.INFO, f"Searching within {radius}m radius")
            nearby = await self.repo.search_nearby(center.latitude, center.longitude, radius)

            for place in nearby:
                if place.id == place_id:
                    continue

                candidate = await self.repo.get_place_details(place.id)
                if candidate.photos:
                    logs.log(logging.INFO, f"Found photo from nearby place: {place.display_name}")
                    return ResolvedPhoto(
                        photo_url=self._photo_url(candidate.photos[0].name),
                        source_place_name=place.display_name,
                    )

        logs.log(logging.INFO, f"No photos found in any nearby places of {place_id}")
        raise NotFoundError("No photos found in this area")
