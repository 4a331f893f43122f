import logging
from weather_greeter.repos.places_repo import PlacesRepository
from weather_greeter.core.errors import NotFoundError
from weather_greeter.core.logger import logs

# The closest single place is enough to anchor the background photo
PLACE_LOOKUP_RADIUS = 100.0

class PlacesService:
    def __init__(self, repo: PlacesRepository):
        self.repo = repo

    async def find_place_id(self, lat: float, lng: float) -> str:
        places = await self.repo.search_nearby(lat, lng, PLACE_LOOKUP_RADIUS, max_results=1)
        logs.log(logging.DEBUG, "Nearby search response", extra={"places": [p.model_dump() for p in places]})

        if not places:
            logs.log(logging.INFO, f"No results found in nearby search at {lat}, {lng}")
            raise NotFoundError("No place found at this location")

        place_id = places[0].id
        logs.log(logging.INFO, f"Found place ID: {place_id}")
        return place_id
