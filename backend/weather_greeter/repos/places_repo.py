import httpx
from typing import List

from weather_greeter.models.places_model import Coordinates, NearbyPlace, PhotoRef, PlaceDetails

class PlacesRepository:
    """
    Read-only gateway to the Google Places (New) API.
    Transport, status and parse errors are left to the caller.
    """
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://places.googleapis.com/v1",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self, field_mask: str) -> dict:
        return {
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": field_mask,
        }

    async def get_place_details(self, place_id: str) -> PlaceDetails:
        """Fetches the photo references and coordinates of one place."""
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            resp = await client.get(
                f"{self.base_url}/places/{place_id}",
                headers=self._headers("photos,location"),
            )
            resp.raise_for_status()
            data = resp.json()

        photos = [PhotoRef(name=p["name"]) for p in data.get("photos") or []]
        location = data.get("location")
        return PlaceDetails(
            photos=photos,
            location=Coordinates(**location) if location else None,
        )

    async def search_nearby(
        self, lat: float, lng: float, radius: float, max_results: int = 10
    ) -> List[NearbyPlace]:
        """Returns places inside the circle, in the order the API ranks them."""
        body = {
            "locationRestriction": {
                "circle": {
                    "center": {"latitude": lat, "longitude": lng},
                    "radius": float(radius),
                }
            },
            "maxResultCount": max_results,
        }
        headers = self._headers("places.id,places.displayName")
        headers["Content-Type"] = "application/json"

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            resp = await client.post(
                f"{self.base_url}/places:searchNearby", json=body, headers=headers
            )
            resp.raise_for_status()
            data = resp.json()

        return [
            NearbyPlace(id=p["id"], display_name=(p.get("displayName") or {}).get("text"))
            for p in data.get("places") or []
        ]
