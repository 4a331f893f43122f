from pydantic import BaseModel, Field
from typing import List, Optional

class Coordinates(BaseModel):
    latitude: float
    longitude: float

class PhotoRef(BaseModel):
    name: str  # places/{id}/photos/{ref}

class PlaceDetails(BaseModel):
    photos: List[PhotoRef] = []
    location: Optional[Coordinates] = None

class NearbyPlace(BaseModel):
    id: str
    display_name: Optional[str] = None

# --- API Response Models ---
class PlaceIdResponse(BaseModel):
    place_id: str = Field(..., serialization_alias="placeId")

class ResolvedPhoto(BaseModel):
    photo_url: str = Field(..., serialization_alias="photoUrl")
    # Only set when the photo belongs to a nearby place, not the requested one
    source_place_name: Optional[str] = Field(None, serialization_alias="sourcePlaceName")
