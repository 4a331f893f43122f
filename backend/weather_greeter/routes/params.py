import math
from typing import Optional, Tuple

from weather_greeter.core.config import Settings, settings
from weather_greeter.core.errors import InvalidRequestError
from weather_greeter.models.base_model import ErrorResponse

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

def get_settings() -> Settings:
    return settings

def parse_coordinates(lat: Optional[str], lon: Optional[str], message: str) -> Tuple[float, float]:
    """Converts raw query values, rejecting blanks and non-finite numbers with `message`."""
    if not lat or not lon:
        raise InvalidRequestError(message)
    try:
        coords = float(lat), float(lon)
    except ValueError:
        raise InvalidRequestError(message)
    if not all(math.isfinite(c) for c in coords):
        raise InvalidRequestError(message)
    return coords
