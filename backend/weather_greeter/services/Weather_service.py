import math
import logging
from weather_greeter.repos.weather_repo import WeatherRepository
from weather_greeter.repos.geocoding_repo import GeocodingRepository
from weather_greeter.models.places_model import Coordinates
from weather_greeter.models.weather_model import LocationInfo, WeatherReadout, WeatherReport
from weather_greeter.core.logger import logs

UNKNOWN_LOCATION = "Unknown Location"
CITY_FIELDS = ("city", "town", "village", "suburb")


def _format_number(value: float) -> str:
    """Renders 5.0 as "5" and 3.4 as "3.4"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(celsius: float) -> str:
    # Half-up rounding: 21.5 -> 22, -2.5 -> -2
    return f"{math.floor(celsius + 0.5)}°C"


def pick_city(address: dict) -> str:
    """First populated settlement field of a Nominatim address."""
    for field in CITY_FIELDS:
        if address.get(field):
            return address[field]
    return UNKNOWN_LOCATION


class WeatherService:
    def __init__(self, weather_repo: WeatherRepository, geocoding_repo: GeocodingRepository):
        self.weather_repo = weather_repo
        self.geocoding_repo = geocoding_repo

    async def get_report(self, lat: float, lon: float) -> WeatherReport:
        # 1. Current conditions (Open-Meteo)
        logs.log(logging.INFO, f"Fetching current weather for {lat}, {lon}")
        current = await self.weather_repo.get_current(lat, lon)

        # 2. Place name (Nominatim)
        location_data = await self.geocoding_repo.reverse(lat, lon)
        city = pick_city(location_data.get("address") or {})
        logs.log(logging.INFO, f"Resolved {lat}, {lon} to {city}")

        return WeatherReport(
            location=LocationInfo(
                coordinates=Coordinates(latitude=lat, longitude=lon),
                city=city,
                display_name=location_data.get("display_name"),
            ),
            weather=WeatherReadout(
                temperature=format_temperature(current.temperature_2m),
                wind_speed=f"{_format_number(current.wind_speed_10m)} m/s",
                humidity=f"{_format_number(current.relative_humidity_2m)}%",
            ),
            timestamp=current.time,
        )
