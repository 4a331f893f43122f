import asyncio

import httpx
import pytest

from weather_greeter.repos.geocoding_repo import GeocodingRepository
from weather_greeter.repos.weather_repo import WeatherRepository
from weather_greeter.services.Weather_service import (
    WeatherService,
    format_temperature,
    pick_city,
)

FORECAST = {
    "current": {
        "time": "2025-06-01T14:15",
        "interval": 900,
        "temperature_2m": 21.6,
        "wind_speed_10m": 3.4,
        "relative_humidity_2m": 61,
    }
}


def _service(weather_handler, geocode_handler) -> WeatherService:
    return WeatherService(
        WeatherRepository(transport=httpx.MockTransport(weather_handler)),
        GeocodingRepository(user_agent="TestAgent/1.0", transport=httpx.MockTransport(geocode_handler)),
    )


@pytest.mark.parametrize("celsius, expected", [
    (21.6, "22°C"),
    (21.4, "21°C"),
    (21.5, "22°C"),
    (-2.5, "-2°C"),
    (0.0, "0°C"),
])
def test_format_temperature_rounds_half_up(celsius, expected):
    assert format_temperature(celsius) == expected


def test_pick_city_prefers_city_then_town_village_suburb():
    assert pick_city({"city": "Paris", "town": "Ignored"}) == "Paris"
    assert pick_city({"city": "", "town": "Hallstatt"}) == "Hallstatt"
    assert pick_city({"village": "Giethoorn"}) == "Giethoorn"
    assert pick_city({"suburb": "Brooklyn"}) == "Brooklyn"


def test_pick_city_defaults_to_unknown_location():
    assert pick_city({"road": "Main St", "country": "Nowhere"}) == "Unknown Location"
    assert pick_city({}) == "Unknown Location"


def test_get_report_formats_weather_and_location():
    weather_requests, geocode_requests = [], []

    def weather_handler(request):
        weather_requests.append(request)
        return httpx.Response(200, json=FORECAST)

    def geocode_handler(request):
        geocode_requests.append(request)
        return httpx.Response(200, json={
            "display_name": "Manhattan, New York, United States",
            "address": {"city": "New York", "country": "United States"},
        })

    report = asyncio.run(_service(weather_handler, geocode_handler).get_report(40.7, -74.0))

    assert report.model_dump() == {
        "location": {
            "coordinates": {"latitude": 40.7, "longitude": -74.0},
            "city": "New York",
            "display_name": "Manhattan, New York, United States",
        },
        "weather": {"temperature": "22°C", "wind_speed": "3.4 m/s", "humidity": "61%"},
        "timestamp": "2025-06-01T14:15",
    }
    params = weather_requests[0].url.params
    assert params["current"] == "temperature_2m,wind_speed_10m,relative_humidity_2m"
    assert params["timezone"] == "auto"
    assert geocode_requests[0].url.params["format"] == "json"
    assert geocode_requests[0].headers["User-Agent"] == "TestAgent/1.0"


def test_get_report_without_address_uses_unknown_location():
    service = _service(
        lambda r: httpx.Response(200, json=FORECAST),
        lambda r: httpx.Response(200, json={"error": "Unable to geocode"}),
    )
    report = asyncio.run(service.get_report(0.0, 0.0))
    assert report.location.city == "Unknown Location"
    assert report.location.display_name is None


def test_geocoding_failure_aborts_the_report():
    service = _service(
        lambda r: httpx.Response(200, json=FORECAST),
        lambda r: httpx.Response(503),
    )
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(service.get_report(40.7, -74.0))
