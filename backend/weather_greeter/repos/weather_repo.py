import httpx

from weather_greeter.models.weather_model import CurrentWeather

class WeatherRepository:
    def __init__(
        self,
        base_url: str = "https://api.open-meteo.com/v1/forecast",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def get_current(self, lat: float, lon: float) -> CurrentWeather:
        """
        Current temperature, wind speed and humidity from Open-Meteo,
        timestamped in the location's own timezone.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": "temperature_2m,wind_speed_10m,relative_humidity_2m",
            "timezone": "auto",
        }
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            resp = await client.get(self.base_url, params=params)
            resp.raise_for_status()
            return CurrentWeather(**resp.json()["current"])
