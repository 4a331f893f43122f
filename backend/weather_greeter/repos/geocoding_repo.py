import httpx

class GeocodingRepository:
    """Reverse geocoding through OpenStreetMap Nominatim."""

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org/reverse",
        user_agent: str = "WeatherGreeter/1.0",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.base_url = base_url
        # Nominatim's usage policy rejects requests without an identifying agent
        self.headers = {"User-Agent": user_agent}
        self.timeout = timeout
        self.transport = transport

    async def reverse(self, lat: float, lon: float) -> dict:
        params = {"lat": lat, "lon": lon, "format": "json"}
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            resp = await client.get(self.base_url, params=params, headers=self.headers)
            resp.raise_for_status()
            return resp.json()
