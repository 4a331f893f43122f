"""
Client-side orchestration for the Weather Greeter page.

`GreeterApi` wraps the backend endpoints. `GreeterSession` holds one
visitor's state (active location, weather, background photo, greeting)
and applies each component's failure policy:

- photo lookups fail silently, falling back to the gradient background
- weather lookups surface an inline error message
- greeting calls fall back to a templated local greeting

Greeting and location requests carry a single-slot token, so a result
arriving after a newer request has started is dropped.
"""
import logging
import time
from typing import Callable, Optional

import requests

logger = logging.getLogger(__name__)

GREETING_DEBOUNCE_SECONDS = 0.5

LOCATION_DENIED_MESSAGE = "Please enable location access to see weather information"
LOCATION_UNSUPPORTED_MESSAGE = "Geolocation is not supported by your browser"
WEATHER_FAILED_MESSAGE = "Failed to fetch weather data"


def fallback_greeting(city: str, name: str, temperature: str) -> str:
    return f"Welcome to {city}, {name}! It's {temperature} outside."


class GreeterApi:
    """Thin `requests` wrapper over the backend's /api endpoints."""

    def __init__(self, base_url: str, timeout: float = 15.0, session: requests.Session = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: dict) -> dict:
        response = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def find_place(self, lat: float, lng: float) -> Optional[str]:
        """Closest place id, or None when the backend knows no place there."""
        response = self.session.get(
            f"{self.base_url}/api/places",
            params={"lat": lat, "lng": lng},
            timeout=self.timeout,
        )
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json().get("placeId")

    def place_photo(self, place_id: str) -> dict:
        return self._get("/api/images", {"placeId": place_id})

    def weather(self, lat: float, lon: float) -> dict:
        return self._get("/api/weather", {"lat": lat, "lon": lon})

    def greeting(self, name: str, weather: dict, location: dict) -> str:
        response = self.session.post(
            f"{self.base_url}/api/chat",
            json={"name": name, "weather": weather, "location": location},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()["message"]

    def is_healthy(self) -> bool:
        try:
            return self.session.get(f"{self.base_url}/health", timeout=2).status_code == 200
        except requests.RequestException:
            return False


class GreeterSession:
    def __init__(self, api: GreeterApi, clock: Callable[[], float] = time.monotonic):
        self.api = api
        self.clock = clock

        self.name = ""
        self.location: Optional[dict] = None
        self.weather: Optional[dict] = None
        self.timestamp: Optional[str] = None
        self.location_error = ""
        self.background_image = ""
        self.photo_source: Optional[str] = None
        self.greeting = ""
        self.is_loading = False

        self._location_token = 0
        self._greeting_token = 0
        self._greeting_due_at: Optional[float] = None

    # --- Location & weather ---
    def geolocation_unavailable(self, supported: bool = True):
        self.location_error = LOCATION_DENIED_MESSAGE if supported else LOCATION_UNSUPPORTED_MESSAGE
        self.background_image = ""
        self.photo_source = None

    def select_location(self, lat: float, lon: float) -> bool:
        """
        Loads weather for a location from geolocation or a map pick, then
        refreshes the background photo. Returns False if the weather lookup
        failed or a newer selection superseded this one.
        """
        self._location_token += 1
        token = self._location_token

        try:
            data = self.api.weather(lat, lon)
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching weather: %s", e)
            if token == self._location_token:
                self.location_error = WEATHER_FAILED_MESSAGE
            return False

        if token != self._location_token:
            logger.info("Dropping weather for %s, %s: superseded", lat, lon)
            return False

        self.location = data["location"]
        self.weather = data["weather"]
        self.timestamp = data.get("timestamp")
        self.location_error = ""
        self.schedule_greeting()

        self.refresh_background(lat, lon, token)
        return True

    def refresh_background(self, lat: float, lon: float, token: Optional[int] = None):
        """Never raises: any miss or error just clears the background."""
        token = self._location_token if token is None else token
        photo_url, source = "", None
        try:
            place_id = self.api.find_place(lat, lon)
            if place_id:
                data = self.api.place_photo(place_id)
                photo_url, source = data.get("photoUrl", ""), data.get("sourcePlaceName")
            else:
                logger.info("No place found at %s, %s", lat, lon)
        except (requests.RequestException, ValueError) as e:
            logger.info("No photo available for %s, %s: %s", lat, lon, e)

        if token == self._location_token:
            self.background_image = photo_url
            self.photo_source = source

    # --- Greeting ---
    def set_name(self, name: str):
        if name != self.name:
            self.name = name
            self.schedule_greeting()

    def submit_name(self, name: str) -> bool:
        """Send button or Enter: greet now, even if the name is unchanged."""
        self.name = name
        return self.generate_greeting(manual=True)

    def can_greet(self) -> bool:
        return bool(self.weather and self.location and self.name.strip())

    def schedule_greeting(self):
        """(Re)starts the debounce window; a pending greeting is replaced."""
        if not self.can_greet():
            self._greeting_due_at = None
            return
        self._greeting_token += 1
        self._greeting_due_at = self.clock() + GREETING_DEBOUNCE_SECONDS

    def seconds_until_greeting(self) -> Optional[float]:
        if self._greeting_due_at is None:
            return None
        return max(0.0, self._greeting_due_at - self.clock())

    def run_scheduled_greeting(self) -> bool:
        """Generates the pending greeting once its quiet period has elapsed."""
        remaining = self.seconds_until_greeting()
        if remaining is None or remaining > 0:
            return False
        self._greeting_due_at = None
        return self.generate_greeting()

    def wait_for_scheduled_greeting(
        self,
        tick: Callable[[], None],
        sleep: Callable[[float], None] = time.sleep,
        step: float = 0.05,
    ) -> bool:
        """
        Sleeps out the debounce window in `step` slices, calling `tick`
        after each one, then sends the pending greeting.

        `tick` is the page's chance to abandon the wait: Streamlit only stops
        a script for a rerun inside an `st.*` call, so the page passes one
        here. An exception from `tick` propagates before anything is sent,
        and a `tick` that reschedules the greeting extends the wait.
        """
        remaining = self.seconds_until_greeting()
        while remaining:
            sleep(min(remaining, step))
            tick()
            remaining = self.seconds_until_greeting()
        return self.run_scheduled_greeting()

    def generate_greeting(self, manual: bool = False) -> bool:
        if not self.can_greet() or self.is_loading:
            return False
        if manual:
            self._greeting_due_at = None
            self._greeting_token += 1
        token = self._greeting_token

        self.is_loading = True
        try:
            message = self.api.greeting(self.name, self.weather, self.location)
        except (requests.RequestException, KeyError, ValueError) as e:
            logger.error("Greeting request failed: %s", e)
            message = fallback_greeting(
                self.location["city"], self.name, self.weather["temperature"]
            )
        finally:
            self.is_loading = False

        if token != self._greeting_token:
            logger.info("Dropping superseded greeting")
            return False
        self.greeting = message
        return True
