import asyncio
import json

import httpx
import pytest

from weather_greeter.repos.places_repo import PlacesRepository


def _repo(handler) -> PlacesRepository:
    return PlacesRepository(api_key="test-key", transport=httpx.MockTransport(handler))


def test_get_place_details_parses_photos_and_location():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={
            "photos": [{"name": "places/abc/photos/1"}, {"name": "places/abc/photos/2"}],
            "location": {"latitude": 40.7, "longitude": -74.0},
        })

    details = asyncio.run(_repo(handler).get_place_details("abc"))

    assert [p.name for p in details.photos] == ["places/abc/photos/1", "places/abc/photos/2"]
    assert details.location.latitude == 40.7
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v1/places/abc"
    assert seen[0].headers["X-Goog-Api-Key"] == "test-key"
    assert seen[0].headers["X-Goog-FieldMask"] == "photos,location"


def test_get_place_details_handles_missing_fields():
    details = asyncio.run(_repo(lambda r: httpx.Response(200, json={})).get_place_details("abc"))
    assert details.photos == []
    assert details.location is None


def test_search_nearby_sends_circle_restriction():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"places": [
            {"id": "p1", "displayName": {"text": "Cafe", "languageCode": "en"}},
            {"id": "p2"},
        ]})

    places = asyncio.run(_repo(handler).search_nearby(40.7, -74.0, 500))

    assert [(p.id, p.display_name) for p in places] == [("p1", "Cafe"), ("p2", None)]
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v1/places:searchNearby"
    assert request.headers["X-Goog-FieldMask"] == "places.id,places.displayName"
    body = json.loads(request.content)
    assert body == {
        "locationRestriction": {
            "circle": {"center": {"latitude": 40.7, "longitude": -74.0}, "radius": 500.0}
        },
        "maxResultCount": 10,
    }


def test_search_nearby_returns_empty_list_without_places():
    places = asyncio.run(_repo(lambda r: httpx.Response(200, json={})).search_nearby(0.0, 0.0, 200))
    assert places == []


def test_non_ok_status_raises():
    repo = _repo(lambda r: httpx.Response(403, json={"error": {"message": "denied"}}))
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(repo.get_place_details("abc"))
