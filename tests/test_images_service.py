import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_greeter.core.errors import NotFoundError
from weather_greeter.models.places_model import Coordinates, NearbyPlace, PhotoRef, PlaceDetails
from weather_greeter.services.Images_service import ImagesService, build_photo_url

BASE_URL = "https://places.googleapis.com/v1"
HERE = Coordinates(latitude=48.8584, longitude=2.2945)


def _details(*photo_names, location=None) -> PlaceDetails:
    return PlaceDetails(photos=[PhotoRef(name=n) for n in photo_names], location=location)


def _service(details_by_id: dict, nearby_by_radius: dict = None):
    repo = MagicMock()
    repo.base_url = BASE_URL
    repo.get_place_details = AsyncMock(side_effect=lambda pid: details_by_id[pid])
    nearby_by_radius = nearby_by_radius or {}
    repo.search_nearby = AsyncMock(
        side_effect=lambda lat, lng, radius: nearby_by_radius.get(radius, [])
    )
    return ImagesService(repo, api_key="secret"), repo


def test_build_photo_url_embeds_reference_key_and_dimensions():
    url = build_photo_url("places/abc/photos/p1", "secret")
    assert url == (
        "https://places.googleapis.com/v1/places/abc/photos/p1/media"
        "?key=secret&maxHeightPx=1080&maxWidthPx=1920"
    )
    assert build_photo_url("places/abc/photos/p1", "secret") == url


def test_target_with_photo_returns_first_photo_without_nearby_search():
    service, repo = _service({"target": _details("places/target/photos/1", "places/target/photos/2", location=HERE)})

    photo = asyncio.run(service.resolve_photo("target"))

    assert photo.photo_url == build_photo_url("places/target/photos/1", "secret")
    assert photo.source_place_name is None
    repo.search_nearby.assert_not_called()


def test_target_without_photos_or_location_is_not_found_without_search():
    service, repo = _service({"target": _details()})

    with pytest.raises(NotFoundError) as exc:
        asyncio.run(service.resolve_photo("target"))

    assert exc.value.message == "No photos or location data found for this place"
    repo.search_nearby.assert_not_called()


def test_radii_are_tried_in_order_and_target_is_skipped():
    details = {
        "target": _details(location=HERE),
        "bare": _details(),
        "cafe": _details("places/cafe/photos/1"),
        "museum": _details("places/museum/photos/1"),
    }
    nearby = {
        200: [],
        500: [NearbyPlace(id="target", display_name="Target"), NearbyPlace(id="bare", display_name="Bare")],
        1000: [NearbyPlace(id="cafe", display_name="Cafe"), NearbyPlace(id="museum", display_name="Museum")],
    }
    service, repo = _service(details, nearby)

    photo = asyncio.run(service.resolve_photo("target"))

    assert photo.photo_url == build_photo_url("places/cafe/photos/1", "secret")
    assert photo.source_place_name == "Cafe"
    radii = [c.args[2] for c in repo.search_nearby.call_args_list]
    assert radii == [200, 500, 1000]
    for c in repo.search_nearby.call_args_list:
        assert c.args[:2] == (HERE.latitude, HERE.longitude)
    looked_up = [c.args[0] for c in repo.get_place_details.call_args_list]
    # target once for itself, never again as a candidate; museum never looked up
    assert looked_up == ["target", "bare", "cafe"]


def test_first_match_at_smallest_radius_stops_the_search():
    details = {
        "target": _details(location=HERE),
        "bakery": _details("places/bakery/photos/1"),
    }
    service, repo = _service(details, {200: [NearbyPlace(id="bakery", display_name="Bakery")]})

    photo = asyncio.run(service.resolve_photo("target"))

    assert photo.source_place_name == "Bakery"
    assert repo.search_nearby.call_count == 1


def test_no_photo_at_any_radius_is_not_found():
    details = {"target": _details(location=HERE), "bare": _details()}
    nearby = {r: [NearbyPlace(id="bare", display_name="Bare")] for r in (200, 500, 1000)}
    service, repo = _service(details, nearby)

    with pytest.raises(NotFoundError) as exc:
        asyncio.run(service.resolve_photo("target"))

    assert exc.value.message == "No photos found in this area"
    assert repo.search_nearby.call_count == 3


def test_upstream_failure_propagates():
    service, repo = _service({})
    repo.get_place_details.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        asyncio.run(service.resolve_photo("target"))
