"""Tests for the LeftoverLink HTTP API."""

import base64
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from leftover_link.api.main import create_app
from leftover_link.api.schemas import ListingResponse
from leftover_link.config import AppSettings
from leftover_link.models import FILTER_TAGS, Listing
from leftover_link.store import InMemoryListingStore


@pytest.fixture
def store():
    return InMemoryListingStore.with_sample_data()


@pytest.fixture
def client(store):
    app = create_app(AppSettings(), store=store)
    with TestClient(app) as test_client:
        yield test_client


def titles(response):
    return [item["title"] for item in response.json()]


def new_listing_body(**overrides):
    body = {
        "title": "Veggie Curry",
        "description": "Chickpea curry, serves two.",
        "location": "Dorm B kitchen",
        "dietary_tags": ["Vegan", "Gluten-Free"],
    }
    body.update(overrides)
    return body


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_tags(client):
    response = client.get("/api/tags")

    assert response.status_code == 200
    assert response.json() == list(FILTER_TAGS)


def test_list_listings_in_store_order(client):
    response = client.get("/api/listings")

    assert response.status_code == 200
    assert titles(response) == [
        "Leftover Pasta",
        "Half a Pizza",
        "Gluten-free Muffins",
        "Vegan Salad",
        "Fruit Bowl",
    ]
    assert response.json()[0]["time_ago"] == "1h ago"


def test_list_listings_with_filters(client):
    assert titles(client.get("/api/listings", params={"search": "pizza"})) == ["Half a Pizza"]
    assert titles(client.get("/api/listings", params={"tag": "Vegetarian"})) == ["Leftover Pasta", "Fruit Bowl"]
    assert client.get("/api/listings", params={"search": "leftover", "tag": "Nut-Free"}).json() == []
    assert len(client.get("/api/listings", params={"search": "   ", "tag": "All"}).json()) == 5


def test_create_listing(client, store):
    response = client.post("/api/listings", json=new_listing_body())

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Veggie Curry"
    assert data["dietary_tags"] == ["Gluten-Free", "Vegan"]
    assert data["time_ago"] == "Just now"
    assert store.snapshot()[0].id == data["id"]
    assert titles(client.get("/api/listings"))[0] == "Veggie Curry"


def test_create_listing_with_image(client, store):
    image = b"\x89PNG fake image bytes"
    body = new_listing_body(image_base64=base64.b64encode(image).decode("ascii"))

    response = client.post("/api/listings", json=body)

    assert response.status_code == 201
    assert store.get(response.json()["id"]).image_data == image
    assert base64.b64decode(response.json()["image_base64"]) == image


def test_create_listing_rejects_blank_field(client, store):
    response = client.post("/api/listings", json=new_listing_body(title="   "))

    assert response.status_code == 422
    assert response.json()["field"] == "title"
    assert len(store) == 5


def test_create_listing_rejects_bad_image(client, store):
    response = client.post("/api/listings", json=new_listing_body(image_base64="not base64!!"))

    assert response.status_code == 422
    assert len(store) == 5


def test_get_listing(client, store):
    listing = store.snapshot()[1]

    response = client.get(f"/api/listings/{listing.id}")

    assert response.status_code == 200
    assert response.json()["title"] == "Half a Pizza"
    assert client.get("/api/listings/unknown-id").status_code == 404


def test_delete_listing(client, store):
    listing = store.snapshot()[0]

    response = client.delete(f"/api/listings/{listing.id}")

    assert response.status_code == 204
    assert store.get(listing.id) is None
    assert len(store) == 4


def test_delete_unknown_listing_is_noop(client, store):
    response = client.delete("/api/listings/unknown-id")

    assert response.status_code == 204
    assert len(store) == 5


def test_refresh_returns_unchanged_collection(client, store):
    before = [listing.id for listing in store]

    response = client.post("/api/listings/refresh")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == before


def test_unseeded_store_from_settings():
    settings = AppSettings()
    settings.store.seed_sample_data = False
    app = create_app(settings)

    with TestClient(app) as test_client:
        assert test_client.get("/api/listings").json() == []


def test_listing_response_built_from_listing_dict():
    listing = Listing(
        title="Bao",
        description="Steamed buns",
        location="Dorm E",
        dietary_tags={"Vegan", "Nut-Free"},
        image_data=b"bao-bytes",
        created_at=datetime(2024, 5, 1, 12, 0, 0)
    )

    response = ListingResponse.from_listing(listing, now=datetime(2024, 5, 1, 15, 30, 0))
    data = listing.to_dict()

    assert response.id == data["id"]
    assert response.dietary_tags == data["dietary_tags"] == ["Nut-Free", "Vegan"]
    assert response.image_base64 == data["image_data"]
    assert response.created_at == listing.created_at
    assert response.time_ago == "3h ago"
