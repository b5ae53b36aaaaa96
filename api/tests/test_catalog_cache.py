"""
Catalog list caching against an in-process Redis (fakeredis).
"""
import fakeredis
import pytest
from fastapi.testclient import TestClient

from orbital.config import Settings
from orbital.main import create_app
from orbital.models import Destination
from orbital.utils import redis as cache_module

EUROPA = {
    "name": "Europa Ice Camp",
    "description": "Under the ice",
    "image_url": "https://example.com/europa.jpg",
    "location": "JUPITER",
    "distance": "628 million km",
    "travel_time": "2-year journey",
    "price": 900000,
    "rating": 4.2,
    "review_count": 3,
}


@pytest.fixture
def redis_server(monkeypatch):
    """Every Redis connection the app opens talks to this one fake server"""
    server = fakeredis.FakeServer()
    monkeypatch.setattr(
        cache_module.redis,
        "from_url",
        lambda url, **kwargs: fakeredis.aioredis.FakeRedis(server=server, decode_responses=True),
    )
    return server


@pytest.fixture
def redis_view(redis_server):
    return fakeredis.FakeRedis(server=redis_server, decode_responses=True)


@pytest.fixture
def cached_settings() -> Settings:
    return Settings(REDIS_URL="redis://localhost:6379/0", SEED_DEMO_DATA=True, DEBUG=False)


@pytest.fixture
def cached_client(redis_server, cached_settings):
    with TestClient(create_app(cached_settings)) as test_client:
        yield test_client


def catalog_keys(redis_view, entity):
    return redis_view.keys(f"catalog:*:{entity}:*")


def test_list_miss_stores_response(cached_client, redis_view):
    assert catalog_keys(redis_view, "destinations") == []

    response = cached_client.get("/destinations")

    assert response.status_code == 200
    keys = catalog_keys(redis_view, "destinations")
    assert len(keys) == 1
    generation = cached_client.app.state.store.generation
    assert keys[0] == f"catalog:{generation}:destinations:all"
    assert redis_view.ttl(keys[0]) > 0


def test_list_hit_is_served_from_cache(cached_client):
    first = cached_client.get("/destinations").json()
    # Written straight to the store, so nothing invalidates the cached list
    cached_client.app.state.store.create(Destination, **{**EUROPA, "name": "Hidden Outpost"})

    second = cached_client.get("/destinations").json()

    assert second == first
    assert [d["id"] for d in second] == [1, 2, 3]


def test_create_invalidates_list_variants(cached_client, redis_view):
    cached_client.get("/destinations")
    cached_client.get("/destinations/featured")
    assert len(catalog_keys(redis_view, "destinations")) == 2

    response = cached_client.post("/destinations", json=EUROPA)

    assert response.status_code == 201
    assert catalog_keys(redis_view, "destinations") == []
    assert [d["id"] for d in cached_client.get("/destinations").json()] == [1, 2, 3, 4]


def test_create_accommodation_invalidates_filtered_list(cached_client, redis_view):
    assert len(cached_client.get("/accommodations", params={"destination_id": 1}).json()) == 1
    assert len(catalog_keys(redis_view, "accommodations")) == 1

    response = cached_client.post(
        "/accommodations",
        json={
            "destination_id": 1,
            "name": "Docking Ring Bunk",
            "description": "",
            "image_url": "",
            "capacity": "1 guest",
            "price_per_night": 2000,
            "rating": 3.9,
        },
    )

    assert response.status_code == 201
    assert catalog_keys(redis_view, "accommodations") == []
    assert len(cached_client.get("/accommodations", params={"destination_id": 1}).json()) == 2


def test_restart_does_not_serve_lists_from_previous_store(redis_server, cached_settings):
    with TestClient(create_app(cached_settings)) as first:
        assert first.post("/destinations", json=EUROPA).status_code == 201
        assert [d["id"] for d in first.get("/destinations").json()] == [1, 2, 3, 4]

    # Same Redis, fresh store with only the demo catalog
    with TestClient(create_app(cached_settings)) as second:
        listed = second.get("/destinations").json()

        assert [d["id"] for d in listed] == [1, 2, 3]
        for destination in listed:
            assert second.get(f"/destinations/{destination['id']}").status_code == 200
        assert second.get("/destinations/4").status_code == 404


def test_unreachable_redis_degrades_to_no_cache(monkeypatch, cached_settings):
    class BrokenRedis(fakeredis.aioredis.FakeRedis):
        async def ping(self, **kwargs):
            raise ConnectionError("connection refused")

    monkeypatch.setattr(
        cache_module.redis, "from_url", lambda url, **kwargs: BrokenRedis(decode_responses=True)
    )

    with TestClient(create_app(cached_settings)) as test_client:
        assert [d["id"] for d in test_client.get("/destinations").json()] == [1, 2, 3]
