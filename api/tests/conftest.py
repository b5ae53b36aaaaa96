"""
Shared fixtures: a fresh store or application per test.
"""
import pytest
from fastapi.testclient import TestClient

from orbital.config import Settings
from orbital.main import create_app
from orbital.schemas.user import UserCreate
from orbital.services.seed_data import seed_demo_data
from orbital.services.user_service import UserService
from orbital.utils.store import EntityStore


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment: no Redis, demo catalog on"""
    return Settings(REDIS_URL="", SEED_DEMO_DATA=True, DEBUG=False)


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def seeded_store(store: EntityStore) -> EntityStore:
    """Store with the demo catalog: destinations/packages 1-3, accommodations 1-2"""
    seed_demo_data(store)
    return store


@pytest.fixture
def alice(seeded_store: EntityStore):
    return UserService(seeded_store).register(
        UserCreate(
            username="alice",
            email="alice@example.com",
            password="moonwalk-2025",
            full_name="Alice Armstrong",
        )
    )


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client: TestClient) -> dict:
    response = client.post(
        "/users/register",
        json={
            "username": "alice",
            "email": "alice@example.com",
            "password": "moonwalk-2025",
            "full_name": "Alice Armstrong",
        },
    )
    assert response.status_code == 201
    return response.json()
