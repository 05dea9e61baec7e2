"""
Shared fixtures.

Every test gets its own application built around its own store, so
state never leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from entity_api.app.core.store import AppStore, Entity, EntityStore, build_store
from entity_api.app.main import create_app


@pytest.fixture
def store() -> AppStore:
    """Store seeded with the ten sample entities and four sample logs."""
    return build_store(seed=True)


@pytest.fixture
def client(store):
    """Test client for an app backed by ``store``."""
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def two_entity_store() -> AppStore:
    """Store holding only entities 1 and 2 and no request logs."""
    return AppStore(
        entities=EntityStore(
            [
                Entity(id=1, name="Entity1", description="Description1"),
                Entity(id=2, name="Entity2", description="Description2"),
            ]
        )
    )


@pytest.fixture
def small_client(two_entity_store):
    with TestClient(create_app(two_entity_store)) as test_client:
        yield test_client
