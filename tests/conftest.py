"""Shared pytest fixtures and configuration."""

import os
import pytest
from freezegun import freeze_time

# Set test environment variables before any src module reads them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SERVICE_NAME", "homefinder-backend")
os.environ.setdefault("SEED_AGENTS", "true")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from src.models.auth_context import AuthenticatedContext
from src.services.accounts import register_user
from src.services.store import MemoryStore
from tests.fixtures.properties import los_angeles_house, austin_apartment


@pytest.fixture
def store():
    """Fresh store with the default seeded agents."""
    return MemoryStore()


@pytest.fixture
def empty_store():
    """Fresh store with no seed data at all."""
    return MemoryStore(seed_agents=False)


@pytest.fixture
def owner(store):
    """Registered user who owns the sample listings."""
    return register_user(
        store,
        username="owner",
        password="owner-pass",
        email="owner@example.com",
        full_name="Olivia Owner"
    )


@pytest.fixture
def buyer(store):
    """Second registered user."""
    return register_user(
        store,
        username="buyer",
        password="buyer-pass",
        email="buyer@example.com",
        full_name="Ben Buyer"
    )


@pytest.fixture
def owner_ctx(owner):
    return AuthenticatedContext(user_id=owner.id, username=owner.username)


@pytest.fixture
def buyer_ctx(buyer):
    return AuthenticatedContext(user_id=buyer.id, username=buyer.username)


@pytest.fixture
def sample_properties(store, owner):
    """P1 (Los Angeles, 500000, 3 beds) and P2 (Austin, 300000, 2 beds)."""
    p1 = store.create_property({**los_angeles_house(), "user_id": owner.id})
    p2 = store.create_property({**austin_apartment(), "user_id": owner.id})
    return p1, p2


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2024-12-09 12:00:00") as frozen_time:
        yield frozen_time

