"""Pytest configuration and shared fixtures."""

import asyncio
from datetime import date

import pytest
from rest_framework.test import APIClient

from accounts.services import IdentityService
from accounts.stores import MemoryClientStorage, get_user_store, reset_user_store
from events.services import EventService
from events.stores import get_event_store, reset_event_store

TODAY = date(2025, 5, 1)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def fresh_stores(settings):
    """Every test starts from the seed dataset with no artificial latency."""
    settings.SIMULATED_LATENCY_SECONDS = 0
    reset_event_store()
    reset_user_store()
    yield
    reset_event_store()
    reset_user_store()


@pytest.fixture
def user_store():
    return get_user_store()


@pytest.fixture
def event_store():
    return get_event_store()


@pytest.fixture
def storage() -> MemoryClientStorage:
    return MemoryClientStorage()


@pytest.fixture
def identity(user_store, storage) -> IdentityService:
    return IdentityService(user_store, storage)


@pytest.fixture
def service(event_store, identity) -> EventService:
    return EventService(event_store, identity, today=lambda: TODAY)


@pytest.fixture
def login_as(identity):
    def _login(email: str):
        assert asyncio.run(identity.login(email, "any-password"))
        return identity.current_user

    return _login


@pytest.fixture
def api_login(api_client):
    def _login(email: str) -> APIClient:
        response = api_client.post(
            "/api/auth/login", {"email": email, "password": "x"}, format="json"
        )
        assert response.status_code == 200
        return api_client

    return _login
