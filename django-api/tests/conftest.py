"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta

import pytest
from rest_framework.test import APIClient

from planner.domain import VenueId
from planner.services import ConfigService, EventService
from planner.stores import DjangoConfigStore, InMemoryConfigStore, InMemoryEventRepository


class FakeClock:
    """Callable clock whose time only moves when a test says so."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 3, 15, 10, 0))


@pytest.fixture
def config_store() -> InMemoryConfigStore:
    return InMemoryConfigStore()


@pytest.fixture
def venue_id(config_store: InMemoryConfigStore) -> VenueId:
    return config_store.add_venue("main")


@pytest.fixture
def config_service(config_store: InMemoryConfigStore, venue_id: VenueId) -> ConfigService:
    service = ConfigService(config_store, "main")
    service.load()
    return service


@pytest.fixture
def event_repository() -> InMemoryEventRepository:
    return InMemoryEventRepository()


@pytest.fixture
def event_service(event_repository: InMemoryEventRepository, clock: FakeClock) -> EventService:
    return EventService(event_repository, clock=clock)


@pytest.fixture
def venue(db) -> VenueId:
    """A provisioned venue with code ``main`` in the test database."""
    return DjangoConfigStore().provision("main", "Main Venue")
