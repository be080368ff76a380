"""Shared pytest fixtures.

Domain and application tests run on in-memory fakes; tests marked with
``django_db`` use the sqlite in-memory database from the testing settings.
"""

import sys

import pytest
from loguru import logger

from core.domain import DomainEvents
from core.infrastructure.transaction import NoOpTransactionManager
from items.application import ItemApplicationService
from items.domain import ItemSettings
from tests.fakes import FakeItemRepository, StubCategoryService, StubPricingService

logger.remove()
logger.add(sys.stderr, level="WARNING")


@pytest.fixture(autouse=True)
def _clear_event_handlers():
    DomainEvents.clear_handlers()
    yield
    DomainEvents.clear_handlers()


@pytest.fixture
def settings_obj() -> ItemSettings:
    return ItemSettings()


@pytest.fixture
def repo() -> FakeItemRepository:
    return FakeItemRepository()


@pytest.fixture
def tx() -> NoOpTransactionManager:
    return NoOpTransactionManager()


@pytest.fixture
def service(repo, tx, settings_obj) -> ItemApplicationService:
    return ItemApplicationService(
        item_repository=repo,
        category_service=StubCategoryService(),
        pricing_service=StubPricingService(),
        transaction_manager=tx,
        settings=settings_obj,
    )


@pytest.fixture
def recorded_events():
    """Collect every published item event."""
    from items.domain import (
        ItemCreatedEvent,
        ItemDeletedEvent,
        ItemInventoryUpdatedEvent,
        ItemPriceChangedEvent,
        ItemStatusChangedEvent,
    )

    events = []
    for event_type in (
        ItemCreatedEvent,
        ItemPriceChangedEvent,
        ItemInventoryUpdatedEvent,
        ItemStatusChangedEvent,
        ItemDeletedEvent,
    ):
        DomainEvents.register(event_type, events.append)
    return events
