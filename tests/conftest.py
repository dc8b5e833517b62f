from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from modules.catalog.constants import AVAILABLE_ENTRIES
from modules.catalog.repositories import StaticCatalogRepository
from modules.orders.models import Order, OrderLineItem
from modules.orders.repositories import InMemoryOrderRepository, order_repository
from modules.orders.services import OrderService
from shared.infrastructure.bus import InMemoryEventBus

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _reset_order_store():
    """Start and finish every test with an empty process-wide store."""
    order_repository.clear()
    yield
    order_repository.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def order_repo():
    return InMemoryOrderRepository()


@pytest.fixture()
def catalog_repo():
    return StaticCatalogRepository()


@pytest.fixture()
def bus():
    return InMemoryEventBus()


@pytest.fixture()
def service(order_repo, catalog_repo, bus):
    """OrderService over a private store, a fixed clock and a private bus."""
    return OrderService(
        order_repository=order_repo,
        catalog_repository=catalog_repo,
        clock=lambda: FIXED_NOW,
        event_bus=bus,
    )


@pytest.fixture()
def fixed_now():
    return FIXED_NOW


@pytest.fixture()
def make_order(order_repo, fixed_now):
    """Builds WAITING orders with a single Margherita, ids from ``order_repo``."""

    def _make(name: str = "Davide") -> Order:
        return Order(
            id=order_repo.next_id(),
            customer_name=name,
            line_items=(OrderLineItem(catalog_entry=AVAILABLE_ENTRIES[0], quantity=1),),
            created_at=fixed_now,
        )

    return _make
