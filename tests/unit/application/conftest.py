"""Fixtures for use-case tests: mocked and in-memory collaborators."""
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from order_core.domain.repositories import OrderRepository, RetailerRepository
from order_core.infrastructure.persistence import (
    InMemoryOrderRepository,
    InMemoryRetailerRepository,
)


@pytest.fixture
def mock_order_repository():
    """Mock order repository; ``create``/``update`` echo their argument."""
    repo = AsyncMock(spec=OrderRepository)
    repo.create.side_effect = lambda order: order
    repo.update.side_effect = lambda order: order
    return repo


@pytest.fixture
def mock_retailer_repository():
    repo = AsyncMock(spec=RetailerRepository)
    repo.exists.return_value = True
    return repo


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def retailer_repository(retailer_id) -> InMemoryRetailerRepository:
    return InMemoryRetailerRepository([retailer_id])


@pytest_asyncio.fixture
async def stored_order(order_repository, make_order, make_item):
    """A CREATED order with two lines, already persisted."""
    order = make_order(items=[make_item("SKU-A", 2, "10.00"), make_item("SKU-B", 3, "5.00")])
    return await order_repository.create(order)
