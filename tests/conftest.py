"""Shared fixtures: factories for addresses, items, orders and create payloads."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from order_core.domain.entities import Order, OrderItem
from order_core.domain.value_objects import Address, Money, OrderStatus
from order_core.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; start every test from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def retailer_id() -> str:
    return "7f3c2a8e-5b1d-4c9e-9a6f-2d8b4e1c0a35"


@pytest.fixture
def address() -> Address:
    return Address.create(
        {
            "street": "12 Harbour Road",
            "city": "Alexandria",
            "state": "Alexandria Governorate",
            "postal_code": "21500",
            "country": "EG",
        }
    )


@pytest.fixture
def make_item():
    """Factory for valid order items."""

    def _make(product_id="SKU-A", quantity=1, price="10.00", currency="USD", name=None):
        return OrderItem.create(
            product_id=product_id,
            product_name=name or f"Product {product_id}",
            quantity=quantity,
            unit_price=Money.create(Decimal(price), currency),
        )

    return _make


@pytest.fixture
def make_order(address, retailer_id):
    """Factory for new CREATED orders."""

    def _make(items=(), customer_id="cust-1", **overrides):
        fields = dict(
            retailer_id=retailer_id,
            customer_id=customer_id,
            customer_name="Nour Hassan",
            customer_email="nour@example.com",
            delivery_address=address,
        )
        fields.update(overrides)
        return Order.create(items=list(items), **fields)

    return _make


@pytest.fixture
def make_stored_order(address, retailer_id):
    """Factory for orders as a repository would hand them out (fixed timestamps)."""

    def _make(
        order_number,
        created_at,
        status=OrderStatus.CREATED,
        customer_id="cust-1",
        customer_name="Nour Hassan",
        retailer=None,
    ):
        return Order.reconstitute(
            order_number=order_number,
            retailer_id=retailer or retailer_id,
            customer_id=customer_id,
            customer_name=customer_name,
            customer_email="nour@example.com",
            delivery_address=address,
            status=status,
            created_at=created_at,
            updated_at=created_at,
        )

    return _make


@pytest.fixture
def order_payload(retailer_id) -> dict:
    """Valid CreateOrderInput payload (snake_case)."""
    return {
        "retailer_id": retailer_id,
        "customer_id": "cust-1",
        "customer_name": "Nour Hassan",
        "customer_email": "nour@example.com",
        "delivery_address": {
            "street": "12 Harbour Road",
            "city": "Alexandria",
            "state": "Alexandria Governorate",
            "postal_code": "21500",
            "country": "EG",
        },
        "items": [
            {"product_id": "SKU-A", "product_name": "Rice 5kg", "quantity": 2, "unit_price": "10.00"},
            {"product_id": "SKU-B", "product_name": "Olive oil", "quantity": 3, "unit_price": "5.00"},
        ],
        "notes": "Leave at the door",
    }


def utc(year, month, day, hour=0) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def at():
    """Build UTC datetimes: ``at(2024, 1, 31)``."""
    return utc
