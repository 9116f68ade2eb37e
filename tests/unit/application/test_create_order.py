"""Tests for CreateOrderUseCase."""
from decimal import Decimal

import pytest

from order_core.application.use_cases import CreateOrderUseCase
from order_core.domain.entities import Order
from order_core.domain.errors import ConflictError, NotFoundError, ValidationError


@pytest.mark.asyncio
async def test_creates_order_with_items(mock_order_repository, mock_retailer_repository, order_payload):
    """Items are attached in input order and the total is computed."""
    use_case = CreateOrderUseCase(mock_order_repository, mock_retailer_repository)

    response = await use_case.execute(order_payload)

    mock_retailer_repository.exists.assert_awaited_once_with(order_payload["retailer_id"])
    mock_order_repository.create.assert_awaited_once()
    created = mock_order_repository.create.await_args.args[0]
    assert isinstance(created, Order)
    assert [item.product_id for item in created.items] == ["SKU-A", "SKU-B"]

    assert response.status == "CREATED"
    assert response.total_amount == Decimal("35.00")
    assert response.notes == "Leave at the door"
    assert response.delivery_address.city == "Alexandria"


@pytest.mark.asyncio
async def test_duplicate_products_in_input_are_merged(
    mock_order_repository, mock_retailer_repository, order_payload
):
    order_payload["items"][1].update(product_id="SKU-A", unit_price="10.00")
    use_case = CreateOrderUseCase(mock_order_repository, mock_retailer_repository)

    response = await use_case.execute(order_payload)

    assert response.item_count == 1
    assert response.items[0].quantity == 5
    assert response.total_amount == Decimal("50.00")


@pytest.mark.asyncio
async def test_order_without_items(mock_order_repository, mock_retailer_repository, order_payload):
    order_payload.pop("items")
    use_case = CreateOrderUseCase(mock_order_repository, mock_retailer_repository)

    response = await use_case.execute(order_payload)

    assert response.items == []
    assert response.total_amount == Decimal("0.00")


@pytest.mark.asyncio
async def test_unknown_retailer(mock_order_repository, mock_retailer_repository, order_payload):
    mock_retailer_repository.exists.return_value = False
    use_case = CreateOrderUseCase(mock_order_repository, mock_retailer_repository)

    with pytest.raises(NotFoundError) as exc_info:
        await use_case.execute(order_payload)

    assert exc_info.value.resource == "Retailer"
    mock_order_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_invalid_input_stops_before_any_lookup(
    mock_order_repository, mock_retailer_repository, order_payload
):
    order_payload["customer_email"] = "not-an-email"
    use_case = CreateOrderUseCase(mock_order_repository, mock_retailer_repository)

    with pytest.raises(ValidationError):
        await use_case.execute(order_payload)

    mock_retailer_repository.exists.assert_not_awaited()
    mock_order_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_order_number_conflict_propagates(
    mock_order_repository, mock_retailer_repository, order_payload
):
    mock_order_repository.create.side_effect = ConflictError("Order number ORD-1 already exists")
    use_case = CreateOrderUseCase(mock_order_repository, mock_retailer_repository)

    with pytest.raises(ConflictError):
        await use_case.execute(order_payload)

    mock_order_repository.create.assert_awaited_once()


@pytest.mark.asyncio
async def test_persists_through_in_memory_repository(order_repository, retailer_repository, order_payload):
    use_case = CreateOrderUseCase(order_repository, retailer_repository)

    response = await use_case.execute(order_payload)

    assert response.id is not None
    assert response.version == 0
    assert all(item.order_id == response.id for item in response.items)
    assert await order_repository.exists(response.id)
