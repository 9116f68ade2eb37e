"""Tests for the status and item editing use cases."""
from decimal import Decimal

import pytest

from order_core.application.use_cases import (
    AddOrderItemUseCase,
    RemoveOrderItemUseCase,
    UpdateOrderItemQuantityUseCase,
    UpdateOrderStatusUseCase,
)
from order_core.domain.errors import (
    BusinessRuleViolationError,
    ConflictError,
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)


class TestUpdateOrderStatus:

    @pytest.mark.asyncio
    async def test_confirm(self, order_repository, stored_order):
        response = await UpdateOrderStatusUseCase(order_repository).execute(
            stored_order.id, {"status": "confirmed"}
        )

        assert response.status == "CONFIRMED"
        assert response.confirmed_at is not None
        assert response.version == 1

    @pytest.mark.asyncio
    async def test_walks_the_lifecycle(self, order_repository, stored_order):
        use_case = UpdateOrderStatusUseCase(order_repository)

        for status in ("CONFIRMED", "DISPATCHED", "DELIVERED"):
            response = await use_case.execute(stored_order.id, {"status": status})

        assert response.status == "DELIVERED"
        assert response.version == 3

    @pytest.mark.asyncio
    async def test_zero_items_blocks_confirmation(self, mock_order_repository, make_order):
        mock_order_repository.find_by_id.return_value = make_order()

        with pytest.raises(BusinessRuleViolationError):
            await UpdateOrderStatusUseCase(mock_order_repository).execute("order-1", {"status": "CONFIRMED"})

        mock_order_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_transition_surfaces_verbatim(self, order_repository, stored_order):
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            await UpdateOrderStatusUseCase(order_repository).execute(stored_order.id, {"status": "DELIVERED"})

        assert exc_info.value.current_state == "CREATED"
        assert exc_info.value.target_state == "DELIVERED"

    @pytest.mark.asyncio
    async def test_cancel_after_dispatch(self, order_repository, stored_order):
        use_case = UpdateOrderStatusUseCase(order_repository)
        await use_case.execute(stored_order.id, {"status": "CONFIRMED"})
        await use_case.execute(stored_order.id, {"status": "DISPATCHED"})

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(stored_order.id, {"status": "CANCELLED"})

        stored = await order_repository.find_by_id(stored_order.id)
        assert stored.status.value == "DISPATCHED"

    @pytest.mark.asyncio
    async def test_rejected_target(self, mock_order_repository):
        with pytest.raises(ValidationError):
            await UpdateOrderStatusUseCase(mock_order_repository).execute("order-1", {"status": "CREATED"})

        mock_order_repository.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_order(self, order_repository):
        with pytest.raises(NotFoundError):
            await UpdateOrderStatusUseCase(order_repository).execute("missing", {"status": "CONFIRMED"})

    @pytest.mark.asyncio
    async def test_concurrent_update_conflict(self, mock_order_repository, make_order, make_item):
        mock_order_repository.find_by_id.return_value = make_order(items=[make_item()])
        mock_order_repository.update.side_effect = ConflictError("modified concurrently")

        with pytest.raises(ConflictError):
            await UpdateOrderStatusUseCase(mock_order_repository).execute("order-1", {"status": "CONFIRMED"})


class TestOrderItemUseCases:

    @pytest.mark.asyncio
    async def test_add_new_item(self, order_repository, stored_order):
        response = await AddOrderItemUseCase(order_repository).execute(
            stored_order.id,
            {"productId": "SKU-C", "productName": "Tea", "quantity": 1, "unitPrice": "2.50"},
        )

        assert response.item_count == 3
        assert response.total_amount == Decimal("37.50")
        assert all(item.id for item in response.items)

    @pytest.mark.asyncio
    async def test_add_existing_product_merges(self, order_repository, stored_order):
        response = await AddOrderItemUseCase(order_repository).execute(
            stored_order.id,
            {"product_id": "SKU-A", "product_name": "Rice", "quantity": 1, "unit_price": "10.00"},
        )

        assert response.item_count == 2
        assert response.items[0].quantity == 3

    @pytest.mark.asyncio
    async def test_add_invalid_item(self, order_repository, stored_order):
        with pytest.raises(ValidationError):
            await AddOrderItemUseCase(order_repository).execute(
                stored_order.id, {"product_id": "SKU-C", "product_name": "Tea", "quantity": 0, "unit_price": "1"}
            )

    @pytest.mark.asyncio
    async def test_add_to_confirmed_order(self, order_repository, stored_order):
        await UpdateOrderStatusUseCase(order_repository).execute(stored_order.id, {"status": "CONFIRMED"})

        with pytest.raises(BusinessRuleViolationError):
            await AddOrderItemUseCase(order_repository).execute(
                stored_order.id, {"product_id": "SKU-C", "product_name": "Tea", "quantity": 1, "unit_price": "1"}
            )

    @pytest.mark.asyncio
    async def test_remove_item(self, order_repository, stored_order):
        response = await RemoveOrderItemUseCase(order_repository).execute(stored_order.id, "SKU-A")

        assert [item.product_id for item in response.items] == ["SKU-B"]
        assert response.total_amount == Decimal("15.00")

    @pytest.mark.asyncio
    async def test_remove_absent_item(self, order_repository, stored_order):
        with pytest.raises(NotFoundError):
            await RemoveOrderItemUseCase(order_repository).execute(stored_order.id, "SKU-Z")

        stored = await order_repository.find_by_id(stored_order.id)
        assert stored.item_count == 2
        assert stored.version == 0

    @pytest.mark.asyncio
    async def test_update_quantity(self, order_repository, stored_order):
        response = await UpdateOrderItemQuantityUseCase(order_repository).execute(
            stored_order.id, "SKU-B", {"quantity": 1}
        )

        assert response.total_amount == Decimal("25.00")

    @pytest.mark.asyncio
    async def test_update_quantity_requires_positive(self, order_repository, stored_order):
        with pytest.raises(ValidationError):
            await UpdateOrderItemQuantityUseCase(order_repository).execute(
                stored_order.id, "SKU-B", {"quantity": 0}
            )
