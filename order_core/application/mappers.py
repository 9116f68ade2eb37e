"""Mappers between domain aggregates and application DTOs."""

from order_core.domain.entities import Order, OrderItem
from order_core.domain.value_objects import Money

from .dtos import AddressDTO, OrderItemInput, OrderItemResponseDTO, OrderResponseDTO


class OrderItemInputMapper:
    """Static mapper for OrderItemInput -> OrderItem."""

    @staticmethod
    def to_domain(item: OrderItemInput) -> OrderItem:
        return OrderItem.create(
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=Money.create(item.unit_price, item.currency),
        )


class OrderResponseMapper:
    """Static mapper for Order -> OrderResponseDTO projection."""

    @staticmethod
    def item_to_response(item: OrderItem) -> OrderItemResponseDTO:
        return OrderItemResponseDTO(
            id=item.id,
            order_id=item.order_id,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=item.unit_price.amount,
            currency=item.unit_price.currency,
            total_price=item.total_price.amount,
            created_at=item.created_at.isoformat(),
            updated_at=item.updated_at.isoformat(),
        )

    @staticmethod
    def to_response(order: Order) -> OrderResponseDTO:
        """
        Project an aggregate into its read-only response.

        Args:
            order: Domain Order

        Returns:
            OrderResponseDTO with ISO-8601 dates and the total split into
            amount and currency
        """
        address = order.delivery_address
        total = order.total_amount

        def iso(value):
            return value.isoformat() if value else None

        return OrderResponseDTO(
            id=order.id,
            order_number=order.order_number,
            retailer_id=order.retailer_id,
            customer_id=order.customer_id,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            delivery_address=AddressDTO(
                street=address.street,
                city=address.city,
                state=address.state,
                postal_code=address.postal_code,
                country=address.country,
            ),
            items=[OrderResponseMapper.item_to_response(item) for item in order.items],
            item_count=order.item_count,
            status=order.status.value,
            total_amount=total.amount,
            currency=total.currency,
            notes=order.notes,
            version=order.version,
            created_at=order.created_at.isoformat(),
            updated_at=order.updated_at.isoformat(),
            confirmed_at=iso(order.confirmed_at),
            dispatched_at=iso(order.dispatched_at),
            delivered_at=iso(order.delivered_at),
            cancelled_at=iso(order.cancelled_at),
        )
