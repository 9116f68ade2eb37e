"""Static mappers for domain entities <-> database models."""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Optional

from order_core.domain.entities import Order, OrderItem
from order_core.domain.value_objects import Address, Money, OrderStatus

from .models.order_model import OrderItemModel, OrderModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; every stored datetime is UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class OrderItemMapper:
    """Static mapper for OrderItem <-> OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        return OrderItem.reconstitute(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            product_name=model.product_name,
            quantity=model.quantity,
            unit_price=Money(amount=Decimal(str(model.unit_price)), currency=model.currency),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        return OrderItemModel(
            id=entity.id or new_id(),
            order_id=order_id,
            position=position,
            product_id=entity.product_id,
            product_name=entity.product_name,
            quantity=entity.quantity,
            unit_price=entity.unit_price.amount,
            currency=entity.unit_price.currency,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class OrderMapper:
    """Static mapper for Order <-> OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items)."""
        return Order.reconstitute(
            id=model.id,
            order_number=model.order_number,
            retailer_id=model.retailer_id,
            customer_id=model.customer_id,
            customer_name=model.customer_name,
            customer_email=model.customer_email,
            delivery_address=Address(
                street=model.delivery_street,
                city=model.delivery_city,
                state=model.delivery_state,
                postal_code=model.delivery_postal_code,
                country=model.delivery_country,
            ),
            items=[OrderItemMapper.to_domain(item) for item in model.items],
            status=OrderStatus.create(model.status),
            notes=model.notes,
            version=model.version,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            confirmed_at=as_utc(model.confirmed_at),
            dispatched_at=as_utc(model.dispatched_at),
            delivered_at=as_utc(model.delivered_at),
            cancelled_at=as_utc(model.cancelled_at),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert a new domain aggregate to an ORM model with fresh ids."""
        order_id = entity.id or new_id()
        model = OrderModel(id=order_id, order_number=entity.order_number, version=0)
        OrderMapper._copy_scalars(entity, model)
        model.items = [
            OrderItemMapper.to_persistence(item, order_id, position)
            for position, item in enumerate(entity.items)
        ]
        return model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update an existing ORM model in place (items synced by id)."""
        OrderMapper._copy_scalars(entity, model)

        existing: Dict[str, OrderItemModel] = {item.id: item for item in model.items}
        synced = []
        for position, item in enumerate(entity.items):
            item_model = existing.get(item.id) if item.id else None
            if item_model is None:
                item_model = OrderItemMapper.to_persistence(item, model.id, position)
            else:
                item_model.position = position
                item_model.quantity = item.quantity
                item_model.product_name = item.product_name
                item_model.unit_price = item.unit_price.amount
                item_model.currency = item.unit_price.currency
                item_model.updated_at = item.updated_at
            synced.append(item_model)

        # delete-orphan cascade removes lines no longer on the aggregate
        model.items = synced
        return model

    @staticmethod
    def _copy_scalars(entity: Order, model: OrderModel) -> None:
        address = entity.delivery_address
        model.retailer_id = entity.retailer_id
        model.customer_id = entity.customer_id
        model.customer_name = entity.customer_name
        model.customer_email = entity.customer_email
        model.delivery_street = address.street
        model.delivery_city = address.city
        model.delivery_state = address.state
        model.delivery_postal_code = address.postal_code
        model.delivery_country = address.country
        model.status = entity.status.value
        model.notes = entity.notes
        model.created_at = entity.created_at
        model.updated_at = entity.updated_at
        model.confirmed_at = entity.confirmed_at
        model.dispatched_at = entity.dispatched_at
        model.delivered_at = entity.delivered_at
        model.cancelled_at = entity.cancelled_at
