"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
import copy
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from ..errors import (
    BusinessRuleViolationError,
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)
from ..value_objects import Address, Money, OrderStatus, generate_order_number
from .order_item import OrderItem

DEFAULT_CURRENCY = "USD"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


class Order:
    """
    Order aggregate root.

    Owns its line items and status. Every business mutation goes through
    the methods below; a rejected operation leaves the aggregate unchanged.

    Use ``Order.create()`` for new orders. ``Order.reconstitute()`` is for
    persistence adapters and skips validation.
    """

    def __init__(
        self,
        *,
        retailer_id: str,
        customer_id: str,
        customer_name: str,
        customer_email: str,
        delivery_address: Address,
        id: Optional[str] = None,
        order_number: Optional[str] = None,
        items: Optional[List[OrderItem]] = None,
        status: Optional[OrderStatus] = None,
        notes: Optional[str] = None,
        version: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        confirmed_at: Optional[datetime] = None,
        dispatched_at: Optional[datetime] = None,
        delivered_at: Optional[datetime] = None,
        cancelled_at: Optional[datetime] = None,
    ) -> None:
        now = _utcnow()
        self._id = id
        self._order_number = order_number or generate_order_number()
        self._retailer_id = retailer_id
        self._customer_id = customer_id
        self._customer_name = customer_name
        self._customer_email = customer_email
        self._delivery_address = delivery_address
        self._items: List[OrderItem] = list(items or [])
        self._status = status or OrderStatus.default()
        self._notes = notes
        self._version = version
        self._created_at = created_at or now
        self._updated_at = updated_at or now
        self._confirmed_at = confirmed_at
        self._dispatched_at = dispatched_at
        self._delivered_at = delivered_at
        self._cancelled_at = cancelled_at

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def create(
        cls,
        *,
        retailer_id: str,
        customer_id: str,
        customer_name: str,
        customer_email: str,
        delivery_address: Address,
        notes: Optional[str] = None,
        items: Optional[List[OrderItem]] = None,
        status: Optional[OrderStatus] = None,
    ) -> "Order":
        """
        Create a new order in CREATED status.

        ``status`` is accepted for symmetry with ``reconstitute`` but always
        ignored: new orders start CREATED. Items are attached through
        ``add_item`` so duplicates are merged.

        Raises:
            ValidationError: If a required field is missing or empty
        """
        required = {
            "retailer_id": ("Retailer ID", retailer_id),
            "customer_id": ("Customer ID", customer_id),
            "customer_name": ("Customer name", customer_name),
            "customer_email": ("Customer email", customer_email),
        }
        for field_name, (label, value) in required.items():
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{label} is required", {"field": field_name})
        if not isinstance(delivery_address, Address):
            raise ValidationError("Delivery address is required", {"field": "delivery_address"})

        order = cls(
            retailer_id=retailer_id,
            customer_id=customer_id,
            customer_name=customer_name,
            customer_email=customer_email,
            delivery_address=delivery_address,
            notes=notes,
            status=OrderStatus.CREATED,
        )
        for item in items or []:
            order.add_item(item)
        return order

    @classmethod
    def reconstitute(cls, **props: Any) -> "Order":
        """Rebuild from storage; no validation, no defaults forced."""
        return cls(**props)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def order_number(self) -> str:
        return self._order_number

    @property
    def retailer_id(self) -> str:
        return self._retailer_id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def customer_name(self) -> str:
        return self._customer_name

    @property
    def customer_email(self) -> str:
        return self._customer_email

    @property
    def delivery_address(self) -> Address:
        return self._delivery_address

    @property
    def items(self) -> List[OrderItem]:
        """Detached copies of the lines; mutate through the aggregate."""
        return [copy.copy(item) for item in self._items]

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def notes(self) -> Optional[str]:
        return self._notes

    @property
    def version(self) -> int:
        return self._version

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def confirmed_at(self) -> Optional[datetime]:
        return self._confirmed_at

    @property
    def dispatched_at(self) -> Optional[datetime]:
        return self._dispatched_at

    @property
    def delivered_at(self) -> Optional[datetime]:
        return self._delivered_at

    @property
    def cancelled_at(self) -> Optional[datetime]:
        return self._cancelled_at

    @property
    def currency(self) -> str:
        return self._items[0].unit_price.currency if self._items else DEFAULT_CURRENCY

    @property
    def total_amount(self) -> Money:
        """Sum of quantity x unit price, recomputed on every read."""
        total = Money.zero(self.currency)
        for item in self._items:
            total = total.add(item.total_price)
        return total

    # =========================================================================
    # ITEMS
    # =========================================================================

    def add_item(self, item: OrderItem) -> None:
        """Append a line, or merge into the line with the same product."""
        self._ensure_items_editable("add items to")

        if item.order_id is not None and self._id is not None and item.order_id != self._id:
            raise BusinessRuleViolationError(
                "Order item already belongs to another order",
                {"order_id": item.order_id, "product_id": item.product_id},
            )
        if self._items and item.unit_price.currency != self.currency:
            raise BusinessRuleViolationError(
                f"Order currency is {self.currency}, item is priced in {item.unit_price.currency}",
                {"product_id": item.product_id},
            )

        existing = self._find_item(item.product_id)
        if existing:
            existing.update_quantity(existing.quantity + item.quantity)
        else:
            owned = copy.copy(item)
            if self._id is not None:
                owned.attach_to(self._id)
            self._items.append(owned)

        self._touch()

    def remove_item(self, product_id: str) -> None:
        self._ensure_items_editable("remove items from")

        item = self._find_item(product_id)
        if item is None:
            raise NotFoundError("OrderItem", product_id)

        self._items.remove(item)
        self._touch()

    def update_item_quantity(self, product_id: str, quantity: int) -> None:
        self._ensure_items_editable("update items in")

        item = self._find_item(product_id)
        if item is None:
            raise NotFoundError("OrderItem", product_id)

        item.update_quantity(quantity)
        self._touch()

    def update_notes(self, notes: Optional[str]) -> None:
        self._notes = notes
        self._touch()

    # =========================================================================
    # STATUS TRANSITIONS
    # =========================================================================

    def confirm(self) -> None:
        self._ensure_transition(OrderStatus.CONFIRMED)
        if not self._items:
            raise BusinessRuleViolationError("An order with zero items cannot be confirmed")

        self._status = OrderStatus.CONFIRMED
        self._confirmed_at = self._touch()

    def dispatch(self) -> None:
        self._ensure_transition(OrderStatus.DISPATCHED)
        self._status = OrderStatus.DISPATCHED
        self._dispatched_at = self._touch()

    def deliver(self) -> None:
        self._ensure_transition(OrderStatus.DELIVERED)
        self._status = OrderStatus.DELIVERED
        self._delivered_at = self._touch()

    def cancel(self) -> None:
        """Cancel; only CREATED and CONFIRMED orders qualify."""
        if not self._status.is_cancellable():
            raise BusinessRuleViolationError(
                "Order can only be cancelled when in CREATED or CONFIRMED status. "
                f"Current status: {self._status.value}",
                {"current_status": self._status.value},
            )
        self._status = OrderStatus.CANCELLED
        self._cancelled_at = self._touch()

    def transition_to(self, target: Union[str, OrderStatus]) -> None:
        """
        Generic transition entry point used by the status-update use case.

        Raises:
            ValidationError: If ``target`` is not a known status
            BusinessRuleViolationError: If the order is already terminal,
                or the specific transition is blocked by a rule
            InvalidStateTransitionError: If the table forbids the move
        """
        target_status = OrderStatus.create(target)

        if self._status.is_terminal():
            raise BusinessRuleViolationError(
                f"Cannot transition from terminal state: {self._status.value}",
                {"current_status": self._status.value, "target_status": target_status.value},
            )

        handlers = {
            OrderStatus.CONFIRMED: self.confirm,
            OrderStatus.DISPATCHED: self.dispatch,
            OrderStatus.DELIVERED: self.deliver,
            OrderStatus.CANCELLED: self.cancel,
        }
        handler = handlers.get(target_status)
        if handler is None:
            raise InvalidStateTransitionError(self._status.value, target_status.value)
        handler()

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain snapshot of all fields.

        Dates are ISO-8601 strings and amounts Decimal strings, so the result
        is JSON friendly and ``from_dict`` restores identical state.
        """
        total = self.total_amount
        return {
            "id": self._id,
            "order_number": self._order_number,
            "retailer_id": self._retailer_id,
            "customer_id": self._customer_id,
            "customer_name": self._customer_name,
            "customer_email": self._customer_email,
            "delivery_address": self._delivery_address.to_dict(),
            "items": [item.to_dict() for item in self._items],
            "item_count": self.item_count,
            "status": self._status.value,
            "total_amount": str(total.amount),
            "currency": total.currency,
            "notes": self._notes,
            "version": self._version,
            "created_at": _isoformat(self._created_at),
            "updated_at": _isoformat(self._updated_at),
            "confirmed_at": _isoformat(self._confirmed_at),
            "dispatched_at": _isoformat(self._dispatched_at),
            "delivered_at": _isoformat(self._delivered_at),
            "cancelled_at": _isoformat(self._cancelled_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        """Restore an Order from a ``to_dict`` snapshot."""
        items = [
            OrderItem.reconstitute(
                id=item_data.get("id"),
                order_id=item_data.get("order_id"),
                product_id=item_data["product_id"],
                product_name=item_data["product_name"],
                quantity=item_data["quantity"],
                unit_price=Money(
                    amount=Decimal(item_data["unit_price"]["amount"]),
                    currency=item_data["unit_price"]["currency"],
                ),
                created_at=_parse_datetime(item_data.get("created_at")),
                updated_at=_parse_datetime(item_data.get("updated_at")),
            )
            for item_data in data.get("items", [])
        ]

        return cls.reconstitute(
            id=data.get("id"),
            order_number=data["order_number"],
            retailer_id=data["retailer_id"],
            customer_id=data["customer_id"],
            customer_name=data["customer_name"],
            customer_email=data["customer_email"],
            delivery_address=Address.create(data["delivery_address"]),
            items=items,
            status=OrderStatus.create(data["status"]),
            notes=data.get("notes"),
            version=data.get("version", 0),
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
            confirmed_at=_parse_datetime(data.get("confirmed_at")),
            dispatched_at=_parse_datetime(data.get("dispatched_at")),
            delivered_at=_parse_datetime(data.get("delivered_at")),
            cancelled_at=_parse_datetime(data.get("cancelled_at")),
        )

    def __repr__(self) -> str:
        return (
            f"Order(order_number={self._order_number!r}, status={self._status.value}, "
            f"items={len(self._items)}, version={self._version})"
        )

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _find_item(self, product_id: str) -> Optional[OrderItem]:
        if isinstance(product_id, str):
            product_id = product_id.strip()
        return next((i for i in self._items if i.product_id == product_id), None)

    def _ensure_items_editable(self, action: str) -> None:
        if self._status.is_terminal():
            raise BusinessRuleViolationError(
                f"Cannot {action} a completed or cancelled order",
                {"current_status": self._status.value},
            )
        if self._status is not OrderStatus.CREATED:
            raise BusinessRuleViolationError(
                f"Can only {action} orders in CREATED status",
                {"current_status": self._status.value},
            )

    def _ensure_transition(self, target: OrderStatus) -> None:
        if not self._status.can_transition_to(target):
            raise InvalidStateTransitionError(self._status.value, target.value)

    def _touch(self) -> datetime:
        now = _utcnow()
        self._updated_at = now
        return now
