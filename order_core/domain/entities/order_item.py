"""Order line item entity (owned exclusively by an Order)."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..errors import BusinessRuleViolationError, ValidationError
from ..value_objects import Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class OrderItem:
    """
    Line item: product, quantity and unit price.

    Identity is ``id`` once persisted, otherwise ``product_id`` (the Order
    merges lines that share a product).
    """

    def __init__(
        self,
        *,
        product_id: str,
        product_name: str,
        quantity: int,
        unit_price: Money,
        id: Optional[str] = None,
        order_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        now = _utcnow()
        self._id = id
        self._order_id = order_id
        self._product_id = product_id
        self._product_name = product_name
        self._quantity = quantity
        self._unit_price = unit_price
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @classmethod
    def create(
        cls,
        *,
        product_id: str,
        product_name: str,
        quantity: int,
        unit_price: Money,
        id: Optional[str] = None,
        order_id: Optional[str] = None,
    ) -> "OrderItem":
        """Validate and build a new line item.

        Raises:
            ValidationError: On empty product fields, non-positive quantity
                or non-positive unit price
        """
        if not isinstance(product_id, str) or not product_id.strip():
            raise ValidationError("Product ID is required", {"field": "product_id"})
        if not isinstance(product_name, str) or not product_name.strip():
            raise ValidationError("Product name is required", {"field": "product_name"})
        if not _is_positive_int(quantity):
            raise ValidationError("Quantity must be a positive integer", {"field": "quantity"})
        if not isinstance(unit_price, Money) or not unit_price.is_positive():
            raise ValidationError("Unit price must be positive", {"field": "unit_price"})

        return cls(
            id=id,
            order_id=order_id,
            product_id=product_id.strip(),
            product_name=product_name.strip(),
            quantity=quantity,
            unit_price=unit_price,
        )

    @classmethod
    def reconstitute(cls, **props: Any) -> "OrderItem":
        """Rebuild from storage without validation."""
        return cls(**props)

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def order_id(self) -> Optional[str]:
        return self._order_id

    @property
    def product_id(self) -> str:
        return self._product_id

    @property
    def product_name(self) -> str:
        return self._product_name

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def unit_price(self) -> Money:
        return self._unit_price

    @property
    def total_price(self) -> Money:
        return self._unit_price.multiply(self._quantity)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def attach_to(self, order_id: str) -> None:
        """Set the owning order back-reference (once)."""
        if self._order_id is not None and self._order_id != order_id:
            raise BusinessRuleViolationError(
                "Order item already belongs to another order",
                {"order_id": self._order_id, "product_id": self._product_id},
            )
        self._order_id = order_id

    def update_quantity(self, quantity: int) -> None:
        if not _is_positive_int(quantity):
            raise ValidationError("Quantity must be a positive integer", {"field": "quantity"})
        self._quantity = quantity
        self._updated_at = _utcnow()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderItem):
            return NotImplemented
        if self._id and other._id:
            return self._id == other._id
        return self._product_id == other._product_id

    __hash__ = None  # mutable entity

    def __repr__(self) -> str:
        return (
            f"OrderItem(product_id={self._product_id!r}, quantity={self._quantity}, "
            f"unit_price={self._unit_price})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "order_id": self._order_id,
            "product_id": self._product_id,
            "product_name": self._product_name,
            "quantity": self._quantity,
            "unit_price": self._unit_price.to_dict(),
            "total_price": self.total_price.to_dict(),
            "created_at": self._created_at.isoformat(),
            "updated_at": self._updated_at.isoformat(),
        }
