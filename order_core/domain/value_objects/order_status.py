"""
Order status value object.

Lifecycle:
    CREATED -> CONFIRMED -> DISPATCHED -> DELIVERED
    CANCELLED is reachable only from CREATED or CONFIRMED.
    DELIVERED and CANCELLED are terminal.
"""
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Union

from ..errors import ValidationError


class OrderStatus(str, Enum):
    """Closed set of order states with a table-driven transition check."""

    CREATED = "CREATED"
    CONFIRMED = "CONFIRMED"
    DISPATCHED = "DISPATCHED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def create(cls, value: Union[str, "OrderStatus"]) -> "OrderStatus":
        """Parse a raw status; input is normalized to upper case.

        Raises:
            ValidationError: If the value is not one of the five states
        """
        if isinstance(value, OrderStatus):
            return value
        if not isinstance(value, str):
            raise ValidationError(f"Invalid order status: {value!r}", {"field": "status"})
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            raise ValidationError(f"Invalid order status: {value}", {"field": "status"}) from exc

    @classmethod
    def default(cls) -> "OrderStatus":
        return cls.CREATED

    @classmethod
    def all_statuses(cls) -> List["OrderStatus"]:
        return list(cls)

    @classmethod
    def valid_transitions(cls, status: "OrderStatus") -> FrozenSet["OrderStatus"]:
        return _TRANSITIONS[status]

    def can_transition_to(self, target: "OrderStatus") -> bool:
        return target in _TRANSITIONS[self]

    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    def is_cancellable(self) -> bool:
        # Narrower than "not terminal": DISPATCHED is neither.
        return self in _CANCELLABLE

    def __str__(self) -> str:
        return self.value


_TRANSITIONS: Mapping[OrderStatus, FrozenSet[OrderStatus]] = MappingProxyType({
    OrderStatus.CREATED: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.DISPATCHED, OrderStatus.CANCELLED}),
    OrderStatus.DISPATCHED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),  # Terminal
    OrderStatus.CANCELLED: frozenset(),  # Terminal
})

_CANCELLABLE: FrozenSet[OrderStatus] = frozenset({OrderStatus.CREATED, OrderStatus.CONFIRMED})
