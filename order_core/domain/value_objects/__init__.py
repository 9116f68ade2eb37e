"""Domain value objects."""

from .address import Address
from .money import Money
from .order_number import generate_order_number
from .order_status import OrderStatus

__all__ = [
    "Address",
    "Money",
    "OrderStatus",
    "generate_order_number",
]
