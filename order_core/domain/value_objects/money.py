"""Money value object - pure Python immutable type."""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Union

from ..errors import ValidationError

Number = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")


def _to_decimal(value: Number, field: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be numeric", {"field": field})
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"{field} must be numeric", {"field": field}) from exc
    if not result.is_finite():
        raise ValidationError(f"{field} must be finite", {"field": field})
    return result


@dataclass(frozen=True)
class Money:
    """
    Immutable non-negative monetary value with currency.

    Amounts are converted through ``Decimal(str(value))`` and rounded to
    two places with ROUND_HALF_UP, so 10.005 becomes 10.01.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        amount = _to_decimal(self.amount, "amount")
        if amount < 0:
            raise ValidationError("Money amount cannot be negative", {"field": "amount"})
        object.__setattr__(self, 'amount', amount.quantize(_CENTS, rounding=ROUND_HALF_UP))

        # 3-letter code, stored upper case
        if not isinstance(self.currency, str) or len(self.currency.strip()) != 3 \
                or not self.currency.strip().isalpha():
            raise ValidationError(
                f"Currency must be 3-letter ISO code, got: {self.currency}",
                {"field": "currency"},
            )
        object.__setattr__(self, 'currency', self.currency.strip().upper())

    @classmethod
    def create(cls, amount: Number, currency: str = "USD") -> "Money":
        return cls(amount=amount, currency=currency)

    @classmethod
    def zero(cls, currency: str = "USD") -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: "Money") -> "Money":
        """Add two Money objects (must have same currency)."""
        self._ensure_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract two Money objects; the result may not go below zero."""
        self._ensure_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise ValidationError("Subtraction would result in negative amount")
        return Money(amount=result, currency=self.currency)

    def multiply(self, factor: Number) -> "Money":
        factor_value = _to_decimal(factor, "factor")
        if factor_value < 0:
            raise ValidationError("Multiplication factor cannot be negative", {"field": "factor"})
        return Money(amount=self.amount * factor_value, currency=self.currency)

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, factor: Number) -> "Money":
        return self.multiply(factor)

    __rmul__ = __mul__

    def equals(self, other: "Money") -> bool:
        """Value comparison that refuses to compare across currencies."""
        self._ensure_same_currency(other)
        return self.amount == other.amount

    def greater_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def less_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return not self.less_than(other)

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return not self.greater_than(other)

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    def is_positive(self) -> bool:
        """Check if amount is positive."""
        return self.amount > 0

    def format(self) -> str:
        """Human readable amount, e.g. ``USD 1,234.50``."""
        return f"{self.currency} {self.amount:,.2f}"

    def to_dict(self) -> Dict[str, Any]:
        return {"amount": str(self.amount), "currency": self.currency}

    def _ensure_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}",
                {"currencies": [self.currency, other.currency]},
            )
