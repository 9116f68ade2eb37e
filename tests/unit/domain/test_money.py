"""Tests for the Money value object."""
from decimal import Decimal

import pytest

from order_core.domain.errors import ErrorKind, ValidationError
from order_core.domain.value_objects import Money


class TestMoneyCreation:
    """Construction, normalisation and rounding."""

    def test_rounds_half_up_to_two_places(self):
        """10.005 rounds up, 10.004 rounds down."""
        assert Money.create(10.005, "USD").amount == Decimal("10.01")
        assert Money.create(10.004, "USD").amount == Decimal("10.00")
        assert Money.create("2.675").amount == Decimal("2.68")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Money.create(-1, "USD")

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.message == "Money amount cannot be negative"

    @pytest.mark.parametrize("amount", ["abc", True, "NaN", float("inf")])
    def test_non_numeric_or_non_finite_rejected(self, amount):
        with pytest.raises(ValidationError):
            Money.create(amount)

    def test_currency_normalised_to_upper_case(self):
        assert Money.create(5, "egp").currency == "EGP"

    @pytest.mark.parametrize("currency", ["US", "DOLLAR", "12A", ""])
    def test_invalid_currency_rejected(self, currency):
        with pytest.raises(ValidationError):
            Money.create(5, currency)

    def test_zero(self):
        zero = Money.zero("EUR")
        assert zero.is_zero()
        assert not zero.is_positive()
        assert zero.currency == "EUR"


class TestMoneyArithmetic:
    """Arithmetic and comparisons within one currency."""

    def test_add_subtract_multiply(self):
        ten = Money.create("10.00")
        three = Money.create("3.50")

        assert ten.add(three).amount == Decimal("13.50")
        assert ten.subtract(three).amount == Decimal("6.50")
        assert three.multiply(3).amount == Decimal("10.50")

    def test_operators(self):
        ten = Money.create(10)
        assert ten + Money.create(1) == Money.create(11)
        assert ten - Money.create(1) == Money.create(9)
        assert ten * 2 == Money.create(20)
        assert 2 * ten == Money.create(20)

    def test_subtract_below_zero_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.create(1).subtract(Money.create(2))

    def test_negative_factor_rejected(self):
        with pytest.raises(ValidationError, match="factor cannot be negative"):
            Money.create(1).multiply(-2)

    def test_comparisons(self):
        small, big = Money.create(1), Money.create(2)

        assert big.greater_than(small)
        assert small.less_than(big)
        assert small < big and big > small
        assert small <= Money.create(1) and big >= Money.create(2)
        assert small.equals(Money.create("1.00"))

    def test_currency_mismatch_raises(self):
        usd, eur = Money.create(1, "USD"), Money.create(1, "EUR")

        with pytest.raises(ValidationError, match="Currency mismatch: USD vs EUR"):
            usd.add(eur)
        with pytest.raises(ValidationError):
            usd.equals(eur)
        with pytest.raises(ValidationError):
            assert usd < eur

    def test_ordering_against_other_types_is_unsupported(self):
        with pytest.raises(TypeError):
            assert Money.create(1) < 2
        with pytest.raises(TypeError):
            assert Money.create(1) >= "1.00"

    def test_equality_operator_is_structural(self):
        """``==`` never raises; different currencies are simply unequal."""
        assert Money.create(1, "USD") != Money.create(1, "EUR")
        assert Money.create(1) == Money.create("1.00")


class TestMoneyPresentation:

    def test_format(self):
        assert Money.create("1234.5").format() == "USD 1,234.50"

    def test_to_dict(self):
        assert Money.create("7.1", "EGP").to_dict() == {"amount": "7.10", "currency": "EGP"}

    def test_immutable(self):
        money = Money.create(1)
        with pytest.raises(AttributeError):
            money.amount = Decimal("2")
