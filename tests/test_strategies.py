"""Tests for discount strategies."""

import dataclasses
from decimal import Decimal

import pytest

from discount_engine.strategies import (
    BulkDiscount,
    DiscountStrategy,
    DiscountType,
    FixedDiscount,
    PercentageDiscount,
    SeasonalDiscount,
)

AMOUNTS = [Decimal("0"), Decimal("1"), Decimal("99.99"), Decimal("1000"), Decimal("123456.78")]


class TestPercentageDiscount:
    """Test percentage discount arithmetic."""

    def test_ten_percent(self):
        assert PercentageDiscount(10).calculate(1000) == Decimal("900")

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_formula(self, amount):
        p = Decimal("12.5")
        assert PercentageDiscount(p).calculate(amount) == amount - amount * (p / 100)

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_zero_is_identity(self, amount):
        assert PercentageDiscount(0).calculate(amount) == amount

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_hundred_is_free(self, amount):
        assert PercentageDiscount(100).calculate(amount) == 0

    def test_over_hundred_goes_negative(self):
        """Percentages above 100 are not clamped."""
        assert PercentageDiscount(150).calculate(200) == Decimal("-100")

    def test_negative_percentage_accepted(self):
        assert PercentageDiscount(-10).calculate(100) == Decimal("110")

    def test_float_input_has_no_binary_artifacts(self):
        assert PercentageDiscount(0.1).calculate(0.3) == Decimal("0.2997")


class TestFixedDiscount:
    """Test fixed discount arithmetic."""

    @pytest.mark.parametrize("amount", AMOUNTS)
    @pytest.mark.parametrize("fixed", [Decimal("0"), Decimal("50"), Decimal("1000"), Decimal("999999")])
    def test_formula_never_negative(self, amount, fixed):
        result = FixedDiscount(fixed).calculate(amount)
        assert result == max(amount - fixed, Decimal("0"))
        assert result >= 0

    def test_clamped_to_zero(self):
        assert FixedDiscount(600).calculate(500) == Decimal("0")

    def test_exact_amount(self):
        assert FixedDiscount(500).calculate(500) == Decimal("0")


class TestBulkDiscount:
    """Test bulk threshold discount."""

    def test_above_threshold(self):
        assert BulkDiscount(1000, 200).calculate(2000) == Decimal("1800")

    def test_below_threshold(self):
        assert BulkDiscount(1000, 200).calculate(999.99) == Decimal("999.99")

    def test_threshold_is_inclusive(self):
        discount = BulkDiscount(1000, 200)
        assert discount.qualifies(1000)
        assert discount.calculate(1000) == Decimal("800")

    def test_not_clamped(self):
        """A bulk amount bigger than the purchase yields a negative total."""
        assert BulkDiscount(0, 200).calculate(100) == Decimal("-100")


class TestSeasonalDiscount:
    """Test seasonal + general discount."""

    def test_additive_not_compounded(self):
        assert SeasonalDiscount(10, 5).calculate(1000) == Decimal("850")

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_formula(self, amount):
        s, g = Decimal("7.5"), Decimal("3")
        expected = amount - amount * (s / 100) - amount * (g / 100)
        assert SeasonalDiscount(s, g).calculate(amount) == expected

    def test_not_clamped(self):
        assert SeasonalDiscount(80, 40).calculate(100) == Decimal("-20")


class TestStrategyContract:
    """Properties shared by all strategies."""

    @pytest.mark.parametrize(
        "strategy",
        [
            PercentageDiscount(10),
            FixedDiscount(50),
            BulkDiscount(100, 20),
            SeasonalDiscount(10, 5),
        ],
    )
    def test_immutable(self, strategy):
        field = dataclasses.fields(strategy)[0].name
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(strategy, field, Decimal("1"))

    def test_calculate_is_repeatable(self):
        strategy = SeasonalDiscount(10, 5)
        assert strategy.calculate(1000) == strategy.calculate(1000)

    def test_types(self):
        assert PercentageDiscount(1).discount_type == DiscountType.PERCENTAGE
        assert FixedDiscount(1).discount_type == DiscountType.FIXED
        assert BulkDiscount(1, 1).discount_type == DiscountType.BULK
        assert SeasonalDiscount(1, 1).discount_type == DiscountType.SEASONAL

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            DiscountStrategy()

    def test_to_dict(self):
        assert BulkDiscount(1000, 200).to_dict() == {
            "discount_type": "bulk",
            "threshold": 1000.0,
            "bulk_discount_amount": 200.0,
        }
