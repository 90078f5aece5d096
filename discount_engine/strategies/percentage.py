"""Percentage discount strategy."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from discount_engine.strategies.base import DiscountStrategy, DiscountType, Number, to_decimal


@dataclass(frozen=True)
class PercentageDiscount(DiscountStrategy):
    """Take ``percentage`` percent off the amount.

    Percentages above 100 produce a negative result; nothing is clamped.
    """

    percentage: Decimal

    discount_type = DiscountType.PERCENTAGE

    def __post_init__(self):
        object.__setattr__(self, "percentage", to_decimal(self.percentage))

    def calculate(self, amount: Number) -> Decimal:
        amount = to_decimal(amount)
        return amount - amount * (self.percentage / 100)

    def to_dict(self) -> dict:
        return {**super().to_dict(), "percentage": float(self.percentage)}
