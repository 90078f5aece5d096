"""Fixed amount discount strategy."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from discount_engine.strategies.base import DiscountStrategy, DiscountType, Number, to_decimal


@dataclass(frozen=True)
class FixedDiscount(DiscountStrategy):
    """Subtract a flat amount, never going below zero."""

    fixed_amount: Decimal

    discount_type = DiscountType.FIXED

    def __post_init__(self):
        object.__setattr__(self, "fixed_amount", to_decimal(self.fixed_amount))

    def calculate(self, amount: Number) -> Decimal:
        return max(to_decimal(amount) - self.fixed_amount, Decimal("0"))

    def to_dict(self) -> dict:
        return {**super().to_dict(), "fixed_amount": float(self.fixed_amount)}
