"""Seasonal discount strategy."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from discount_engine.strategies.base import DiscountStrategy, DiscountType, Number, to_decimal


@dataclass(frozen=True)
class SeasonalDiscount(DiscountStrategy):
    """Seasonal and general percentages, both taken from the original amount.

    The two deductions are additive, not compounded: 10% + 5% off 1000 is 850.
    """

    seasonal_discount: Decimal
    general_discount: Decimal

    discount_type = DiscountType.SEASONAL

    def __post_init__(self):
        object.__setattr__(self, "seasonal_discount", to_decimal(self.seasonal_discount))
        object.__setattr__(self, "general_discount", to_decimal(self.general_discount))

    def calculate(self, amount: Number) -> Decimal:
        amount = to_decimal(amount)
        seasonal = amount * (self.seasonal_discount / 100)
        general = amount * (self.general_discount / 100)
        return amount - seasonal - general

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "seasonal_discount": float(self.seasonal_discount),
            "general_discount": float(self.general_discount),
        }
