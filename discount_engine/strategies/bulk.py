"""Bulk threshold discount strategy."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from discount_engine.strategies.base import DiscountStrategy, DiscountType, Number, to_decimal


@dataclass(frozen=True)
class BulkDiscount(DiscountStrategy):
    """Subtract ``bulk_discount_amount`` once the amount reaches ``threshold``.

    The threshold is inclusive. The result is not clamped, so a bulk amount
    larger than the purchase yields a negative total.
    """

    threshold: Decimal
    bulk_discount_amount: Decimal

    discount_type = DiscountType.BULK

    def __post_init__(self):
        object.__setattr__(self, "threshold", to_decimal(self.threshold))
        object.__setattr__(self, "bulk_discount_amount", to_decimal(self.bulk_discount_amount))

    def qualifies(self, amount: Number) -> bool:
        """Whether the amount meets the bulk threshold."""
        return to_decimal(amount) >= self.threshold

    def calculate(self, amount: Number) -> Decimal:
        amount = to_decimal(amount)
        discount = self.bulk_discount_amount if self.qualifies(amount) else Decimal("0")
        return amount - discount

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "threshold": float(self.threshold),
            "bulk_discount_amount": float(self.bulk_discount_amount),
        }
