"""Discount strategy implementations."""

from __future__ import annotations

from discount_engine.strategies.base import DiscountStrategy, DiscountType, to_decimal
from discount_engine.strategies.bulk import BulkDiscount
from discount_engine.strategies.fixed import FixedDiscount
from discount_engine.strategies.percentage import PercentageDiscount
from discount_engine.strategies.seasonal import SeasonalDiscount

__all__ = [
    "DiscountStrategy",
    "DiscountType",
    "to_decimal",
    "PercentageDiscount",
    "FixedDiscount",
    "BulkDiscount",
    "SeasonalDiscount",
]
