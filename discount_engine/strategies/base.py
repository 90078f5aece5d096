"""Discount strategy base class and type tags."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Union

Number = Union[Decimal, int, float, str]


class DiscountType(str, Enum):
    """Discount type tags understood by the factory."""

    PERCENTAGE = "percentage"  # amount minus a percentage of it
    FIXED = "fixed"  # amount minus a flat sum, floored at zero
    BULK = "bulk"  # flat sum off once amount reaches a threshold
    SEASONAL = "seasonal"  # seasonal + general percentage off the original amount


def to_decimal(value: Number) -> Decimal:
    """Convert a numeric value to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class DiscountStrategy(ABC):
    """Base discount strategy.

    Concrete strategies are frozen dataclasses: parameters are fixed at
    construction and ``calculate`` depends on nothing but its argument.
    """

    discount_type: DiscountType

    @abstractmethod
    def calculate(self, amount: Number) -> Decimal:
        """Return the amount after applying this discount."""

    def to_dict(self) -> dict:
        """Describe the strategy for logging."""
        return {"discount_type": self.discount_type.value}
