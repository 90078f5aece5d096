"""Discount engine: pick a discount strategy by type and apply it to an amount."""

from discount_engine.calculator import DiscountCalculator, calculate_discount
from discount_engine.discount_config import DiscountConfig, DiscountConfigCache, get_discount_config
from discount_engine.exceptions import (
    ConfigurationError,
    DiscountError,
    InvalidAmountError,
    InvalidTypeError,
    MissingParameterError,
    UnsupportedTypeError,
)
from discount_engine.factory import DiscountFactory, create_discount
from discount_engine.strategies import (
    BulkDiscount,
    DiscountStrategy,
    DiscountType,
    FixedDiscount,
    PercentageDiscount,
    SeasonalDiscount,
)

__version__ = "0.1.0"

__all__ = [
    "DiscountCalculator",
    "calculate_discount",
    "DiscountConfig",
    "DiscountConfigCache",
    "get_discount_config",
    "DiscountFactory",
    "create_discount",
    "DiscountStrategy",
    "DiscountType",
    "PercentageDiscount",
    "FixedDiscount",
    "BulkDiscount",
    "SeasonalDiscount",
    "DiscountError",
    "ConfigurationError",
    "InvalidTypeError",
    "UnsupportedTypeError",
    "MissingParameterError",
    "InvalidAmountError",
]
