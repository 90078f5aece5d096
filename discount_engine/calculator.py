"""Apply a discount strategy to an amount."""

from decimal import Decimal

from discount_engine import metrics
from discount_engine.logging_config import get_logger
from discount_engine.strategies.base import DiscountStrategy, Number


class DiscountCalculator:
    """Thin invoker around DiscountStrategy.calculate."""

    def calculate_discount(self, discount: DiscountStrategy, amount: Number) -> Decimal:
        strategy = type(discount).__name__
        result = discount.calculate(amount)
        metrics.discount_calculations_total.labels(strategy=strategy).inc()
        get_logger(__name__, strategy=strategy).debug(f"Applied to {amount}: {result}")
        return result


def calculate_discount(discount: DiscountStrategy, amount: Number) -> Decimal:
    return DiscountCalculator().calculate_discount(discount, amount)
