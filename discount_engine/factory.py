"""Discount strategy factory."""

from decimal import Decimal
from typing import Optional

from discount_engine import metrics
from discount_engine.discount_config import (
    DiscountConfig,
    DiscountConfigCache,
    config_cache,
)
from discount_engine.exceptions import (
    DiscountError,
    InvalidTypeError,
    MissingParameterError,
    UnsupportedTypeError,
)
from discount_engine.logging_config import get_logger
from discount_engine.strategies import (
    BulkDiscount,
    DiscountStrategy,
    DiscountType,
    FixedDiscount,
    PercentageDiscount,
    SeasonalDiscount,
)
from discount_engine.strategies.base import Number


class DiscountFactory:
    """Builds discount strategies from a type tag and configuration."""

    def __init__(
        self,
        config: Optional[DiscountConfig] = None,
        cache: Optional[DiscountConfigCache] = None,
    ):
        """
        Initialize factory.

        Args:
            config: Explicit configuration. When given, the cache is never consulted.
            cache: Lazily loaded configuration (defaults to the process-wide cache)
        """
        self._config = config
        self._cache = cache or config_cache

    @property
    def config(self) -> DiscountConfig:
        if self._config is not None:
            return self._config
        return self._cache.get()

    def create_discount(self, discount_type: str, value: Optional[Number] = None) -> DiscountStrategy:
        """
        Create a discount strategy.

        Args:
            discount_type: Type tag, a key of the configuration
            value: User supplied number. Percentage for "percentage", amount for
                   "fixed", general percentage for "seasonal". Ignored for "bulk".

        Returns:
            Fully initialized strategy

        Raises:
            ConfigurationError: If the configuration cannot be loaded
            InvalidTypeError: If discount_type is not configured
            UnsupportedTypeError: If discount_type is configured but unknown here
            MissingParameterError: If a required value or parameter is missing
        """
        logger = get_logger(__name__, discount_type=discount_type)

        try:
            strategy = self._build(discount_type, value)
        except DiscountError as e:
            metrics.discount_errors_total.labels(error_type=type(e).__name__).inc()
            logger.warning(f"Failed to create {discount_type!r} discount: {e}")
            raise

        metrics.discounts_created_total.labels(discount_type=strategy.discount_type.value).inc()
        logger.info(f"Created discount strategy: {strategy.to_dict()}")
        return strategy

    def _build(self, discount_type: str, value: Optional[Number]) -> DiscountStrategy:
        config = self.config

        entry = config.get(discount_type)
        if entry is None:
            raise InvalidTypeError(discount_type, available=config.types())

        parameters = entry.parameters

        if discount_type == DiscountType.PERCENTAGE:
            return PercentageDiscount(_require_value(discount_type, value, "percentage"))

        elif discount_type == DiscountType.FIXED:
            return FixedDiscount(_require_value(discount_type, value, "fixedAmount"))

        elif discount_type == DiscountType.BULK:
            return BulkDiscount(
                _require_parameter(discount_type, parameters, "threshold"),
                _require_parameter(discount_type, parameters, "bulkDiscountAmount"),
            )

        elif discount_type == DiscountType.SEASONAL:
            return SeasonalDiscount(
                _require_parameter(discount_type, parameters, "seasonalDiscount"),
                _require_value(discount_type, value, "generalDiscount"),
            )

        raise UnsupportedTypeError(discount_type, class_name=entry.class_name)


def _require_value(discount_type: str, value: Optional[Number], name: str) -> Number:
    if value is None:
        raise MissingParameterError(discount_type, name, source="input")
    return value


def _require_parameter(discount_type: str, parameters: dict[str, Decimal], name: str) -> Decimal:
    if name not in parameters:
        raise MissingParameterError(discount_type, name, source="configuration")
    return parameters[name]


def create_discount(discount_type: str, value: Optional[Number] = None) -> DiscountStrategy:
    """Create a discount strategy using the process-wide configuration."""
    return DiscountFactory().create_discount(discount_type, value)
