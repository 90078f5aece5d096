"""Prometheus metrics for the discount engine."""

from prometheus_client import Counter

discounts_created_total = Counter(
    "discounts_created_total",
    "Total number of discount strategies built by the factory",
    ["discount_type"],
)

discount_errors_total = Counter(
    "discount_errors_total",
    "Total number of failed discount creations",
    ["error_type"],
)

discount_calculations_total = Counter(
    "discount_calculations_total",
    "Total number of discount calculations",
    ["strategy"],
)
