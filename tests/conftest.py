"""Shared fixtures."""

import json

import pytest

from discount_engine.discount_config import DiscountConfig, config_cache

SAMPLE_CONFIG = {
    "percentage": {"class": "PercentageDiscount"},
    "fixed": {"class": "FixedDiscount"},
    "bulk": {
        "class": "BulkDiscount",
        "parameters": {"threshold": 1000, "bulkDiscountAmount": 200},
    },
    "seasonal": {
        "class": "SeasonalDiscount",
        "parameters": {"seasonalDiscount": 10},
    },
}


@pytest.fixture
def sample_config() -> DiscountConfig:
    return DiscountConfig.from_mapping(SAMPLE_CONFIG)


@pytest.fixture
def config_file(tmp_path):
    """Write SAMPLE_CONFIG to a temporary file and return its path."""
    path = tmp_path / "discounts_config.json"
    path.write_text(json.dumps(SAMPLE_CONFIG), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Keep the process-wide cache from leaking between tests."""
    original_path = config_cache.path
    config_cache.reset()
    yield
    config_cache.reset()
    config_cache.path = original_path
