"""Discount configuration file loading and process-wide cache.

The configuration file is a JSON object keyed by discount type tag:

    {
        "bulk": {
            "class": "BulkDiscount",
            "parameters": {"threshold": 1000, "bulkDiscountAmount": 200}
        }
    }

- class: str (optional) - Strategy class name, informational only
- parameters: object of numbers (optional, default {}) - Values the factory
  reads for types that are not fully parameterized by user input
"""

import json
import logging
import threading
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from discount_engine.config import settings
from discount_engine.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class DiscountEntry(BaseModel):
    """Configuration record for one discount type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_name: str = Field(default="", alias="class")
    parameters: dict[str, Decimal] = Field(default_factory=dict)


class DiscountConfig(BaseModel):
    """Immutable mapping of discount type tag to its raw configuration record.

    Records are validated when their tag is looked up, so a malformed record
    only makes its own tag unavailable.
    """

    model_config = ConfigDict(frozen=True)

    discounts: dict[str, Any] = Field(default_factory=dict)

    def get(self, discount_type: str) -> Optional[DiscountEntry]:
        """Return the validated record for a tag, or None if absent or malformed."""
        record = self.discounts.get(discount_type)
        if record is None:
            return None
        try:
            return DiscountEntry.model_validate(record)
        except ValidationError as e:
            logger.warning(f"Ignoring malformed {discount_type!r} discount record: {e}")
            return None

    def __contains__(self, discount_type: object) -> bool:
        return discount_type in self.discounts

    def types(self) -> list[str]:
        """List configured discount type tags."""
        return list(self.discounts.keys())

    @classmethod
    def from_mapping(cls, data: Any, source: str | Path = "<mapping>") -> "DiscountConfig":
        """
        Build configuration from an already decoded value.

        Anything other than an object yields an empty configuration, so every
        lookup fails with InvalidTypeError downstream.
        """
        if not isinstance(data, dict):
            logger.warning(f"Discount configuration in {source} is not an object, no types available")
            return cls()
        return cls(discounts=data)

    @classmethod
    def from_file(cls, path: str | Path) -> "DiscountConfig":
        """
        Load configuration from a JSON file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or not valid JSON
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(path, "configuration file not found")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(path, f"invalid JSON: {e}") from e
        except OSError as e:
            raise ConfigurationError(path, f"failed to read: {e}") from e

        return cls.from_mapping(data, source=path)


def load_discount_config(path: str | Path | None = None) -> DiscountConfig:
    """Load discount configuration, defaulting to settings.discounts_config_path."""
    path = Path(path) if path else settings.discounts_config_path
    config = DiscountConfig.from_file(path)
    logger.info(f"Loaded {len(config.discounts)} discount types from {path}")
    return config


class DiscountConfigCache:
    """
    Load-once holder for the discount configuration.

    The first successful load is kept for the life of the process. A failed
    load stores nothing, so the next call tries again. Concurrent first calls
    are serialized by a lock and only one of them reads the file.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        loader: Callable[[str | Path | None], DiscountConfig] = load_discount_config,
    ):
        self.path = path
        self._loader = loader
        self._config: Optional[DiscountConfig] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._config is not None

    def get(self) -> DiscountConfig:
        """Return the cached configuration, loading it on first use."""
        config = self._config
        if config is not None:
            return config

        with self._lock:
            if self._config is None:
                self._config = self._loader(self.path)
            return self._config

    def reset(self, path: str | Path | None = None) -> None:
        """Drop the cached configuration, optionally pointing at a new file."""
        with self._lock:
            self._config = None
            if path is not None:
                self.path = path


config_cache = DiscountConfigCache()


def get_discount_config() -> DiscountConfig:
    """Return the process-wide discount configuration."""
    return config_cache.get()
