"""Discount engine error types."""


class DiscountError(Exception):
    """Base class for discount engine errors."""

    pass


class ConfigurationError(DiscountError):
    """Discount configuration is missing or cannot be parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Configuration error in {path}: {reason}")


class InvalidTypeError(DiscountError):
    """Requested discount type is not present in the configuration."""

    def __init__(self, discount_type: str, available: list[str] | None = None):
        self.discount_type = discount_type
        self.available = available or []
        message = f"Invalid discount type specified: {discount_type}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class UnsupportedTypeError(DiscountError):
    """Discount type is configured but no strategy can be built for it."""

    def __init__(self, discount_type: str, class_name: str = ""):
        self.discount_type = discount_type
        self.class_name = class_name
        super().__init__(
            f"Discount class for {discount_type} not found"
            f"{f' (configured class: {class_name})' if class_name else ''}"
        )


class MissingParameterError(DiscountError):
    """A numeric input required to build a strategy was not supplied."""

    def __init__(self, discount_type: str, parameter: str, source: str):
        self.discount_type = discount_type
        self.parameter = parameter
        self.source = source
        super().__init__(
            f"Missing {source} parameter '{parameter}' for {discount_type} discount"
        )


class InvalidAmountError(DiscountError):
    """Raised when user input cannot be read as a number."""

    pass
