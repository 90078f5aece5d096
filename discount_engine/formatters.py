"""Amount parsing and display helpers."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from discount_engine.config import settings
from discount_engine.exceptions import InvalidAmountError
from discount_engine.strategies.base import Number, to_decimal

CENTS = Decimal("0.01")

# Commas allowed only as thousands separators: 1,250 or -12,345,678.90
THOUSANDS_PATTERN = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$")


def format_amount(amount: Number, currency_symbol: Optional[str] = None) -> str:
    """
    Format an amount for display.

    Two decimals rounded half-up, comma thousands separators, currency symbol
    in front: Decimal("1234.5") -> "Tk1,234.50", Decimal("-50") -> "Tk-50.00".
    """
    symbol = settings.currency_symbol if currency_symbol is None else currency_symbol
    value = to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    if value.is_zero():
        value = abs(value)
    return f"{symbol}{value:,.2f}"


def parse_amount(text: str) -> Decimal:
    """
    Parse user input as a Decimal.

    Raises:
        InvalidAmountError: If text is blank, not a finite number, or uses
            commas anywhere but as thousands separators
    """
    cleaned = (text or "").strip()
    if not cleaned:
        raise InvalidAmountError("No amount entered")
    if "," in cleaned:
        if not THOUSANDS_PATTERN.match(cleaned):
            raise InvalidAmountError(f"Not a number: {cleaned}")
        cleaned = cleaned.replace(",", "")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as e:
        raise InvalidAmountError(f"Not a number: {text.strip()}") from e
    if not value.is_finite():
        raise InvalidAmountError(f"Not a number: {text.strip()}")
    return value
