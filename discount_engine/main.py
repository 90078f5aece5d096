"""Command-line entry point: prompt for an amount and discount, print the result."""

import argparse
import logging
import sys
from decimal import Decimal
from typing import Callable, Optional

from discount_engine.calculator import DiscountCalculator
from discount_engine.discount_config import config_cache
from discount_engine.exceptions import DiscountError, InvalidAmountError
from discount_engine.factory import create_discount
from discount_engine.formatters import format_amount, parse_amount
from discount_engine.logging_config import setup_logging
from discount_engine.strategies import DiscountType

logger = logging.getLogger(__name__)

AMOUNT_PROMPT = "Enter the original amount: "
TYPE_PROMPT = "Enter discount type (percentage/fixed/bulk/seasonal): "

# Bulk takes everything from configuration, so it has no prompt
VALUE_PROMPTS = {
    DiscountType.PERCENTAGE.value: "Enter the discount percentage: ",
    DiscountType.FIXED.value: "Enter the fixed discount amount: ",
    DiscountType.SEASONAL.value: "Enter the general discount percentage: ",
}


def _decimal_arg(text: str) -> Decimal:
    try:
        return parse_amount(text)
    except InvalidAmountError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="discount-engine",
        description="Apply a discount to an amount. Missing values are prompted for.",
    )
    parser.add_argument("--amount", type=_decimal_arg, default=None, help="Original amount")
    parser.add_argument(
        "--type",
        dest="discount_type",
        default=None,
        help="Discount type (percentage/fixed/bulk/seasonal)",
    )
    parser.add_argument(
        "--value",
        type=_decimal_arg,
        default=None,
        help="Percentage, fixed amount or general percentage depending on type",
    )
    parser.add_argument("--config", default=None, help="Path to the discount configuration JSON")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL setting)",
    )
    return parser


def run(
    amount: Optional[Decimal] = None,
    discount_type: Optional[str] = None,
    value: Optional[Decimal] = None,
    prompt: Optional[Callable[[str], str]] = None,
) -> Decimal:
    """
    Collect any missing inputs, build the discount and apply it.

    Raises:
        DiscountError: On invalid input, type or configuration
    """
    prompt = prompt or input

    if amount is None:
        amount = parse_amount(prompt(AMOUNT_PROMPT))

    if discount_type is None:
        discount_type = prompt(TYPE_PROMPT)
    discount_type = discount_type.strip().lower()

    if value is None and discount_type in VALUE_PROMPTS:
        value = parse_amount(prompt(VALUE_PROMPTS[discount_type]))

    discount = create_discount(discount_type, value)
    return DiscountCalculator().calculate_discount(discount, amount)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    if args.config:
        config_cache.reset(args.config)

    try:
        final_amount = run(
            amount=args.amount,
            discount_type=args.discount_type,
            value=args.value,
        )
    except DiscountError as e:
        print(f"Error: {e}")
        return 1
    except (EOFError, KeyboardInterrupt):
        print("Error: input aborted")
        return 1

    logger.info(f"Final amount: {final_amount}")
    print(f"The final amount after discount is: {format_amount(final_amount)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
