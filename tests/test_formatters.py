"""Tests for amount formatting and parsing."""

from decimal import Decimal

import pytest

from discount_engine.exceptions import InvalidAmountError
from discount_engine.formatters import format_amount, parse_amount


class TestFormatAmount:
    def test_default_symbol(self):
        assert format_amount(Decimal("900")) == "Tk900.00"

    def test_thousands_separator(self):
        assert format_amount(Decimal("1234567.891")) == "Tk1,234,567.89"

    def test_rounds_half_up(self):
        assert format_amount(Decimal("0.125")) == "Tk0.13"
        assert format_amount(Decimal("2.675")) == "Tk2.68"

    def test_negative(self):
        assert format_amount(Decimal("-50")) == "Tk-50.00"

    def test_negative_zero(self):
        assert format_amount(Decimal("-0.001")) == "Tk0.00"

    def test_custom_symbol(self):
        assert format_amount(12, currency_symbol="$") == "$12.00"


class TestParseAmount:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1000", Decimal("1000")),
            (" 12.50 ", Decimal("12.50")),
            ("1,250.75", Decimal("1250.75")),
            ("-5", Decimal("-5")),
            ("12,345,678", Decimal("12345678")),
            ("-1,000.5", Decimal("-1000.5")),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "nan", "inf"])
    def test_invalid(self, text):
        with pytest.raises(InvalidAmountError):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["1,2,3", "12,34", "1,2345", "1234,567", ",100", "1.000,50"])
    def test_misplaced_commas(self, text):
        with pytest.raises(InvalidAmountError, match="Not a number"):
            parse_amount(text)
