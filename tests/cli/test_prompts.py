from decimal import Decimal

import pytest

from cli.prompts import parse_account_number, parse_amount, parse_name


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1000", Decimal("1000.00")),
            (" 12.345 ", Decimal("12.35")),
            ("0.005", Decimal("0.01")),
            ("7.1", Decimal("7.10")),
        ],
    )
    def test_valid_amounts(self, text, expected):
        """Test that amounts are rounded half-up to 2 decimals."""
        amount = parse_amount(text)

        assert amount == expected
        assert amount.as_tuple().exponent == -2

    @pytest.mark.parametrize("text", ["0", "-5", "0.004"])
    def test_non_positive_amounts(self, text):
        """Test that zero, negatives, and values that round to zero are rejected."""
        with pytest.raises(ValueError, match="greater than 0"):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["", "abc", "1,000", "NaN", "Infinity", "1e100"])
    def test_invalid_amounts(self, text):
        """Test that unparsable amounts are rejected."""
        with pytest.raises(ValueError, match="Invalid amount format"):
            parse_amount(text)


class TestParseAccountNumber:
    """Tests for parse_account_number."""

    def test_valid(self):
        assert parse_account_number(" 1001\n") == 1001

    @pytest.mark.parametrize("text", ["", "10.5", "abc"])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid number"):
            parse_account_number(text)


class TestParseName:
    """Tests for parse_name."""

    def test_strips_whitespace(self):
        assert parse_name("  Alice  ") == "Alice"

    def test_empty_name(self):
        """Test that blank names are rejected."""
        with pytest.raises(ValueError, match="Name cannot be empty"):
            parse_name("   ")
