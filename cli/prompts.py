"""Parsing of operator input into the values the ledger expects."""

from decimal import Decimal

from models.account import to_cents


def parse_account_number(text: str) -> int:
    """Parse an account number.

    Raises:
        ValueError: If the text is not an integer.
    """
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError("Invalid number.")


def parse_amount(text: str) -> Decimal:
    """Parse a currency amount, rounded half-up to 2 decimals.

    Args:
        text: Raw amount, e.g. "1000" or "12.345".

    Returns:
        Positive Decimal with exactly 2 fractional digits.

    Raises:
        ValueError: If the text is not a number or the rounded amount is not positive.
    """
    try:
        amount = to_cents(text.strip())
    except ValueError:
        raise ValueError("Invalid amount format.")
    if amount <= 0:
        raise ValueError("Amount must be greater than 0.")
    return amount


def parse_name(text: str) -> str:
    """Parse a customer name.

    Raises:
        ValueError: If the name is empty after stripping.
    """
    name = text.strip()
    if not name:
        raise ValueError("Name cannot be empty.")
    return name
