from dataclasses import dataclass
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

CENTS = Decimal("0.01")

# Significant digits available for balances and balance arithmetic; wider
# values are rejected rather than rounded.
MONEY_PRECISION = 64


def money_context():
    """Decimal context wide enough that balance sums stay exact."""
    return localcontext(Context(prec=MONEY_PRECISION, rounding=ROUND_HALF_UP))


def to_cents(value) -> Decimal:
    """Round a monetary value to 2 decimal places, half-up.

    Raises:
        ValueError: If the value is not a finite number or needs more than
            MONEY_PRECISION digits.
    """
    try:
        value = Decimal(value)
        if not value.is_finite():
            raise InvalidOperation
        with money_context():
            return value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"{value!r} is not a representable amount")


@dataclass
class Account:
    account_number: int  # assigned by the ledger, starts at 1001
    owner_name: str  # fixed at creation
    balance: Decimal  # always 2 decimal places

    def __setattr__(self, name, value):
        # Number and owner are fixed once set; balance is re-rounded on every assignment.
        if name in ("account_number", "owner_name") and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed after creation")
        if name == "balance":
            value = to_cents(value)
        super().__setattr__(name, value)

    def set_balance(self, new_balance: Decimal) -> None:
        self.balance = new_balance

    def to_dict(self) -> dict:
        """Convert account to a plain dictionary."""
        return {
            "account_number": self.account_number,
            "owner_name": self.owner_name,
            "balance": format(self.balance, "f"),
        }

    def __str__(self) -> str:
        return (
            f"Account #{self.account_number} | Name: {self.owner_name} "
            f"| Balance: {self.balance:f}"
        )
