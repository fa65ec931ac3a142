"""Flat-file storage for the account snapshot.

Each line of the file is one account, ``<number>,<name>,<balance>``. Lines
starting with ``#`` are comments. Commas in owner names are written as
semicolons, so the original name cannot be recovered from the file.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from logger import get_logger
from models.account import Account, to_cents

logger = get_logger()

HEADER = "# AccountNumber,CustomerName,Balance"
COMMENT_PREFIX = "#"


def format_record(account: Account) -> str:
    """Render an account as a single store line (without newline).

    Args:
        account: Account to render.

    Returns:
        The record text, with commas in the owner name replaced by semicolons.
    """
    safe_name = account.owner_name.replace(",", ";")
    return f"{account.account_number},{safe_name},{account.balance:f}"


def parse_record(line: str) -> Optional[Account]:
    """Parse one store line into an Account.

    Args:
        line: Raw line from the store.

    Returns:
        Account, or None for blank lines, comments and records with fewer
        than three fields.

    Raises:
        ValueError: If the account number or balance cannot be converted.
    """
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    parts = line.split(",", 2)
    if len(parts) < 3:
        return None

    # Plain positive digits only, no sign or underscores
    number_text = parts[0]
    account_number = int(number_text) if number_text.isascii() and number_text.isdigit() else 0
    if account_number <= 0:
        raise ValueError(f"invalid account number {number_text!r}")
    try:
        balance = to_cents(parts[2])
    except ValueError:
        raise ValueError(f"invalid balance {parts[2]!r}")

    return Account(account_number=account_number, owner_name=parts[1], balance=balance)


class AccountStore:
    """Reads and writes the account snapshot file.

    Args:
        path: Location of the accounts file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> List[Account]:
        """Read every valid account record from the file.

        Malformed records are skipped with a warning.

        Returns:
            Accounts in file order. Empty if the file does not exist.

        Raises:
            OSError: If the file exists but cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        if not self.exists():
            return []

        accounts = []
        with open(self.path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                try:
                    account = parse_record(line)
                except ValueError as e:
                    logger.warning(
                        f"Skipping malformed record on line {line_number} of {self.path}: {e}"
                    )
                    continue
                if account is not None:
                    accounts.append(account)
        return accounts

    def write(self, accounts: Iterable[Account]) -> None:
        """Replace the file contents with the given accounts.

        Args:
            accounts: Accounts to write, already in the desired order.

        Raises:
            OSError: If the file cannot be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8", newline="\n") as f:
            f.write(HEADER + "\n")
            for account in accounts:
                f.write(format_record(account) + "\n")
