"""Ledger service: the in-memory account registry and its snapshot persistence."""

import threading
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from db.store import AccountStore
from logger import get_logger
from models.account import Account, money_context, to_cents

logger = get_logger()

FIRST_ACCOUNT_NUMBER = 1001


class Outcome(Enum):
    """Result of a withdrawal or transfer attempt."""

    OK = "ok"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class Ledger:
    """Owns all accounts and rewrites the whole store after every change.

    Every public method holds a single lock for its full duration, including
    the trailing save, so compound read-compare-write operations never
    interleave.

    Args:
        store: Persistent medium for the account snapshot.
        first_account_number: Counter value for an empty store.
    """

    def __init__(self, store: AccountStore, first_account_number: int = FIRST_ACCOUNT_NUMBER):
        self.store = store
        self.accounts: Dict[int, Account] = {}
        self.next_account_number = first_account_number
        self._lock = threading.RLock()

    def create_account(self, owner_name: str, initial_deposit: Decimal) -> Account:
        """Open a new account.

        Args:
            owner_name: Non-empty customer name.
            initial_deposit: Positive opening balance.

        Returns:
            The created Account with its number assigned.
        """
        with self._lock:
            account_number = self.next_account_number
            self.next_account_number += 1
            account = Account(account_number, owner_name, initial_deposit)
            self.accounts[account_number] = account
            self.save()
            logger.info(f"Created account {account_number} for {owner_name}")
            return account

    def deposit(self, account_number: int, amount: Decimal) -> bool:
        """Add money to an account.

        Returns:
            True if deposited, False if the account does not exist.
        """
        with self._lock:
            account = self.accounts.get(account_number)
            if account is None:
                return False
            with money_context():
                account.set_balance(account.balance + amount)
            self.save()
            logger.info(f"Deposit {amount} to {account_number}")
            return True

    def try_withdraw(self, account_number: int, amount: Decimal) -> Outcome:
        """Take money out of an account, reporting why it failed if it did."""
        with self._lock:
            account = self.accounts.get(account_number)
            if account is None:
                return Outcome.ACCOUNT_NOT_FOUND
            if account.balance < amount:
                return Outcome.INSUFFICIENT_FUNDS
            with money_context():
                account.set_balance(account.balance - amount)
            self.save()
            logger.info(f"Withdraw {amount} from {account_number}")
            return Outcome.OK

    def withdraw(self, account_number: int, amount: Decimal) -> bool:
        """Take money out of an account.

        Returns:
            True if withdrawn, False if the account does not exist or the
            balance is lower than the amount.
        """
        return self.try_withdraw(account_number, amount) is Outcome.OK

    def try_transfer(self, from_account: int, to_account: int, amount: Decimal) -> Outcome:
        """Move money between two accounts with a single save covering both sides."""
        with self._lock:
            source = self.accounts.get(from_account)
            target = self.accounts.get(to_account)
            if source is None or target is None:
                return Outcome.ACCOUNT_NOT_FOUND
            if source.balance < amount:
                return Outcome.INSUFFICIENT_FUNDS
            if source is not target:
                # Both new balances are computed before either account changes
                with money_context():
                    new_source_balance = to_cents(source.balance - amount)
                    new_target_balance = to_cents(target.balance + amount)
                source.set_balance(new_source_balance)
                target.set_balance(new_target_balance)
            self.save()
            logger.info(f"Transfer {amount} from {from_account} to {to_account}")
            return Outcome.OK

    def transfer(self, from_account: int, to_account: int, amount: Decimal) -> bool:
        """Move money between two accounts.

        Returns:
            True if both balances changed, False if nothing changed.
        """
        return self.try_transfer(from_account, to_account, amount) is Outcome.OK

    def get_account(self, account_number: int) -> Optional[Account]:
        with self._lock:
            return self.accounts.get(account_number)

    def delete_account(self, account_number: int) -> bool:
        """Remove an account. Its number is never handed out again.

        Returns:
            True if removed, False if not found.
        """
        with self._lock:
            if self.accounts.pop(account_number, None) is None:
                return False
            self.save()
            logger.info(f"Deleted account {account_number}")
            return True

    def list_accounts(self) -> List[Account]:
        """Get all accounts ordered by account number."""
        with self._lock:
            return [self.accounts[n] for n in sorted(self.accounts)]

    def load(self) -> None:
        """Replace in-memory state with the contents of the store.

        A missing store leaves the ledger empty. A store that cannot be read
        is logged and also leaves the ledger empty.
        """
        with self._lock:
            self.accounts.clear()
            if not self.store.exists():
                logger.debug(f"No accounts file at {self.store.path}, starting empty")
                return

            try:
                loaded = self.store.read()
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Error loading data file {self.store.path}: {e}")
                return

            max_account_number = self.next_account_number - 1
            for account in loaded:
                self.accounts[account.account_number] = account
                max_account_number = max(max_account_number, account.account_number)
            self.next_account_number = max(self.next_account_number, max_account_number + 1)
            logger.debug(f"Loaded {len(self.accounts)} accounts from {self.store.path}")

    def save(self) -> None:
        """Overwrite the store with the current accounts.

        Write failures are logged; the in-memory state stays as it is.
        """
        with self._lock:
            try:
                self.store.write(self.list_accounts())
            except OSError as e:
                logger.error(f"Error saving data file {self.store.path}: {e}")
