#!/usr/bin/env python3
"""Interactive numbered-menu session over a single ledger."""

from cli.prompts import parse_account_number, parse_amount, parse_name
from logger import get_logger
from services.ledger import Outcome

logger = get_logger()

MENU = """Menu:
1. Create Account
2. Deposit
3. Withdraw
4. Transfer
5. View Account
6. Delete Account
7. List All Accounts
8. Save & Exit
Enter choice (1-8):"""


class Shell:
    """Menu loop that reads operator input and drives the ledger.

    Args:
        ledger: Ledger to operate on. It should already be loaded.
        input_func: Callable used to read a line; ``input`` by default.
    """

    def __init__(self, ledger, input_func=input):
        self.ledger = ledger
        self.input_func = input_func
        self.actions = {
            "1": self.create_account,
            "2": self.deposit,
            "3": self.withdraw,
            "4": self.transfer,
            "5": self.view_account,
            "6": self.delete_account,
            "7": self.list_accounts,
        }

    def run(self) -> None:
        print("=== Pine Valley Bank Management System ===")
        while True:
            print(MENU)
            try:
                choice = self.input_func("").strip()
            except EOFError:
                choice = "8"

            if choice == "8":
                self.ledger.save()
                print("Exiting... data saved. Goodbye!")
                return

            action = self.actions.get(choice)
            if action is None:
                print("Invalid choice. Enter number 1-8.")
            else:
                try:
                    action()
                except ValueError as e:
                    # Bad input cancels the current action only
                    print(e)
                except EOFError:
                    self.ledger.save()
                    print("\nExiting... data saved. Goodbye!")
                    return
            print()

    def _ask(self, prompt, parse):
        return parse(self.input_func(prompt))

    def create_account(self):
        name = self._ask("Enter customer name: ", parse_name)
        amount = self._ask("Initial deposit amount (e.g. 1000.00): ", parse_amount)
        account = self.ledger.create_account(name, amount)
        print("Account created successfully!")
        print(account)

    def deposit(self):
        account_number = self._ask("Enter Account Number: ", parse_account_number)
        amount = self._ask("Enter deposit amount: ", parse_amount)
        if self.ledger.deposit(account_number, amount):
            print("Deposit successful.")
        else:
            print("Deposit failed (account not found).")

    def withdraw(self):
        account_number = self._ask("Enter Account Number: ", parse_account_number)
        amount = self._ask("Enter withdrawal amount: ", parse_amount)
        outcome = self.ledger.try_withdraw(account_number, amount)
        if outcome is Outcome.OK:
            print("Withdrawal successful.")
        elif outcome is Outcome.INSUFFICIENT_FUNDS:
            print("Withdrawal failed (insufficient funds).")
        else:
            print("Withdrawal failed (account not found).")

    def transfer(self):
        from_account = self._ask("From Account Number: ", parse_account_number)
        to_account = self._ask("To Account Number: ", parse_account_number)
        amount = self._ask("Enter transfer amount: ", parse_amount)
        outcome = self.ledger.try_transfer(from_account, to_account, amount)
        if outcome is Outcome.OK:
            print("Transfer successful.")
        elif outcome is Outcome.INSUFFICIENT_FUNDS:
            print("Transfer failed (insufficient funds).")
        else:
            print("Transfer failed (account not found).")

    def view_account(self):
        account_number = self._ask("Enter Account Number: ", parse_account_number)
        account = self.ledger.get_account(account_number)
        print(account if account is not None else "Account not found.")

    def delete_account(self):
        account_number = self._ask("Enter Account Number to delete: ", parse_account_number)
        if self.ledger.delete_account(account_number):
            print("Account deleted.")
        else:
            print("Delete failed (account not found).")

    def list_accounts(self):
        accounts = self.ledger.list_accounts()
        if not accounts:
            print("No accounts found.")
            return
        print("All accounts:")
        for account in accounts:
            print(account)


def cmd_shell(args, services):
    """Run the interactive menu."""
    logger.debug(f"Starting shell on {services.store.path}")
    Shell(services.ledger).run()


def setup_parser(subparsers):
    """Setup shell command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "shell",
        help="Interactive menu",
        description="Run the numbered menu session (create, deposit, withdraw, ...)",
    )
    # The menu prints its own results; keep INFO audit lines in the log file only
    parser.set_defaults(func=cmd_shell, console_level="WARNING")
