#!/usr/bin/env python3

import sys
from cli.prompts import parse_amount, parse_name
from logger import get_logger
from services.ledger import Outcome

logger = get_logger()

FAILURE_MESSAGES = {
    Outcome.ACCOUNT_NOT_FOUND: "account not found",
    Outcome.INSUFFICIENT_FUNDS: "insufficient funds",
}


def _amount_or_exit(text):
    try:
        return parse_amount(text)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def cmd_list(args, services):
    """List all accounts in the ledger."""
    accounts = services.ledger.list_accounts()

    if not accounts:
        logger.info("No accounts found.")
        return

    logger.info("All accounts:")
    for account in accounts:
        logger.info(str(account))

    logger.info(f"\nTotal accounts: {len(accounts)}")


def cmd_show(args, services):
    """Show a single account."""
    account = services.ledger.get_account(args.account_number)
    if account is None:
        logger.error(f"Account {args.account_number} not found.")
        sys.exit(1)
    logger.info(str(account))


def cmd_create(args, services):
    """Create a new account, prompting for anything not given on the command line."""
    name_text = args.name
    amount_text = args.amount

    if name_text is None or amount_text is None:
        print("\nCreate New Account")
        print("=" * 80)
    if name_text is None:
        name_text = input("Customer name: ")
    try:
        name = parse_name(name_text)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if amount_text is None:
        amount_text = input("Initial deposit amount (e.g. 1000.00): ")
    amount = _amount_or_exit(amount_text)

    account = services.ledger.create_account(name, amount)
    logger.info("✓ Account created successfully!")
    logger.info(str(account))


def cmd_deposit(args, services):
    """Deposit money into an account."""
    amount = _amount_or_exit(args.amount)
    if not services.ledger.deposit(args.account_number, amount):
        logger.error("Deposit failed (account not found).")
        sys.exit(1)
    logger.info("✓ Deposit successful.")


def cmd_withdraw(args, services):
    """Withdraw money from an account."""
    amount = _amount_or_exit(args.amount)
    outcome = services.ledger.try_withdraw(args.account_number, amount)
    if outcome is not Outcome.OK:
        logger.error(f"Withdrawal failed ({FAILURE_MESSAGES[outcome]}).")
        sys.exit(1)
    logger.info("✓ Withdrawal successful.")


def cmd_transfer(args, services):
    """Transfer money between two accounts."""
    amount = _amount_or_exit(args.amount)
    outcome = services.ledger.try_transfer(args.from_account, args.to_account, amount)
    if outcome is not Outcome.OK:
        logger.error(f"Transfer failed ({FAILURE_MESSAGES[outcome]}).")
        sys.exit(1)
    logger.info("✓ Transfer successful.")


def cmd_delete(args, services):
    """Delete an account by number."""
    account = services.ledger.get_account(args.account_number)
    if account is None:
        logger.error(f"Account {args.account_number} not found.")
        sys.exit(1)

    if not args.yes:
        logger.info("\nAccount to delete:")
        logger.info(f"  {account}")
        confirm = (
            input("\nAre you sure you want to delete this account? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    if services.ledger.delete_account(args.account_number):
        logger.info(f"✓ Account {args.account_number} deleted.")
    else:
        logger.error("Delete failed (account not found).")
        sys.exit(1)


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Manage accounts",
        description="Create, fund, inspect and delete customer accounts",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts list
    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)

    # accounts show
    show_parser = accounts_subparsers.add_parser("show", help="Show one account")
    show_parser.add_argument("account_number", type=int, help="Account number")
    show_parser.set_defaults(func=cmd_show)

    # accounts create
    create_parser = accounts_subparsers.add_parser(
        "create", help="Create a new account (prompts for missing values)"
    )
    create_parser.add_argument("--name", help="Customer name")
    create_parser.add_argument("--amount", help="Initial deposit, e.g. 1000.00")
    create_parser.set_defaults(func=cmd_create)

    # accounts deposit
    deposit_parser = accounts_subparsers.add_parser("deposit", help="Deposit money")
    deposit_parser.add_argument("account_number", type=int, help="Account number")
    deposit_parser.add_argument("amount", help="Amount, e.g. 25.00")
    deposit_parser.set_defaults(func=cmd_deposit)

    # accounts withdraw
    withdraw_parser = accounts_subparsers.add_parser("withdraw", help="Withdraw money")
    withdraw_parser.add_argument("account_number", type=int, help="Account number")
    withdraw_parser.add_argument("amount", help="Amount, e.g. 25.00")
    withdraw_parser.set_defaults(func=cmd_withdraw)

    # accounts transfer
    transfer_parser = accounts_subparsers.add_parser(
        "transfer", help="Transfer money between accounts"
    )
    transfer_parser.add_argument("from_account", type=int, help="Source account number")
    transfer_parser.add_argument("to_account", type=int, help="Target account number")
    transfer_parser.add_argument("amount", help="Amount, e.g. 25.00")
    transfer_parser.set_defaults(func=cmd_transfer)

    # accounts delete
    delete_parser = accounts_subparsers.add_parser("delete", help="Delete an account")
    delete_parser.add_argument("account_number", type=int, help="Account number")
    delete_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)
