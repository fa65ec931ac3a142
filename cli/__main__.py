#!/usr/bin/env python3
"""
Pine Valley CLI - Command-line interface for the account ledger.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    accounts     Manage accounts
    shell        Interactive menu

Examples:
    python -m cli accounts list
    python -m cli accounts create --name "Alice" --amount 1000.00
    python -m cli accounts transfer 1001 1002 300.00
    python -m cli shell
"""

import sys
import argparse
from cli import accounts, shell
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="pinevalley",
        description="Pine Valley - Customer account ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    accounts.setup_parser(subparsers)
    shell.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config, console_level=getattr(args, "console_level", None))

            # Create services container for dependency injection
            services = Services(config)
            services.ledger.load()

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
