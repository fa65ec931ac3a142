import argparse
from decimal import Decimal

from cli import shell
from cli.shell import Shell
from db.store import HEADER
from tests.helpers import read_store


def run_shell(ledger, *lines):
    """Run a shell session feeding the given lines as operator input."""
    inputs = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError

    Shell(ledger, input_func=fake_input).run()


class TestShell:
    """Tests for the interactive menu."""

    def test_create_and_list(self, ledger, capsys):
        """Test creating an account and listing it."""
        run_shell(ledger, "1", "Alice", "1000", "7", "8")

        out = capsys.readouterr().out
        assert "Account created successfully!" in out
        assert "Account #1001 | Name: Alice | Balance: 1000.00" in out
        assert "Exiting... data saved. Goodbye!" in out

    def test_deposit_withdraw_transfer(self, ledger, capsys):
        """Test the money-moving menu choices."""
        ledger.create_account("Alice", Decimal("1000.00"))
        ledger.create_account("Bob", Decimal("500.00"))

        run_shell(
            ledger,
            "2", "1001", "50",
            "3", "1001", "5000",
            "4", "1001", "1002", "300",
            "3", "9999", "1",
            "8",
        )

        out = capsys.readouterr().out
        assert "Deposit successful." in out
        assert "Withdrawal failed (insufficient funds)." in out
        assert "Transfer successful." in out
        assert "Withdrawal failed (account not found)." in out
        assert ledger.get_account(1001).balance == Decimal("750.00")
        assert ledger.get_account(1002).balance == Decimal("800.00")

    def test_invalid_input_cancels_action(self, ledger, capsys):
        """Test that bad input returns to the menu without changing anything."""
        run_shell(ledger, "9", "1", "", "2", "abc", "1", "Bob", "-3", "8")

        out = capsys.readouterr().out
        assert "Invalid choice. Enter number 1-8." in out
        assert "Name cannot be empty." in out
        assert "Invalid number." in out
        assert "Amount must be greater than 0." in out
        assert ledger.list_accounts() == []

    def test_view_and_delete(self, ledger, capsys):
        """Test viewing and deleting accounts."""
        ledger.create_account("Alice", Decimal("1.00"))

        run_shell(ledger, "5", "1001", "6", "1001", "6", "1001", "5", "1001", "7", "8")

        out = capsys.readouterr().out
        assert "Account #1001 | Name: Alice | Balance: 1.00" in out
        assert "Account deleted." in out
        assert "Delete failed (account not found)." in out
        assert "Account not found." in out
        assert "No accounts found." in out

    def test_end_of_input_saves(self, ledger, data_path, capsys):
        """Test that running out of input saves and exits cleanly."""
        run_shell(ledger, "1", "Alice", "10")

        assert read_store(data_path) == [HEADER, "1001,Alice,10.00"]
        assert "Goodbye!" in capsys.readouterr().out

    def test_end_of_input_mid_action(self, ledger, data_path, capsys):
        """Test that input ending inside an action still exits with a save."""
        run_shell(ledger, "2", "1001")

        assert read_store(data_path) == [HEADER]
        assert "Goodbye!" in capsys.readouterr().out


class TestShellParser:
    """Tests for the shell command parser."""

    def test_shell_keeps_console_quiet(self):
        """Test that the menu session hides INFO log lines from the console."""
        parser = argparse.ArgumentParser()
        shell.setup_parser(parser.add_subparsers(dest="command"))

        args = parser.parse_args(["shell"])

        assert args.func is shell.cmd_shell
        assert args.console_level == "WARNING"
