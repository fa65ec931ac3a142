"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary data directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "pinevalley",
        data_dir=tmp_path / "pinevalley" / "data",
        data_filename="accounts.txt",
        log_level="DEBUG",
        log_dir=tmp_path / "pinevalley" / "logs",
        first_account_number=1001,
    )


@pytest.fixture
def services(test_config):
    """Create a Services container backed by a temporary accounts file.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config)


@pytest.fixture
def ledger(services):
    """A loaded, empty ledger."""
    services.ledger.load()
    return services.ledger


@pytest.fixture
def data_path(test_config):
    """Path of the accounts file used by the test ledger."""
    return test_config.data_path
