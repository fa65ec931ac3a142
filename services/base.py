"""Base services container for dependency injection."""

from config import Config
from db.store import AccountStore


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a different store for testing.

    Args:
        config: Application configuration object.
        store: Optional account store for testing. If provided, the data path in config is ignored.
    """

    def __init__(self, config: Config, store=None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            store: Optional AccountStore for dependency injection (testing).
                   If None, creates an AccountStore at config.data_path.
        """
        self.config = config
        self.store = store or AccountStore(config.data_path)

        # Lazy import to avoid circular dependencies
        from services.ledger import Ledger

        self.ledger = Ledger(self.store, config.first_account_number)
