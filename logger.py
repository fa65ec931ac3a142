"""Logging configuration for Pine Valley.

Ledger activity (account created, deposit, transfer, ...) goes to a dated
file in the log directory. The console gets the same records unless the
caller raises its level, as the interactive shell does so that its own
prompts are not interleaved with log lines.
"""

import logging
from datetime import date
from typing import Optional

from config import Config

LOGGER_NAME = "pinevalley"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def _file_handler(config: Config) -> logging.Handler:
    """Handler writing to pinevalley-{date}.log under config.log_dir."""
    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = config.log_dir / f"pinevalley-{date.today().isoformat()}.log"
    handler = logging.FileHandler(log_file_path, encoding="utf-8")
    handler.setLevel(config.log_level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(level) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logging(config: Config, console_level: Optional[str] = None) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.
        console_level: Minimum level shown on the console. Defaults to
            config.log_level.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Calling this twice (tests, repeated CLI runs in one process) must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    logger.addHandler(_file_handler(config))
    logger.addHandler(_console_handler(console_level or config.log_level))

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The pinevalley logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
