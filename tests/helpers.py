"""Helper utilities for tests."""

from pathlib import Path


def write_store(path: Path, *lines: str) -> None:
    """Write raw lines to an accounts file, creating its directory.

    Args:
        path: Accounts file to write.
        lines: Lines to write, without newlines.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")


def read_store(path: Path) -> list:
    """Read an accounts file back as a list of lines."""
    return path.read_text(encoding="utf-8").splitlines()
