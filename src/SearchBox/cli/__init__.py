"""CLI package for SearchBox command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from dotenv import load_dotenv

from SearchBox.cli.runner import CommandRunner
from SearchBox.cli.ui import cli


def main() -> None:
    """Run SearchBox CLI.

    Loads ``.env`` first so ``SEARCHBOX_CONFIG`` may come from it.
    Entry point referenced by console script in pyproject.toml.
    """
    load_dotenv()
    cli()
