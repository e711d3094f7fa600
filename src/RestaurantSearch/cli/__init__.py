"""CLI package for RestaurantSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from RestaurantSearch.cli.runner import CommandRunner
from RestaurantSearch.cli.ui import cli


def main() -> None:
    """Run the RestaurantSearch CLI.

    Entry point referenced by the console script in pyproject.toml.
    """
    cli()
