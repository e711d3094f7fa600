"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, resource cleanup and
error handling for command execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import click

from RestaurantSearch.cli.commands import CreateIndexCommand, ImportCommand, SearchCommand
from RestaurantSearch.config import AppConfig
from RestaurantSearch.core.errors import InvalidSearchParameters
from RestaurantSearch.core.query import parse_search_parameters
from RestaurantSearch.renderers import create_output_writer
from RestaurantSearch.services import create_indexer, create_search_service
from RestaurantSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_search(self, action: str, raw_params: Mapping[str, Any], *, output_format: str | None = None) -> None:
        """Execute a search with full resource management.

        Args:
            action: The CLI command name (e.g. 'search').
            raw_params: Unvalidated query, sort, order and page values.
            output_format: Output format overriding `output.format`.

        Raises:
            click.UsageError: When the search parameters are invalid.
            click.Abort: When the search fails.
        """
        self._configure_logging(action)
        params_input = dict(raw_params)
        if not params_input.get("sort"):
            params_input["sort"] = self.config.search.default_sort
        try:
            params = parse_search_parameters(params_input, sortable_fields=self.config.search.sortable_fields)
        except InvalidSearchParameters as e:
            raise click.UsageError(str(e)) from e

        log.info("Index: %s (%s)", self.config.backend.index, self.config.backend.url)
        try:
            search_service = create_search_service(self.config)
            try:
                output_writer = create_output_writer(output_format or self.config.output.format)
                SearchCommand(search_service=search_service, output_writer=output_writer).execute(params)
            finally:
                search_service.close()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e

    def run_create_index(self, action: str, *, force: bool) -> None:
        """Create the configured index.

        Raises:
            click.Abort: When the backend rejects the request.
        """
        self._configure_logging(action)
        try:
            indexer = create_indexer(self.config)
            try:
                CreateIndexCommand(indexer=indexer).execute(force=force)
            finally:
                indexer.client.close()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Create index failed: %s", e)
            raise click.Abort from e

    def run_import(self, action: str, path: Path, *, batch_size: int, create_index: bool) -> None:
        """Import restaurant records from a JSON file.

        Raises:
            click.Abort: When loading or indexing fails.
        """
        self._configure_logging(action)
        try:
            indexer = create_indexer(self.config)
            try:
                ImportCommand(indexer=indexer).execute(path, batch_size=batch_size, create_index=create_index)
            finally:
                indexer.client.close()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Import failed: %s", e)
            raise click.Abort from e

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
