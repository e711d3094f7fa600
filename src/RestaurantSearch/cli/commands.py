"""Command implementations for the RestaurantSearch CLI.

Encapsulates command logic, separated from CLI parameter handling and
resource management.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from RestaurantSearch.core.models import SearchPage
from RestaurantSearch.core.query import SearchParameters
from RestaurantSearch.renderers import OutputWriter
from RestaurantSearch.services.indexing import DEFAULT_BATCH_SIZE, RestaurantIndexer
from RestaurantSearch.services.search import RestaurantSearchService
from RestaurantSearch.storage import load_records
from RestaurantSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one search and hand the page to the output writer."""

    search_service: RestaurantSearchService
    output_writer: OutputWriter

    def execute(self, params: SearchParameters) -> SearchPage:
        log.debug(
            "Running search query=%r sort=%s order=%s page=%d",
            params.query,
            params.sort_field,
            params.sort_order,
            params.page,
        )
        page = self.search_service.search(params)
        self.output_writer.write_page(page, params)
        return page


@dataclass(slots=True)
class CreateIndexCommand:
    """Create the restaurant index."""

    indexer: RestaurantIndexer

    def execute(self, *, force: bool = False) -> bool:
        return self.indexer.create_index(force=force)


@dataclass(slots=True)
class ImportCommand:
    """Load restaurant records from a JSON file and bulk-index them."""

    indexer: RestaurantIndexer

    def execute(self, path: Path, *, batch_size: int = DEFAULT_BATCH_SIZE, create_index: bool = False) -> int:
        """Import records from `path`.

        Args:
            path: JSON file of restaurant records.
            batch_size: Documents per bulk request.
            create_index: Create the index first when it does not exist.

        Returns:
            Number of documents indexed.
        """
        records = load_records(path)
        log.info("Loaded %d restaurants from %s", len(records), path)
        if create_index:
            self.indexer.create_index(force=False)
        count = self.indexer.import_restaurants(records, batch_size=batch_size)
        log.info("Imported %d restaurants into %s", count, self.indexer.index)
        return count
